# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Domain Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Tagged variants for every construction / system category the engine knows,
# and the frozen input snapshot (Dwelling) and output (DpeResult) structures.
# Enum values are the stable codes exchanged with the data-collection layer.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


# ─────────────────────────────────────────────────────────────────────────────
# CLIMATE
# ─────────────────────────────────────────────────────────────────────────────

class ClimateZone(str, Enum):
    """French winter climate zones (RT / DPE nomenclature)."""

    H1A = "H1a"
    H1B = "H1b"
    H1C = "H1c"
    H2A = "H2a"
    H2B = "H2b"
    H2C = "H2c"
    H2D = "H2d"
    H3 = "H3"

    @property
    def family(self) -> str:
        """Column key of the year-bracket tables: "H1", "H2" or "H3"."""
        return self.value[:2]


# ─────────────────────────────────────────────────────────────────────────────
# WALLS & ADJACENCY
# ─────────────────────────────────────────────────────────────────────────────

class WallMaterial(str, Enum):
    STONE = "stone"
    SOLID_BRICK = "solid_brick"
    HOLLOW_BRICK = "hollow_brick"
    SOLID_CONCRETE = "solid_concrete"
    CONCRETE_BLOCK = "concrete_block"
    TIMBER_FRAME = "timber_frame"
    LEGACY_EARTH = "legacy_earth"  # cob, wattle and daub, old timber


class WallInsulation(str, Enum):
    NONE = "none"
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    DISTRIBUTED = "distributed"  # insulation spread through the masonry


class Adjacency(str, Enum):
    """What lies on the other side of a wall or door."""

    EXTERIOR = "exterior"
    OPEN_CIRCULATION = "open_circulation"
    UNHEATED_ATTIC = "unheated_attic"
    UNHEATED_CELLAR = "unheated_cellar"
    UNHEATED_GARAGE = "unheated_garage"
    CLOSED_CIRCULATION = "closed_circulation"
    SOLAR_BUFFER = "solar_buffer"
    CRAWLSPACE_WALL = "crawlspace_wall"
    CALCULATED_UNHEATED = "calculated_unheated"  # b_tr from Aiu / Aue
    HEATED_NEIGHBOUR = "heated_neighbour"


# Adjacencies a door may open onto
DOOR_ADJACENCIES: frozenset[Adjacency] = frozenset({
    Adjacency.EXTERIOR,
    Adjacency.OPEN_CIRCULATION,
    Adjacency.CLOSED_CIRCULATION,
    Adjacency.UNHEATED_GARAGE,
    Adjacency.UNHEATED_CELLAR,
    Adjacency.SOLAR_BUFFER,
    Adjacency.CALCULATED_UNHEATED,
    Adjacency.HEATED_NEIGHBOUR,
})


# ─────────────────────────────────────────────────────────────────────────────
# FLOORS & ROOFS
# ─────────────────────────────────────────────────────────────────────────────

class SlabInsulation(str, Enum):
    """Insulation position of a floor or roof slab.

    For floors INTERIOR is under-screed and EXTERIOR is on the underside;
    for roofs INTERIOR is under the ceiling and EXTERIOR is laid on top.
    """

    NONE = "none"
    INTERIOR = "interior"
    EXTERIOR = "exterior"
    COMBINED = "combined"
    UNKNOWN = "unknown"


class FloorStructure(str, Enum):
    SOLID_CONCRETE = "solid_concrete"
    CONCRETE_HOLLOW_CORE = "concrete_hollow_core"
    TIMBER_CONCRETE_HOLLOW_CORE = "timber_concrete_hollow_core"
    POLYSTYRENE_INFILL = "polystyrene_infill"
    TIMBER_JOISTS = "timber_joists"
    OTHER = "other"


class FloorSituation(str, Enum):
    CRAWLSPACE = "crawlspace"
    UNHEATED_CELLAR = "unheated_cellar"
    SLAB_ON_GRADE = "slab_on_grade"
    OPEN_AIR = "open_air"
    UNHEATED_ROOM = "unheated_room"

    @property
    def ground_coupled(self) -> bool:
        return self in (
            FloorSituation.CRAWLSPACE,
            FloorSituation.UNHEATED_CELLAR,
            FloorSituation.SLAB_ON_GRADE,
        )


class RoofTableFamily(str, Enum):
    ATTIC = "attic"
    FLAT_ROOF = "flat_roof"


class RoofStructure(str, Enum):
    LOST_ATTIC = "lost_attic"
    CONVERTED_ATTIC = "converted_attic"
    FLAT_ROOF = "flat_roof"
    STEEL_DECK = "steel_deck"
    PLASTERBOARD_CEILING = "plasterboard_ceiling"
    THATCH = "thatch"
    OTHER = "other"


class RoofSituation(str, Enum):
    EXTERIOR = "exterior"
    UNHEATED_ATTIC = "unheated_attic"
    UNHEATED_ROOM = "unheated_room"
    HEATED_ROOM = "heated_room"  # no loss through this surface


# ─────────────────────────────────────────────────────────────────────────────
# OPENINGS
# ─────────────────────────────────────────────────────────────────────────────

class OpeningKind(str, Enum):
    WINDOW = "window"
    FRENCH_WINDOW = "french_window"
    ROOF_WINDOW = "roof_window"
    OPAQUE_DOOR = "opaque_door"
    GLAZED_DOOR = "glazed_door"

    @property
    def is_door(self) -> bool:
        return self in (OpeningKind.OPAQUE_DOOR, OpeningKind.GLAZED_DOOR)

    @property
    def has_open_sill(self) -> bool:
        """Openings without a bottom junction with the wall (threshold)."""
        return self in (OpeningKind.OPAQUE_DOOR, OpeningKind.FRENCH_WINDOW)


class Glazing(str, Enum):
    SINGLE = "single"
    DOUBLE_OLD = "double_old"  # air-filled, before ~2000
    DOUBLE_RECENT = "double_recent"  # argon, low-e
    TRIPLE = "triple"


class Frame(str, Enum):
    WOOD = "wood"
    PVC = "pvc"
    METAL = "metal"
    METAL_THERMAL_BREAK = "metal_thermal_break"


class DoorMaterial(str, Enum):
    SOLID_WOOD = "solid_wood"
    INSULATED_WOOD = "insulated_wood"
    STEEL = "steel"
    INSULATED_STEEL = "insulated_steel"
    ALUMINIUM = "aluminium"
    ALUMINIUM_THERMAL_BREAK = "aluminium_thermal_break"
    PVC = "pvc"
    OTHER = "other"


class SolarMask(str, Enum):
    """Near-mask category; collected for reporting, not integrated."""

    NONE = "none"
    BALCONY_UNDER_1M = "balcony_under_1m"
    BALCONY_1_TO_2M = "balcony_1_to_2m"
    BALCONY_2_TO_3M = "balcony_2_to_3m"
    BALCONY_OVER_3M = "balcony_over_3m"
    LOGGIA = "loggia"
    SIDE_WALL = "side_wall"


# ─────────────────────────────────────────────────────────────────────────────
# VENTILATION
# ─────────────────────────────────────────────────────────────────────────────

class VentilationCategory(str, Enum):
    PASSIVE = "passive"
    SIMPLE_FLOW = "simple_flow"
    DOUBLE_FLOW = "double_flow"
    HYBRID = "hybrid"
    EXISTING_DUCT = "existing_duct"


class VentilationType(str, Enum):
    WINDOW_OPENING = "window_opening"
    HIGH_LOW_VENTS = "high_low_vents"
    NATURAL_DUCT = "natural_duct"
    NATURAL_DUCT_HYGRO = "natural_duct_hygro"
    SF_SELF_REGULATING = "sf_self_regulating"
    SF_HYGRO_A = "sf_hygro_a"
    SF_HYGRO_B = "sf_hygro_b"
    SF_GAS = "sf_gas"
    LOW_PRESSURE_SELF_REGULATING = "low_pressure_self_regulating"
    LOW_PRESSURE_HYGRO_A = "low_pressure_hygro_a"
    LOW_PRESSURE_HYGRO_B = "low_pressure_hygro_b"
    MECHANICAL_ON_EXISTING_DUCT = "mechanical_on_existing_duct"
    DF_INDIVIDUAL_EXCHANGER = "df_individual_exchanger"
    DF_COLLECTIVE_EXCHANGER = "df_collective_exchanger"
    DF_NO_EXCHANGER = "df_no_exchanger"
    EARTH_TUBE_NO_EXCHANGER = "earth_tube_no_exchanger"
    EARTH_TUBE_EXCHANGER = "earth_tube_exchanger"
    HYBRID_SELF_REGULATING = "hybrid_self_regulating"
    HYBRID_HYGRO = "hybrid_hygro"


class VentilationPeriod(str, Enum):
    BEFORE_1982 = "before_1982"
    FROM_1982_TO_2000 = "1982_2000"
    FROM_2001_TO_2012 = "2001_2012"
    AFTER_2012 = "after_2012"


# ─────────────────────────────────────────────────────────────────────────────
# HEATING & DHW
# ─────────────────────────────────────────────────────────────────────────────

class Fuel(str, Enum):
    GAS = "gas"
    OIL = "oil"
    WOOD = "wood"
    ELECTRICITY = "electricity"
    DISTRICT_HEAT = "district_heat"
    NONE = "none"


class HeatingGenerator(str, Enum):
    GAS_LEGACY = "gas_legacy"
    GAS_STANDARD = "gas_standard"
    GAS_LOW_TEMPERATURE = "gas_low_temperature"
    GAS_CONDENSING = "gas_condensing"
    OIL_LEGACY = "oil_legacy"
    OIL_STANDARD = "oil_standard"
    OIL_LOW_TEMPERATURE = "oil_low_temperature"
    OIL_CONDENSING = "oil_condensing"
    LPG_STANDARD = "lpg_standard"
    LPG_CONDENSING = "lpg_condensing"
    ELECTRIC_CONVECTOR = "electric_convector"
    ELECTRIC_RADIANT_PANEL = "electric_radiant_panel"
    ELECTRIC_STORAGE = "electric_storage"
    ELECTRIC_TOWEL_RAIL = "electric_towel_rail"
    ELECTRIC_OTHER = "electric_other"
    ELECTRIC_UNDERFLOOR = "electric_underfloor"
    HEAT_PUMP_AIR_WATER_H1 = "heat_pump_air_water_h1"
    HEAT_PUMP_AIR_WATER_H2 = "heat_pump_air_water_h2"
    HEAT_PUMP_AIR_WATER_H3 = "heat_pump_air_water_h3"
    HEAT_PUMP_AIR_AIR = "heat_pump_air_air"
    HEAT_PUMP_GEOTHERMAL = "heat_pump_geothermal"
    WOOD_LOG_STOVE = "wood_log_stove"
    WOOD_PELLET_STOVE = "wood_pellet_stove"
    WOOD_LOG_BOILER = "wood_log_boiler"
    WOOD_PELLET_BOILER = "wood_pellet_boiler"
    DISTRICT_NETWORK = "district_network"


class Regulation(str, Enum):
    """Heating regulation quality, worst to best intermittency."""

    NONE = "none"
    CENTRAL_NO_MINIMUM = "central_no_minimum"  # clock / programmer only
    CENTRAL_WITH_MINIMUM = "central_with_minimum"  # central thermostat
    ROOM_BY_ROOM = "room_by_room"
    CONNECTED_THERMOSTAT = "connected_thermostat"
    ROOM_WITH_PRESENCE_DETECTION = "room_with_presence_detection"


class InstallationMode(str, Enum):
    INDIVIDUAL = "individual"
    COLLECTIVE = "collective"


class Emitter(str, Enum):
    CAST_IRON_RADIATOR = "cast_iron_radiator"
    STEEL_RADIATOR = "steel_radiator"
    LOW_TEMPERATURE_UNDERFLOOR = "low_temperature_underfloor"
    ELECTRIC_CONVECTOR = "electric_convector"
    FORCED_AIR = "forced_air"


class NetworkInsulation(str, Enum):
    WELL_INSULATED = "well_insulated"
    PARTIAL = "partial"
    UNINSULATED = "uninsulated"


class DhwGenerator(str, Enum):
    ELECTRIC_TANK = "electric_tank"
    THERMODYNAMIC = "thermodynamic"
    GAS_INSTANT = "gas_instant"
    COUPLED_TO_HEATING = "coupled_to_heating"
    SOLAR = "solar"


class TankInsulation(str, Enum):
    GOOD = "good"
    PARTIAL = "partial"
    NONE = "none"
    UNKNOWN = "unknown"


# ─────────────────────────────────────────────────────────────────────────────
# INPUT SNAPSHOT
# ─────────────────────────────────────────────────────────────────────────────

YearInput = Union[int, str, None]


@dataclass(frozen=True)
class Room:
    name: str
    surface_m2: float


@dataclass(frozen=True)
class WallSegment:
    material: WallMaterial = WallMaterial.CONCRETE_BLOCK
    insulation: WallInsulation = WallInsulation.NONE
    length_m: float = 0.0
    height_m: float = 2.5
    adjacency: Adjacency = Adjacency.EXTERIOR
    unheated_internal_area_m2: Optional[float] = None  # Aiu
    unheated_external_area_m2: Optional[float] = None  # Aue
    insulation_thickness_m: Optional[float] = None
    insulation_year: YearInput = None

    @property
    def surface_m2(self) -> float:
        return self.length_m * self.height_m


@dataclass(frozen=True)
class FloorSlab:
    structure: FloorStructure = FloorStructure.OTHER
    situation: FloorSituation = FloorSituation.CRAWLSPACE
    insulation: SlabInsulation = SlabInsulation.NONE
    surface_m2: Optional[float] = None  # None: reference floor area
    insulation_thickness_m: Optional[float] = None
    insulation_year: YearInput = None


@dataclass(frozen=True)
class RoofSurface:
    structure: RoofStructure = RoofStructure.OTHER
    situation: RoofSituation = RoofSituation.EXTERIOR
    insulation: SlabInsulation = SlabInsulation.NONE
    surface_m2: Optional[float] = None  # None: reference floor area
    insulation_thickness_m: Optional[float] = None
    insulation_year: YearInput = None


@dataclass(frozen=True)
class Opening:
    kind: OpeningKind = OpeningKind.WINDOW
    width_m: float = 1.2
    height_m: float = 1.2
    count: int = 1
    glazing: Glazing = Glazing.DOUBLE_OLD
    frame: Frame = Frame.PVC
    adjacency: Adjacency = Adjacency.EXTERIOR
    door_material: DoorMaterial = DoorMaterial.OTHER
    glazed_fraction_pct: float = 0.0
    solar_mask: SolarMask = SolarMask.NONE
    unheated_internal_area_m2: Optional[float] = None
    unheated_external_area_m2: Optional[float] = None

    @property
    def surface_m2(self) -> float:
        return self.width_m * self.height_m * self.count

    @property
    def perimeter_m(self) -> float:
        """Wall-junction perimeter of one opening."""
        if self.kind.has_open_sill:
            return 2 * self.height_m + self.width_m
        return 2 * (self.width_m + self.height_m)


@dataclass(frozen=True)
class VentilationSystem:
    type: Optional[VentilationType] = None  # None: not declared
    period: Optional[VentilationPeriod] = None


@dataclass(frozen=True)
class HeatingSystem:
    generator: Optional[HeatingGenerator] = None
    regulation: Optional[Regulation] = None
    installation_mode: Optional[InstallationMode] = None
    emitter: Optional[Emitter] = None
    network_insulation: Optional[NetworkInsulation] = None  # collective only
    unknown: bool = False


@dataclass(frozen=True)
class DhwSystem:
    generator: Optional[DhwGenerator] = None
    tank_insulation: Optional[TankInsulation] = None
    installation_mode: Optional[InstallationMode] = None
    unknown: bool = False


@dataclass(frozen=True)
class Dwelling:
    """Immutable snapshot of everything the engine reads."""

    climate_zone: Optional[ClimateZone] = None
    altitude_m: float = 0.0
    heated_levels: int = 1
    rooms: tuple[Room, ...] = ()
    walls: tuple[WallSegment, ...] = ()
    floors: tuple[FloorSlab, ...] = ()
    roofs: tuple[RoofSurface, ...] = ()
    openings: tuple[Opening, ...] = ()
    ventilation: VentilationSystem = field(default_factory=VentilationSystem)
    heating: HeatingSystem = field(default_factory=HeatingSystem)
    dhw: DhwSystem = field(default_factory=DhwSystem)

    @property
    def reference_floor_area_m2(self) -> float:
        return sum(room.surface_m2 for room in self.rooms)


# ─────────────────────────────────────────────────────────────────────────────
# OUTPUT
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ThermalBridge:
    junction_type: str
    length_m: float
    psi: float
    contribution: float  # W/K, rounded to 0.1

    def as_dict(self) -> dict:
        return {
            "junctionType": self.junction_type,
            "length":       self.length_m,
            "psi":          self.psi,
            "contribution": self.contribution,
        }


@dataclass(frozen=True)
class InsufficientData:
    """Returned instead of a result when the reference area is too small."""

    reference_floor_area: float
    reason: str = "reference floor area below minimum"

    def as_dict(self) -> dict:
        return {
            "insufficientData":   True,
            "referenceFloorArea": self.reference_floor_area,
            "reason":             self.reason,
        }


@dataclass(frozen=True)
class DpeResult:
    reference_floor_area: float
    grade: str
    grade_index: int
    primary_energy_index: int
    primary_energy_grade: str
    primary_energy_grade_index: int
    primary_energy_per_m2: float  # unrounded, used for classification
    ghg_index: float
    ghg_per_m2: float  # unrounded
    ghg_grade: str
    ghg_grade_index: int
    cost_range_low: int
    cost_range_high: int
    annual_cost: float
    occupants_estimate: int
    final_energy_heating: float
    final_energy_dhw: float
    final_energy_aux: float
    heating_need: float
    dhw_need: float
    h_total: float
    envelope_loss: float
    envelope_loss_with_bridges: float
    bridge_total: float
    ventilation_loss: float
    air_renewal_rate: float
    heating_generator: HeatingGenerator
    dhw_generator: DhwGenerator
    primary_energy_by_use: dict[str, float]
    thermal_bridges: tuple[ThermalBridge, ...]
    loss_breakdown: dict[str, int]
    reliability: dict
    fallbacks: tuple[str, ...] = ()

    def as_dict(self) -> dict:
        """Structure handed to the reporting / persistence layer."""
        return {
            "referenceFloorArea":       self.reference_floor_area,
            "grade":                    self.grade,
            "gradeIndex":               self.grade_index,
            "primaryEnergyIndex":       self.primary_energy_index,
            "primaryEnergyGradeLetter": self.primary_energy_grade,
            "ghgIndex":                 self.ghg_index,
            "ghgGradeLetter":           self.ghg_grade,
            "costRangeLow":             self.cost_range_low,
            "costRangeHigh":            self.cost_range_high,
            "occupantsEstimate":        self.occupants_estimate,
            "finalEnergyHeating":       self.final_energy_heating,
            "finalEnergyDHW":           self.final_energy_dhw,
            "finalEnergyAux":           self.final_energy_aux,
            "heatingNeed":              self.heating_need,
            "dhwNeed":                  self.dhw_need,
            "hTotal":                   self.h_total,
            "heatingGenerator":         self.heating_generator.value,
            "dhwGenerator":             self.dhw_generator.value,
            "thermalBridgeBreakdown":   [b.as_dict() for b in self.thermal_bridges],
            "lossBreakdownPercentages": dict(self.loss_breakdown),
            "reliability":              self.reliability,
            "fallbacks":                list(self.fallbacks),
        }
