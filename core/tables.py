# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — 3CL-DPE 2021 Lookup Tables
# © 2026 Aparajita Parihar. All rights reserved.
#
# Every coefficient table the engine reads, bundled in one frozen MethodTables
# object. Resolvers receive the bundle as an argument (DEFAULT_TABLES unless a
# caller injects another one), so nothing here is mutable process state.
#
# Sources:
#   Arrêté du 31 mars 2021 — §3.2 (Upb / Uph), §3.4 (ponts thermiques),
#   §4 (Qvarepconv), §8 (intermittence), §12–13 (rendements générateurs)
#   Guide Cerema 3CL-DPE 2021 (v3)
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, NamedTuple, Optional

from core.models import (
    Adjacency,
    ClimateZone,
    DhwGenerator,
    DoorMaterial,
    FloorSituation,
    FloorStructure,
    Fuel,
    Glazing,
    HeatingGenerator,
    Regulation,
    RoofStructure,
    RoofTableFamily,
    SlabInsulation,
    VentilationCategory,
    VentilationPeriod,
    VentilationType,
    WallInsulation,
    WallMaterial,
)
from core.utils import frozen


class SlabType(NamedTuple):
    """Uninsulated coefficient and bridge applicability of a floor/roof."""

    u0: float
    heavyweight: bool
    table_family: Optional[RoofTableFamily] = None


class Generator(NamedTuple):
    label: str
    efficiency: float
    fuel: Fuel
    group: str = ""


class FuelFactors(NamedTuple):
    primary: float  # kWhep / kWh final
    co2: float  # kgCO₂ / kWh final
    price: float  # € / kWh final


class VentilationSubtype(NamedTuple):
    category: VentilationCategory
    period_keys: Mapping[VentilationPeriod, str]


# ─────────────────────────────────────────────────────────────────────────────
# CLIMATE
# ─────────────────────────────────────────────────────────────────────────────

DEGREE_DAYS = {
    ClimateZone.H1A: 3500,
    ClimateZone.H1B: 3200,
    ClimateZone.H1C: 2900,
    ClimateZone.H2A: 2400,
    ClimateZone.H2B: 2300,
    ClimateZone.H2C: 2000,
    ClimateZone.H2D: 2700,
    ClimateZone.H3:  1500,
}


# ─────────────────────────────────────────────────────────────────────────────
# WALLS — U (W/m²K) by material × insulation
# ─────────────────────────────────────────────────────────────────────────────

_W = WallInsulation
WALL_U = {
    WallMaterial.STONE:          {_W.NONE: 2.5, _W.INTERIOR: 0.36, _W.EXTERIOR: 0.28, _W.DISTRIBUTED: 0.45},
    WallMaterial.SOLID_BRICK:    {_W.NONE: 1.8, _W.INTERIOR: 0.35, _W.EXTERIOR: 0.27, _W.DISTRIBUTED: 0.40},
    WallMaterial.HOLLOW_BRICK:   {_W.NONE: 1.2, _W.INTERIOR: 0.35, _W.EXTERIOR: 0.27, _W.DISTRIBUTED: 0.35},
    WallMaterial.SOLID_CONCRETE: {_W.NONE: 2.2, _W.INTERIOR: 0.35, _W.EXTERIOR: 0.27, _W.DISTRIBUTED: 0.35},
    WallMaterial.CONCRETE_BLOCK: {_W.NONE: 1.5, _W.INTERIOR: 0.35, _W.EXTERIOR: 0.27, _W.DISTRIBUTED: 0.35},
    WallMaterial.TIMBER_FRAME:   {_W.NONE: 0.7, _W.INTERIOR: 0.27, _W.EXTERIOR: 0.25, _W.DISTRIBUTED: 0.25},
    WallMaterial.LEGACY_EARTH:   {_W.NONE: 2.0, _W.INTERIOR: 0.40, _W.EXTERIOR: 0.35, _W.DISTRIBUTED: 0.50},
}
WALL_FALLBACK_MATERIAL = WallMaterial.CONCRETE_BLOCK

# b_tr per adjacency; None means "computed from Aiu / Aue"
ADJACENCY_BTR: dict[Adjacency, Optional[float]] = {
    Adjacency.EXTERIOR:            1.00,
    Adjacency.OPEN_CIRCULATION:    1.00,
    Adjacency.UNHEATED_ATTIC:      0.90,
    Adjacency.UNHEATED_CELLAR:     0.80,
    Adjacency.UNHEATED_GARAGE:     0.75,
    Adjacency.CLOSED_CIRCULATION:  0.60,
    Adjacency.SOLAR_BUFFER:        0.60,
    Adjacency.CRAWLSPACE_WALL:     0.50,
    Adjacency.CALCULATED_UNHEATED: None,
    Adjacency.HEATED_NEIGHBOUR:    0.00,
}


# ─────────────────────────────────────────────────────────────────────────────
# OPENINGS
# ─────────────────────────────────────────────────────────────────────────────

GLAZING_U = {
    Glazing.SINGLE:        5.8,
    Glazing.DOUBLE_OLD:    2.9,
    Glazing.DOUBLE_RECENT: 1.4,
    Glazing.TRIPLE:        0.8,
}
GLAZING_FALLBACK = Glazing.DOUBLE_OLD

DOOR_OPAQUE_U = {
    DoorMaterial.SOLID_WOOD:              1.5,
    DoorMaterial.INSULATED_WOOD:          0.8,
    DoorMaterial.STEEL:                   4.0,
    DoorMaterial.INSULATED_STEEL:         1.2,
    DoorMaterial.ALUMINIUM:               3.5,
    DoorMaterial.ALUMINIUM_THERMAL_BREAK: 1.8,
    DoorMaterial.PVC:                     1.2,
    DoorMaterial.OTHER:                   2.0,
}


# ─────────────────────────────────────────────────────────────────────────────
# FLOORS (PLANCHER BAS) & ROOFS (PLANCHER HAUT)
# ─────────────────────────────────────────────────────────────────────────────

FLOOR_TYPES = {
    FloorStructure.SOLID_CONCRETE:              SlabType(2.0, True),
    FloorStructure.CONCRETE_HOLLOW_CORE:        SlabType(1.6, True),
    FloorStructure.TIMBER_CONCRETE_HOLLOW_CORE: SlabType(1.1, True),
    FloorStructure.POLYSTYRENE_INFILL:          SlabType(0.45, False),
    FloorStructure.TIMBER_JOISTS:               SlabType(0.8, False),
    FloorStructure.OTHER:                       SlabType(2.0, True),
}

ROOF_TYPES = {
    RoofStructure.LOST_ATTIC:           SlabType(2.5, True, RoofTableFamily.ATTIC),
    RoofStructure.CONVERTED_ATTIC:      SlabType(2.5, False, RoofTableFamily.ATTIC),
    RoofStructure.FLAT_ROOF:            SlabType(2.5, True, RoofTableFamily.FLAT_ROOF),
    RoofStructure.STEEL_DECK:           SlabType(2.5, False, RoofTableFamily.ATTIC),
    RoofStructure.PLASTERBOARD_CEILING: SlabType(2.5, False, RoofTableFamily.FLAT_ROOF),
    RoofStructure.THATCH:               SlabType(0.24, False, RoofTableFamily.ATTIC),
    RoofStructure.OTHER:                SlabType(2.5, True, RoofTableFamily.ATTIC),
}

# Year brackets: (upper-bound year, {zone family: U}), strictly ascending
FLOOR_YEAR_TABLE = (
    (1974, {"H1": 2.0,  "H2": 2.0,  "H3": 2.0}),
    (1977, {"H1": 0.9,  "H2": 0.95, "H3": 1.0}),
    (1982, {"H1": 0.9,  "H2": 0.95, "H3": 1.0}),
    (1988, {"H1": 0.8,  "H2": 0.74, "H3": 0.89}),
    (2000, {"H1": 0.5,  "H2": 0.63, "H3": 0.56}),
    (2005, {"H1": 0.3,  "H2": 0.3,  "H3": 0.47}),
    (2012, {"H1": 0.27, "H2": 0.27, "H3": 0.40}),
    (9999, {"H1": 0.23, "H2": 0.23, "H3": 0.25}),
)

ROOF_YEAR_TABLES = {
    RoofTableFamily.ATTIC: (
        (1974, {"H1": 2.5,  "H2": 2.5,  "H3": 2.5}),
        (1977, {"H1": 0.5,  "H2": 0.53, "H3": 0.56}),
        (1982, {"H1": 0.5,  "H2": 0.53, "H3": 0.56}),
        (1988, {"H1": 0.3,  "H2": 0.32, "H3": 0.33}),
        (2000, {"H1": 0.25, "H2": 0.26, "H3": 0.3}),
        (2005, {"H1": 0.23, "H2": 0.23, "H3": 0.3}),
        (2012, {"H1": 0.2,  "H2": 0.2,  "H3": 0.25}),
        (9999, {"H1": 0.14, "H2": 0.14, "H3": 0.14}),
    ),
    RoofTableFamily.FLAT_ROOF: (
        (1974, {"H1": 2.5,  "H2": 2.5,  "H3": 2.5}),
        (1977, {"H1": 0.75, "H2": 0.79, "H3": 0.83}),
        (1982, {"H1": 0.75, "H2": 0.79, "H3": 0.83}),
        (1988, {"H1": 0.55, "H2": 0.58, "H3": 0.61}),
        (2000, {"H1": 0.40, "H2": 0.42, "H3": 0.44}),
        (2005, {"H1": 0.30, "H2": 0.30, "H3": 0.30}),
        (2012, {"H1": 0.27, "H2": 0.27, "H3": 0.27}),
        (9999, {"H1": 0.14, "H2": 0.14, "H3": 0.14}),
    ),
}

# Ground-coupled Ue for 2S/P ≈ 5 m: (Upb threshold, Ue), descending, first match
SLAB_ON_GRADE_UE = ((2.0, 0.60), (1.5, 0.46), (0.85, 0.38), (0.6, 0.32), (0.0, 0.27))
CRAWLSPACE_UE    = ((3.0, 0.39), (1.4, 0.36), (0.8, 0.34), (0.45, 0.32), (0.0, 0.30))

GROUND_COUPLING = {
    FloorSituation.SLAB_ON_GRADE:   SLAB_ON_GRADE_UE,
    FloorSituation.CRAWLSPACE:      CRAWLSPACE_UE,
    FloorSituation.UNHEATED_CELLAR: CRAWLSPACE_UE,
}


# ─────────────────────────────────────────────────────────────────────────────
# THERMAL BRIDGES — Ψ (W/m·K)
# Keys are the bridge insulation keys: none / interior / exterior / combined.
# ─────────────────────────────────────────────────────────────────────────────

_S = SlabInsulation
# Ψ column for each wall insulation; distributed insulation behaves as none
WALL_BRIDGE_KEY = {
    _W.NONE:        _S.NONE,
    _W.INTERIOR:    _S.INTERIOR,
    _W.EXTERIOR:    _S.EXTERIOR,
    _W.DISTRIBUTED: _S.NONE,
}
# Ψ row for each slab insulation; unknown is treated as exterior
SLAB_BRIDGE_KEY = {
    _S.NONE:     _S.NONE,
    _S.INTERIOR: _S.INTERIOR,
    _S.EXTERIOR: _S.EXTERIOR,
    _S.COMBINED: _S.COMBINED,
    _S.UNKNOWN:  _S.EXTERIOR,
}

PSI_FLOOR_WALL = {
    _S.NONE:     {_S.NONE: 0.39, _S.INTERIOR: 0.31, _S.EXTERIOR: 0.49, _S.COMBINED: 0.31},
    _S.INTERIOR: {_S.NONE: 0.47, _S.INTERIOR: 0.08, _S.EXTERIOR: 0.48, _S.COMBINED: 0.08},
    _S.EXTERIOR: {_S.NONE: 0.80, _S.INTERIOR: 0.71, _S.EXTERIOR: 0.64, _S.COMBINED: 0.45},
    _S.COMBINED: {_S.NONE: 0.47, _S.INTERIOR: 0.08, _S.EXTERIOR: 0.48, _S.COMBINED: 0.08},
}
PSI_ROOF_WALL = {
    _S.NONE:     {_S.NONE: 0.30, _S.INTERIOR: 0.27, _S.EXTERIOR: 0.55, _S.COMBINED: 0.27},
    _S.INTERIOR: {_S.NONE: 0.83, _S.INTERIOR: 0.07, _S.EXTERIOR: 0.76, _S.COMBINED: 0.07},
    _S.EXTERIOR: {_S.NONE: 0.40, _S.INTERIOR: 0.75, _S.EXTERIOR: 0.58, _S.COMBINED: 0.58},
    _S.COMBINED: {_S.NONE: 0.40, _S.INTERIOR: 0.07, _S.EXTERIOR: 0.58, _S.COMBINED: 0.07},
}
PSI_INTERMEDIATE_FLOOR = {_S.NONE: 0.86, _S.INTERIOR: 0.92, _S.EXTERIOR: 0.13, _S.COMBINED: 0.13}
PSI_PARTITION_WALL     = {_S.NONE: 0.73, _S.INTERIOR: 0.82, _S.EXTERIOR: 0.13, _S.COMBINED: 0.13}
PSI_OPENING_WALL       = {_S.NONE: 0.45, _S.INTERIOR: 0.35, _S.EXTERIOR: 0.10, _S.COMBINED: 0.10}


# ─────────────────────────────────────────────────────────────────────────────
# VENTILATION — Qvarepconv (m³/h·m²)
# ─────────────────────────────────────────────────────────────────────────────

VENTILATION_RATES = {
    "window_opening":                1.20,
    "high_low_vents":                2.23,
    "natural_duct":                  2.23,
    "natural_duct_hygro":            1.24,
    "sf_self_regulating_before_1982": 1.97,
    "sf_self_regulating_1982_2000":  1.65,
    "sf_self_regulating_2001_2012":  1.50,
    "sf_self_regulating_after_2012": 1.32,
    "sf_hygro_a_before_2001":        1.50,
    "sf_hygro_a_2001_2012":          1.44,
    "sf_hygro_a_after_2012":         1.16,
    "sf_hygro_b_before_2001":        1.36,
    "sf_hygro_b_2001_2012":          1.24,
    "sf_hygro_b_after_2012":         1.09,
    "sf_gas_before_2001":            1.59,
    "sf_gas_2001_2012":              1.53,
    "sf_gas_after_2012":             1.22,
    "low_pressure_self_regulating":  1.97,
    "low_pressure_hygro_a":          1.30,
    "low_pressure_hygro_b":          1.24,
    "df_individual_up_to_2012":      0.60,
    "df_individual_after_2012":      0.26,
    "df_collective_up_to_2012":      0.75,
    "df_collective_after_2012":      0.46,
    "df_no_exchanger_up_to_2012":    1.65,
    "df_no_exchanger_after_2012":    1.32,
    "hybrid_before_2001":            1.52,
    "hybrid_2001_2012":              1.33,
    "hybrid_after_2012":             1.17,
    "hybrid_hygro_before_2001":      1.52,
    "hybrid_hygro_2001_2012":        1.33,
    "hybrid_hygro_after_2012":       1.17,
    "existing_duct_up_to_2012":      2.24,
    "existing_duct_after_2012":      1.97,
    "earth_tube_no_exchanger_up_to_2012": 1.65,
    "earth_tube_no_exchanger_after_2012": 1.32,
    "earth_tube_exchanger_up_to_2012":    0.60,
    "earth_tube_exchanger_after_2012":    0.26,
}
VENTILATION_FALLBACK_KEY = "window_opening"

_P = VentilationPeriod


def _periods(before_1982: str, p1982: str, p2001: str, after_2012: str) -> Mapping:
    return frozen({
        _P.BEFORE_1982:       before_1982,
        _P.FROM_1982_TO_2000: p1982,
        _P.FROM_2001_TO_2012: p2001,
        _P.AFTER_2012:        after_2012,
    })


def _fixed(key: str) -> Mapping:
    return _periods(key, key, key, key)


def _up_to_2012(prefix: str) -> Mapping:
    up_to = f"{prefix}_up_to_2012"
    return _periods(up_to, up_to, up_to, f"{prefix}_after_2012")


def _since_2001(prefix: str) -> Mapping:
    before = f"{prefix}_before_2001"
    return _periods(before, before, f"{prefix}_2001_2012", f"{prefix}_after_2012")


_V, _C = VentilationType, VentilationCategory
# Period maps are ordered oldest first; the first entry is the undated default
VENTILATION_SUBTYPES = {
    _V.WINDOW_OPENING:     VentilationSubtype(_C.PASSIVE, _fixed("window_opening")),
    _V.HIGH_LOW_VENTS:     VentilationSubtype(_C.PASSIVE, _fixed("high_low_vents")),
    _V.NATURAL_DUCT:       VentilationSubtype(_C.PASSIVE, _fixed("natural_duct")),
    _V.NATURAL_DUCT_HYGRO: VentilationSubtype(_C.PASSIVE, _fixed("natural_duct_hygro")),
    _V.SF_SELF_REGULATING: VentilationSubtype(_C.SIMPLE_FLOW, _periods(
        "sf_self_regulating_before_1982", "sf_self_regulating_1982_2000",
        "sf_self_regulating_2001_2012", "sf_self_regulating_after_2012",
    )),
    _V.SF_HYGRO_A: VentilationSubtype(_C.SIMPLE_FLOW, _since_2001("sf_hygro_a")),
    _V.SF_HYGRO_B: VentilationSubtype(_C.SIMPLE_FLOW, _since_2001("sf_hygro_b")),
    _V.SF_GAS:     VentilationSubtype(_C.SIMPLE_FLOW, _since_2001("sf_gas")),
    _V.LOW_PRESSURE_SELF_REGULATING: VentilationSubtype(_C.SIMPLE_FLOW, _fixed("low_pressure_self_regulating")),
    _V.LOW_PRESSURE_HYGRO_A: VentilationSubtype(_C.SIMPLE_FLOW, _fixed("low_pressure_hygro_a")),
    _V.LOW_PRESSURE_HYGRO_B: VentilationSubtype(_C.SIMPLE_FLOW, _fixed("low_pressure_hygro_b")),
    _V.MECHANICAL_ON_EXISTING_DUCT: VentilationSubtype(_C.EXISTING_DUCT, _up_to_2012("existing_duct")),
    _V.DF_INDIVIDUAL_EXCHANGER: VentilationSubtype(_C.DOUBLE_FLOW, _up_to_2012("df_individual")),
    _V.DF_COLLECTIVE_EXCHANGER: VentilationSubtype(_C.DOUBLE_FLOW, _up_to_2012("df_collective")),
    _V.DF_NO_EXCHANGER:         VentilationSubtype(_C.DOUBLE_FLOW, _up_to_2012("df_no_exchanger")),
    _V.EARTH_TUBE_NO_EXCHANGER: VentilationSubtype(_C.DOUBLE_FLOW, _up_to_2012("earth_tube_no_exchanger")),
    _V.EARTH_TUBE_EXCHANGER:    VentilationSubtype(_C.DOUBLE_FLOW, _up_to_2012("earth_tube_exchanger")),
    _V.HYBRID_SELF_REGULATING:  VentilationSubtype(_C.HYBRID, _since_2001("hybrid")),
    _V.HYBRID_HYGRO:            VentilationSubtype(_C.HYBRID, _since_2001("hybrid_hygro")),
}

# Composite codes from earlier questionnaire versions → (subtype, period)
LEGACY_VENTILATION_CODES = {
    "natural":    (_V.NATURAL_DUCT, None),
    "vmc_auto":   (_V.SF_SELF_REGULATING, _P.FROM_2001_TO_2012),
    "vmc_hygro":  (_V.SF_HYGRO_B, _P.FROM_2001_TO_2012),
    "vmc_double": (_V.DF_INDIVIDUAL_EXCHANGER, _P.AFTER_2012),
    "hybride":    (_V.HYBRID_SELF_REGULATING, _P.FROM_2001_TO_2012),
}


# ─────────────────────────────────────────────────────────────────────────────
# INTERMITTENCY (I0) — individual house, light / medium inertia
# ─────────────────────────────────────────────────────────────────────────────

INTERMITTENCY = {
    Regulation.NONE:                         0.84,
    Regulation.CENTRAL_NO_MINIMUM:           0.83,
    Regulation.CENTRAL_WITH_MINIMUM:         0.81,
    Regulation.ROOM_BY_ROOM:                 0.77,
    Regulation.CONNECTED_THERMOSTAT:         0.77,
    Regulation.ROOM_WITH_PRESENCE_DETECTION: 0.75,
}
INTERMITTENCY_FALLBACK = 0.84

# Codes from earlier questionnaire versions
REGULATION_ALIASES = {
    "clock":      Regulation.CENTRAL_NO_MINIMUM,
    "horloge":    Regulation.CENTRAL_NO_MINIMUM,
    "thermostat": Regulation.CENTRAL_WITH_MINIMUM,
    "zonal":      Regulation.ROOM_BY_ROOM,
    "smart":      Regulation.CONNECTED_THERMOSTAT,
    "detection":  Regulation.ROOM_WITH_PRESENCE_DETECTION,
}


# ─────────────────────────────────────────────────────────────────────────────
# GENERATORS — eff = Rg × Re × Rd × Rr
# ─────────────────────────────────────────────────────────────────────────────

_H = HeatingGenerator
HEATING_GENERATORS = {
    _H.GAS_LEGACY:             Generator("Gas boiler, legacy (before 1991)", 0.74, Fuel.GAS, "gas"),
    _H.GAS_STANDARD:           Generator("Gas boiler, standard", 0.80, Fuel.GAS, "gas"),
    _H.GAS_LOW_TEMPERATURE:    Generator("Gas boiler, low temperature", 0.88, Fuel.GAS, "gas"),
    _H.GAS_CONDENSING:         Generator("Gas boiler, condensing", 0.97, Fuel.GAS, "gas"),
    _H.OIL_LEGACY:             Generator("Oil boiler, legacy (before 1991)", 0.72, Fuel.OIL, "oil"),
    _H.OIL_STANDARD:           Generator("Oil boiler, standard", 0.78, Fuel.OIL, "oil"),
    _H.OIL_LOW_TEMPERATURE:    Generator("Oil boiler, low temperature", 0.87, Fuel.OIL, "oil"),
    _H.OIL_CONDENSING:         Generator("Oil boiler, condensing", 0.94, Fuel.OIL, "oil"),
    _H.LPG_STANDARD:           Generator("LPG / propane boiler, standard", 0.79, Fuel.GAS, "lpg"),
    _H.LPG_CONDENSING:         Generator("LPG / propane boiler, condensing", 0.96, Fuel.GAS, "lpg"),
    _H.ELECTRIC_CONVECTOR:     Generator("Electric convector", 0.940, Fuel.ELECTRICITY, "electric"),
    _H.ELECTRIC_RADIANT_PANEL: Generator("Electric radiant panel", 0.960, Fuel.ELECTRICITY, "electric"),
    _H.ELECTRIC_STORAGE:       Generator("Electric storage radiator", 0.899, Fuel.ELECTRICITY, "electric"),
    _H.ELECTRIC_TOWEL_RAIL:    Generator("Electric towel rail", 0.912, Fuel.ELECTRICITY, "electric"),
    _H.ELECTRIC_OTHER:         Generator("Other direct electric emitters", 0.912, Fuel.ELECTRICITY, "electric"),
    _H.ELECTRIC_UNDERFLOOR:    Generator("Electric underfloor heating", 0.969, Fuel.ELECTRICITY, "electric"),
    _H.HEAT_PUMP_AIR_WATER_H1: Generator("Air/water heat pump, zone H1", 2.20, Fuel.ELECTRICITY, "heat_pump"),
    _H.HEAT_PUMP_AIR_WATER_H2: Generator("Air/water heat pump, zone H2", 2.60, Fuel.ELECTRICITY, "heat_pump"),
    _H.HEAT_PUMP_AIR_WATER_H3: Generator("Air/water heat pump, zone H3", 3.00, Fuel.ELECTRICITY, "heat_pump"),
    _H.HEAT_PUMP_AIR_AIR:      Generator("Air/air heat pump (split)", 2.50, Fuel.ELECTRICITY, "heat_pump"),
    _H.HEAT_PUMP_GEOTHERMAL:   Generator("Geothermal heat pump", 3.50, Fuel.ELECTRICITY, "heat_pump"),
    _H.WOOD_LOG_STOVE:         Generator("Wood log stove / insert", 0.65, Fuel.WOOD, "wood"),
    _H.WOOD_PELLET_STOVE:      Generator("Wood pellet stove", 0.85, Fuel.WOOD, "wood"),
    _H.WOOD_LOG_BOILER:        Generator("Wood log / chip boiler", 0.75, Fuel.WOOD, "wood"),
    _H.WOOD_PELLET_BOILER:     Generator("Wood pellet boiler", 0.88, Fuel.WOOD, "wood"),
    _H.DISTRICT_NETWORK:       Generator("District heating network", 0.97, Fuel.DISTRICT_HEAT, "district"),
}

# Conservative assumption when the occupant does not know the system
UNKNOWN_HEATING_DEFAULT = HeatingGenerator.OIL_STANDARD

# None for the coupled entry: it borrows the heating generator
DHW_GENERATORS: dict[DhwGenerator, Optional[Generator]] = {
    DhwGenerator.ELECTRIC_TANK:      Generator("Electric storage tank", 0.85, Fuel.ELECTRICITY),
    DhwGenerator.THERMODYNAMIC:      Generator("Thermodynamic water heater", 2.80, Fuel.ELECTRICITY),
    DhwGenerator.GAS_INSTANT:        Generator("Instantaneous gas water heater", 0.85, Fuel.GAS),
    DhwGenerator.COUPLED_TO_HEATING: None,
    DhwGenerator.SOLAR:              Generator("Solar water heater", 3.00, Fuel.ELECTRICITY),
}
UNKNOWN_DHW_DEFAULT = DhwGenerator.ELECTRIC_TANK


# ─────────────────────────────────────────────────────────────────────────────
# FUELS
# ─────────────────────────────────────────────────────────────────────────────

FUEL_FACTORS = {
    Fuel.GAS:           FuelFactors(1.0, 0.227, 0.112),
    Fuel.OIL:           FuelFactors(1.0, 0.324, 0.110),
    Fuel.WOOD:          FuelFactors(1.0, 0.030, 0.060),
    Fuel.ELECTRICITY:   FuelFactors(2.3, 0.064, 0.206),
    Fuel.DISTRICT_HEAT: FuelFactors(0.6, 0.040, 0.080),
    Fuel.NONE:          FuelFactors(1.0, 0.1, 0.15),
}


# ─────────────────────────────────────────────────────────────────────────────
# CLASSIFICATION — value < threshold[i] → class i, otherwise the last class
# ─────────────────────────────────────────────────────────────────────────────

ENERGY_THRESHOLDS = (70, 110, 180, 250, 330, 420)  # kWhep / m² / year
GHG_THRESHOLDS    = (6, 11, 30, 50, 70, 100)  # kgCO₂ / m² / year

# Labels of the 7 ordinal classes, best first. The fourth label is kept as
# the source tool printed it until its intended letter is confirmed.
GRADE_LABELS = ("A", "B", "C", "o", "E", "F", "G")


# ─────────────────────────────────────────────────────────────────────────────
# BUNDLE
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MethodTables:
    degree_days: Mapping
    wall_u: Mapping
    wall_fallback_material: WallMaterial
    adjacency_btr: Mapping
    glazing_u: Mapping
    glazing_fallback: Glazing
    door_opaque_u: Mapping
    floor_types: Mapping
    roof_types: Mapping
    floor_year_table: tuple
    roof_year_tables: Mapping
    ground_coupling: Mapping
    wall_bridge_key: Mapping
    slab_bridge_key: Mapping
    psi_floor_wall: Mapping
    psi_roof_wall: Mapping
    psi_intermediate_floor: Mapping
    psi_partition_wall: Mapping
    psi_opening_wall: Mapping
    ventilation_rates: Mapping
    ventilation_fallback_key: str
    ventilation_subtypes: Mapping
    intermittency: Mapping
    intermittency_fallback: float
    heating_generators: Mapping
    unknown_heating_default: HeatingGenerator
    dhw_generators: Mapping
    unknown_dhw_default: DhwGenerator
    fuel_factors: Mapping
    energy_thresholds: tuple
    ghg_thresholds: tuple
    grade_labels: tuple


DEFAULT_TABLES = MethodTables(
    degree_days=frozen(DEGREE_DAYS),
    wall_u=frozen(WALL_U),
    wall_fallback_material=WALL_FALLBACK_MATERIAL,
    adjacency_btr=frozen(ADJACENCY_BTR),
    glazing_u=frozen(GLAZING_U),
    glazing_fallback=GLAZING_FALLBACK,
    door_opaque_u=frozen(DOOR_OPAQUE_U),
    floor_types=frozen(FLOOR_TYPES),
    roof_types=frozen(ROOF_TYPES),
    floor_year_table=tuple((bound, frozen(row)) for bound, row in FLOOR_YEAR_TABLE),
    roof_year_tables=frozen({
        family: tuple((bound, frozen(row)) for bound, row in rows)
        for family, rows in ROOF_YEAR_TABLES.items()
    }),
    ground_coupling=frozen(GROUND_COUPLING),
    wall_bridge_key=frozen(WALL_BRIDGE_KEY),
    slab_bridge_key=frozen(SLAB_BRIDGE_KEY),
    psi_floor_wall=frozen(PSI_FLOOR_WALL),
    psi_roof_wall=frozen(PSI_ROOF_WALL),
    psi_intermediate_floor=frozen(PSI_INTERMEDIATE_FLOOR),
    psi_partition_wall=frozen(PSI_PARTITION_WALL),
    psi_opening_wall=frozen(PSI_OPENING_WALL),
    ventilation_rates=frozen(VENTILATION_RATES),
    ventilation_fallback_key=VENTILATION_FALLBACK_KEY,
    ventilation_subtypes=frozen(VENTILATION_SUBTYPES),
    intermittency=frozen(INTERMITTENCY),
    intermittency_fallback=INTERMITTENCY_FALLBACK,
    heating_generators=frozen(HEATING_GENERATORS),
    unknown_heating_default=UNKNOWN_HEATING_DEFAULT,
    dhw_generators=frozen(DHW_GENERATORS),
    unknown_dhw_default=UNKNOWN_DHW_DEFAULT,
    fuel_factors=frozen(FUEL_FACTORS),
    energy_thresholds=ENERGY_THRESHOLDS,
    ghg_thresholds=GHG_THRESHOLDS,
    grade_labels=GRADE_LABELS,
)
