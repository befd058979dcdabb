# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Envelope Transmittance Resolver
# © 2026 Aparajita Parihar. All rights reserved.
#
# Resolves the thermal transmittance (U, W/m²K) of every envelope element:
# walls, glazing, doors, floors (Upb) and roofs (Uph), plus the equivalent
# ground-coupled coefficient (Ue) of floors over the ground.
#
# Floor / roof U evidence is taken in order of precedence:
#   1. no insulation      → uninsulated U0 of the structure
#   2. thickness e (m)    → 1 / (1/U0 + e/λ)
#   3. installation year  → min(U0, year-bracket table)
#   4. nothing            → oldest bracket (least favourable evidence)
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Optional, Union

from config.constants import (
    FLOOR_INSULATION_LAMBDA,
    ROOF_INSULATION_LAMBDA,
    TWO_DIGIT_YEAR_PIVOT,
)
from core.models import (
    Adjacency,
    ClimateZone,
    DoorMaterial,
    FloorSlab,
    FloorStructure,
    FloorSituation,
    Glazing,
    Opening,
    RoofSituation,
    RoofStructure,
    RoofSurface,
    RoofTableFamily,
    SlabInsulation,
    WallInsulation,
    WallMaterial,
    YearInput,
)
from core.tables import DEFAULT_TABLES, MethodTables
from core.utils import round_half_up

logger = logging.getLogger(__name__)

# Column used when the climate zone is not known
DEFAULT_ZONE_FAMILY = "H1"


# ─────────────────────────────────────────────────────────────────────────────
# YEARS
# ─────────────────────────────────────────────────────────────────────────────

def parse_year(value: YearInput) -> Optional[int]:
    """Expand a declared installation year.

    "82" → 1982, "05" → 2005, "1995" → 1995. Anything that is not a
    non-negative integer of at most four digits is treated as no evidence
    and returns None.
    """
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text.isdigit() or len(text) > 4:
        return None
    year = int(text)
    if len(text) <= 2:
        return 1900 + year if year >= TWO_DIGIT_YEAR_PIVOT else 2000 + year
    return year


def _bracket_value(table: tuple, year: Optional[int], family: str) -> float:
    if year is None:
        return table[0][1][family]
    for upper_bound, row in table:
        if year <= upper_bound:
            return row[family]
    return table[-1][1][family]


def _zone_family(zone: Optional[ClimateZone]) -> str:
    return zone.family if zone is not None else DEFAULT_ZONE_FAMILY


# ─────────────────────────────────────────────────────────────────────────────
# WALLS & OPENINGS
# ─────────────────────────────────────────────────────────────────────────────

def adjacency_btr(
    adjacency: Optional[Adjacency],
    tables: MethodTables = DEFAULT_TABLES,
) -> Optional[float]:
    """Tabulated b_tr; None for a space whose b_tr is calculated from areas."""
    if adjacency not in tables.adjacency_btr:
        logger.warning("Unknown adjacency %r; treating as exterior", adjacency)
        return tables.adjacency_btr[Adjacency.EXTERIOR]
    return tables.adjacency_btr[adjacency]


def wall_u(
    material: Optional[WallMaterial],
    insulation: Optional[WallInsulation],
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    row = tables.wall_u.get(material)
    if row is None:
        logger.warning("No U table row for wall material %r; using %s",
                       material, tables.wall_fallback_material.value)
        row = tables.wall_u[tables.wall_fallback_material]
    if insulation not in row:
        logger.warning("Unknown wall insulation %r; treating as uninsulated", insulation)
        insulation = WallInsulation.NONE
    return row[insulation]


def glazing_u(glazing: Optional[Glazing], tables: MethodTables = DEFAULT_TABLES) -> float:
    if glazing not in tables.glazing_u:
        logger.warning("Unknown glazing %r; using %s", glazing, tables.glazing_fallback.value)
        return tables.glazing_u[tables.glazing_fallback]
    return tables.glazing_u[glazing]


def opening_u(opening: Opening, tables: MethodTables = DEFAULT_TABLES) -> float:
    """U of one opening; doors blend their opaque and glazed parts by area."""
    u_glass = glazing_u(opening.glazing, tables)
    if not opening.kind.is_door:
        return u_glass
    u_opaque = tables.door_opaque_u.get(opening.door_material)
    if u_opaque is None:
        logger.warning("Unknown door material %r; using 'other'", opening.door_material)
        u_opaque = tables.door_opaque_u[DoorMaterial.OTHER]
    fraction = max(0.0, min(100.0, opening.glazed_fraction_pct)) / 100.0
    if fraction <= 0:
        return u_opaque
    return round_half_up(u_opaque * (1 - fraction) + u_glass * fraction, 2)


# ─────────────────────────────────────────────────────────────────────────────
# FLOORS & ROOFS
# ─────────────────────────────────────────────────────────────────────────────

def _insulated_u(
    u0: float,
    insulation: SlabInsulation,
    thickness_m: Optional[float],
    year: YearInput,
    table: tuple,
    family: str,
    conductivity: float,
) -> float:
    if insulation == SlabInsulation.NONE:
        return u0
    if thickness_m is not None and thickness_m > 0:
        return round_half_up(1.0 / (1.0 / u0 + thickness_m / conductivity), 2)
    parsed = parse_year(year)
    if parsed is None:
        logger.debug("No insulation evidence; using oldest bracket")
    return min(u0, _bracket_value(table, parsed, family))


def floor_u(
    floor: FloorSlab,
    zone: Optional[ClimateZone] = None,
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    """Upb of a floor slab before any ground coupling."""
    slab = tables.floor_types.get(floor.structure)
    if slab is None:
        logger.warning("Unknown floor structure %r; using 'other'", floor.structure)
        slab = tables.floor_types[FloorStructure.OTHER]
    return _insulated_u(
        slab.u0,
        floor.insulation,
        floor.insulation_thickness_m,
        floor.insulation_year,
        tables.floor_year_table,
        _zone_family(zone),
        FLOOR_INSULATION_LAMBDA,
    )


def roof_table_family(roof: RoofSurface, tables: MethodTables = DEFAULT_TABLES) -> RoofTableFamily:
    if roof.situation == RoofSituation.UNHEATED_ROOM:
        return RoofTableFamily.FLAT_ROOF
    slab = tables.roof_types.get(roof.structure)
    if slab is None:
        return RoofTableFamily.ATTIC
    return slab.table_family


def roof_u(
    roof: RoofSurface,
    zone: Optional[ClimateZone] = None,
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    """Uph of a roof or top floor."""
    slab = tables.roof_types.get(roof.structure)
    if slab is None:
        logger.warning("Unknown roof structure %r; using 'other'", roof.structure)
        slab = tables.roof_types[RoofStructure.OTHER]
    table = tables.roof_year_tables[roof_table_family(roof, tables)]
    return _insulated_u(
        slab.u0,
        roof.insulation,
        roof.insulation_thickness_m,
        roof.insulation_year,
        table,
        _zone_family(zone),
        ROOF_INSULATION_LAMBDA,
    )


# ─────────────────────────────────────────────────────────────────────────────
# GROUND COUPLING
# ─────────────────────────────────────────────────────────────────────────────

def ground_coupled_u(
    upb: float,
    situation: Union[FloorSituation, str, None],
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    """Equivalent Ue of a floor over the ground; other situations keep Upb."""
    steps = tables.ground_coupling.get(situation)
    if steps is None:
        return upb
    for threshold, ue in steps:
        if upb >= threshold:
            return ue
    return steps[-1][1]


def effective_floor_u(
    floor: FloorSlab,
    zone: Optional[ClimateZone] = None,
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    return ground_coupled_u(floor_u(floor, zone, tables), floor.situation, tables)
