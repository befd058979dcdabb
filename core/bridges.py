# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Thermal Bridge Estimator
# © 2026 Aparajita Parihar. All rights reserved.
#
# Forfait estimate of the linear thermal bridges (Ψ × L) of a dwelling from
# its wall, floor, roof and opening descriptions. Five junction families are
# considered; each contribution and the total are rounded to 0.1 W/K.
#
# When no wall segment is described the estimator returns no term at all and
# the heat-loss aggregator applies its flat surcharge instead.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Iterable, Optional

from config.constants import PARTITION_LENGTH_RATIO
from core.envelope import adjacency_btr
from core.models import (
    Dwelling,
    FloorSlab,
    RoofSurface,
    SlabInsulation,
    ThermalBridge,
    WallSegment,
)
from core.tables import DEFAULT_TABLES, MethodTables
from core.utils import round_half_up

logger = logging.getLogger(__name__)

FLOOR_WALL = "floor/wall"
ROOF_WALL = "roof/wall"
INTERMEDIATE_FLOOR_WALL = "intermediate floor/wall"
PARTITION_WALL = "partition/wall"
OPENING_WALL = "opening/wall"


def deperditive_walls(
    walls: Iterable[WallSegment],
    tables: MethodTables = DEFAULT_TABLES,
) -> list[WallSegment]:
    """Walls that lose heat: calculated b_tr, or tabulated b_tr above zero."""
    out = []
    for wall in walls:
        btr = adjacency_btr(wall.adjacency, tables)
        if btr is None or btr > 0:
            out.append(wall)
    return out


def dominant_wall_insulation(
    walls: Iterable[WallSegment],
    tables: MethodTables = DEFAULT_TABLES,
) -> SlabInsulation:
    """Most frequent bridge insulation key; ties go to the first encountered."""
    counts: dict[SlabInsulation, int] = {}
    for wall in walls:
        key = tables.wall_bridge_key.get(wall.insulation, SlabInsulation.NONE)
        counts[key] = counts.get(key, 0) + 1
    if not counts:
        return SlabInsulation.NONE
    return max(counts, key=counts.get)


def _first_heavy_floor(floors: Iterable[FloorSlab], tables: MethodTables) -> Optional[FloorSlab]:
    for floor in floors:
        slab = tables.floor_types.get(floor.structure)
        # unlisted structures count as heavyweight
        if slab is None or slab.heavyweight:
            return floor
    return None


def _first_heavy_roof(roofs: Iterable[RoofSurface], tables: MethodTables) -> Optional[RoofSurface]:
    for roof in roofs:
        slab = tables.roof_types.get(roof.structure)
        if slab is not None and slab.heavyweight:
            return roof
    return None


def _slab_key(insulation: Optional[SlabInsulation], tables: MethodTables) -> SlabInsulation:
    return tables.slab_bridge_key.get(insulation, SlabInsulation.NONE)


def _term(junction_type: str, length_m: float, psi: float) -> ThermalBridge:
    length = round_half_up(length_m, 1)
    return ThermalBridge(
        junction_type=junction_type,
        length_m=length,
        psi=psi,
        contribution=round_half_up(length * psi, 1),
    )


def estimate_thermal_bridges(
    dwelling: Dwelling,
    tables: MethodTables = DEFAULT_TABLES,
) -> tuple[ThermalBridge, ...]:
    """Per-junction breakdown; empty when the dwelling has no wall segment."""
    if not dwelling.walls:
        logger.debug("No wall segments; bridge terms replaced by surcharge")
        return ()

    walls = deperditive_walls(dwelling.walls, tables)
    wall_length = sum(wall.length_m for wall in walls)
    wall_key = dominant_wall_insulation(walls, tables)
    terms: list[ThermalBridge] = []

    floor = _first_heavy_floor(dwelling.floors, tables)
    if wall_length > 0 and floor is not None:
        psi = tables.psi_floor_wall[_slab_key(floor.insulation, tables)][wall_key]
        terms.append(_term(FLOOR_WALL, wall_length, psi))

    roof = _first_heavy_roof(dwelling.roofs, tables)
    if wall_length > 0 and roof is not None:
        psi = tables.psi_roof_wall[_slab_key(roof.insulation, tables)][wall_key]
        terms.append(_term(ROOF_WALL, wall_length, psi))

    if wall_length > 0 and dwelling.heated_levels > 1:
        terms.append(_term(
            INTERMEDIATE_FLOOR_WALL,
            wall_length * (dwelling.heated_levels - 1),
            tables.psi_intermediate_floor[wall_key],
        ))

    # forfait length: a fixed share of the deperditive walls, whatever the slab weight
    if wall_length > 0:
        terms.append(_term(
            PARTITION_WALL,
            wall_length * PARTITION_LENGTH_RATIO,
            tables.psi_partition_wall[wall_key],
        ))

    opening_length = sum(o.perimeter_m * o.count for o in dwelling.openings)
    if opening_length > 0:
        terms.append(_term(OPENING_WALL, opening_length, tables.psi_opening_wall[wall_key]))

    return tuple(terms)


def bridge_total(terms: Iterable[ThermalBridge]) -> float:
    return round_half_up(sum(term.contribution for term in terms), 1)
