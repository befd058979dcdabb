# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Heat Loss Aggregator
# © 2026 Aparajita Parihar. All rights reserved.
#
# Sums the transmission losses of every envelope element (U · S · b), adds the
# thermal bridges (or a flat 10 % surcharge when no wall is described) and the
# ventilation loss, giving the total heat-loss coefficient H_total in W/K.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from config.constants import AIR_HEAT_CAPACITY_WH_M3K, BRIDGE_FALLBACK_SURCHARGE
from core.bridges import bridge_total
from core.envelope import adjacency_btr, effective_floor_u, opening_u, roof_u, wall_u
from core.models import (
    DOOR_ADJACENCIES,
    Adjacency,
    Dwelling,
    Opening,
    RoofSituation,
    ThermalBridge,
    WallSegment,
)
from core.tables import DEFAULT_TABLES, MethodTables
from core.utils import round_half_up, safe_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeatLoss:
    """Loss coefficients in W/K."""

    walls: float
    floors: float
    roofs: float
    openings: float
    envelope_loss: float
    bridge_total: float
    envelope_loss_with_bridges: float
    ventilation_loss: float
    h_total: float
    surcharge_applied: bool
    breakdown: dict[str, int]


def _calculated_btr(aiu: Optional[float], aue: Optional[float]) -> float:
    """b_tr = Aue / (Aiu + Aue); 1.0 when an area is missing."""
    if aiu is None or aue is None or aiu + aue <= 0:
        return 1.0
    return max(0.0, min(1.0, aue / (aiu + aue)))


def wall_exposure_factor(wall: WallSegment, tables: MethodTables = DEFAULT_TABLES) -> float:
    btr = adjacency_btr(wall.adjacency, tables)
    if btr is None:
        return _calculated_btr(wall.unheated_internal_area_m2, wall.unheated_external_area_m2)
    return btr


def opening_exposure_factor(opening: Opening, tables: MethodTables = DEFAULT_TABLES) -> float:
    """Doors see their adjacency; windows always face the exterior."""
    if not opening.kind.is_door:
        return 1.0
    adjacency = opening.adjacency
    if adjacency not in DOOR_ADJACENCIES:
        logger.warning("Door adjacency %r not allowed; treating as exterior", adjacency)
        adjacency = Adjacency.EXTERIOR
    btr = adjacency_btr(adjacency, tables)
    if btr is None:
        return _calculated_btr(opening.unheated_internal_area_m2, opening.unheated_external_area_m2)
    return btr


def _surface_or_reference(surface: Optional[float], reference_area: float) -> float:
    return surface if surface else reference_area


def loss_breakdown(categories: dict[str, float]) -> dict[str, int]:
    """Integer percentage share of each loss category."""
    total = sum(categories.values())
    return {
        name: int(round_half_up(100.0 * safe_ratio(value, total)))
        for name, value in categories.items()
    }


def aggregate_heat_loss(
    dwelling: Dwelling,
    bridges: tuple[ThermalBridge, ...],
    air_renewal_rate: float,
    tables: MethodTables = DEFAULT_TABLES,
) -> HeatLoss:
    s_ref = dwelling.reference_floor_area_m2
    zone = dwelling.climate_zone

    walls = sum(
        wall_u(w.material, w.insulation, tables) * w.surface_m2 * wall_exposure_factor(w, tables)
        for w in dwelling.walls
    )
    floors = sum(
        effective_floor_u(f, zone, tables) * _surface_or_reference(f.surface_m2, s_ref)
        for f in dwelling.floors
    )
    roofs = sum(
        roof_u(r, zone, tables) * _surface_or_reference(r.surface_m2, s_ref)
        for r in dwelling.roofs
        if r.situation != RoofSituation.HEATED_ROOM
    )
    openings = sum(
        opening_u(o, tables) * o.surface_m2 * opening_exposure_factor(o, tables)
        for o in dwelling.openings
    )
    envelope = walls + floors + roofs + openings

    surcharge = not dwelling.walls
    if surcharge:
        bridges_w_k = 0.0
        envelope_with_bridges = envelope * BRIDGE_FALLBACK_SURCHARGE
    else:
        bridges_w_k = bridge_total(bridges)
        envelope_with_bridges = envelope + bridges_w_k

    ventilation = AIR_HEAT_CAPACITY_WH_M3K * air_renewal_rate * s_ref
    h_total = envelope_with_bridges + ventilation

    # raw family losses; the surcharge only enters H_total
    breakdown = loss_breakdown({
        "walls":       walls + bridges_w_k,
        "floor":       floors,
        "roof":        roofs,
        "glazing":     openings,
        "ventilation": ventilation,
    })

    return HeatLoss(
        walls=walls,
        floors=floors,
        roofs=roofs,
        openings=openings,
        envelope_loss=envelope,
        bridge_total=bridges_w_k,
        envelope_loss_with_bridges=envelope_with_bridges,
        ventilation_loss=ventilation,
        h_total=h_total,
        surcharge_applied=surcharge,
        breakdown=breakdown,
    )
