# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Calculation Engine
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single-pass orchestration of the simplified 3CL-DPE 2021 method:
#
#   envelope U → thermal bridges → ventilation Qv → H_total
#     → Bch / Becs → final / primary energy, GHG, cost → grade
#
# The engine is a pure function of its inputs: no I/O, no module state, no
# network. Constant tables are injected (DEFAULT_TABLES unless overridden).
# This module must stay importable without pandas or any service layer.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Iterable, Union

from config.constants import MIN_REFERENCE_AREA_M2
from core.bridges import estimate_thermal_bridges
from core.classifier import classify
from core.conversion import convert_energy
from core.demand import estimate_demand
from core.heat_loss import aggregate_heat_loss
from core.inputs import parse_dwelling, validate_dwelling
from core.models import DpeResult, Dwelling, InsufficientData
from core.reliability import assess_reliability
from core.tables import DEFAULT_TABLES, MethodTables
from core.utils import round_half_up
from core.ventilation import air_renewal_rate, resolve_rate_key

logger = logging.getLogger(__name__)


def _engine_fallbacks(dwelling: Dwelling, tables: MethodTables, heating_defaulted: bool,
                      dhw_defaulted: bool) -> list[str]:
    notes = []
    if dwelling.climate_zone is None:
        notes.append("climate zone: not declared, using default degree-days")
    if resolve_rate_key(dwelling.ventilation, tables) is None:
        notes.append(f"ventilation: unresolved, using {tables.ventilation_fallback_key}")
    if not dwelling.walls:
        notes.append("thermal bridges: no wall declared, envelope surcharge applied")
    if heating_defaulted:
        notes.append(f"heating generator: using {tables.unknown_heating_default.value}")
    if dhw_defaulted:
        notes.append(f"DHW generator: using {tables.unknown_dhw_default.value}")
    return notes


def compute_dpe(
    dwelling: Dwelling,
    tables: MethodTables = DEFAULT_TABLES,
    fallbacks: Iterable[str] = (),
) -> Union[DpeResult, InsufficientData]:
    """Estimate the DPE grade of one dwelling.

    Args:
        dwelling:  Frozen dwelling description.
        tables:    Method coefficient tables.
        fallbacks: Notes already raised upstream (e.g. while parsing a dict),
                   carried through to the result.

    Returns:
        DpeResult, or InsufficientData when the reference floor area is
        below the minimum.

    Raises:
        ValueError: on physically impossible input values.
    """
    validate_dwelling(dwelling)

    s_ref = dwelling.reference_floor_area_m2
    if s_ref < MIN_REFERENCE_AREA_M2:
        logger.info("Reference floor area %.1f m² below minimum; no result", s_ref)
        return InsufficientData(reference_floor_area=s_ref)

    bridges = estimate_thermal_bridges(dwelling, tables)
    qv = air_renewal_rate(dwelling.ventilation, tables)
    loss = aggregate_heat_loss(dwelling, bridges, qv, tables)
    demand = estimate_demand(dwelling, loss.h_total, tables)
    energy = convert_energy(
        demand.heating_need, demand.dhw_need, s_ref, dwelling.heating, dwelling.dhw, tables,
    )
    grade = classify(energy.primary_energy_per_m2, energy.ghg_per_m2, tables)
    reliability = assess_reliability(dwelling)
    cost_low, cost_high = energy.cost_range

    notes = list(fallbacks) + _engine_fallbacks(
        dwelling, tables,
        energy.heating_generator.defaulted,
        energy.dhw_generator.defaulted,
    )

    return DpeResult(
        reference_floor_area=s_ref,
        grade=grade.grade,
        grade_index=grade.grade_index,
        primary_energy_per_m2=energy.primary_energy_per_m2,
        primary_energy_index=energy.primary_energy_index,
        primary_energy_grade=grade.energy_label,
        primary_energy_grade_index=grade.energy_index,
        ghg_per_m2=energy.ghg_per_m2,
        ghg_index=energy.ghg_index,
        ghg_grade=grade.ghg_label,
        ghg_grade_index=grade.ghg_index,
        cost_range_low=cost_low,
        cost_range_high=cost_high,
        annual_cost=round_half_up(energy.annual_cost, 2),
        occupants_estimate=demand.occupants,
        final_energy_heating=round_half_up(energy.final_heating, 1),
        final_energy_dhw=round_half_up(energy.final_dhw, 1),
        final_energy_aux=round_half_up(energy.final_aux, 1),
        heating_need=round_half_up(demand.heating_need, 1),
        dhw_need=round_half_up(demand.dhw_need, 1),
        h_total=round_half_up(loss.h_total, 2),
        envelope_loss=round_half_up(loss.envelope_loss, 2),
        envelope_loss_with_bridges=round_half_up(loss.envelope_loss_with_bridges, 2),
        bridge_total=loss.bridge_total,
        ventilation_loss=round_half_up(loss.ventilation_loss, 2),
        air_renewal_rate=qv,
        heating_generator=energy.heating_generator.code,
        dhw_generator=energy.dhw_generator.code,
        primary_energy_by_use={k: round_half_up(v, 1) for k, v in energy.primary_by_use.items()},
        thermal_bridges=bridges,
        loss_breakdown=loss.breakdown,
        reliability=reliability.as_dict(),
        fallbacks=tuple(notes),
    )


def compute_dpe_from_dict(
    raw: dict,
    tables: MethodTables = DEFAULT_TABLES,
) -> Union[DpeResult, InsufficientData]:
    """Parse a plain-dict description, then compute it."""
    dwelling, notes = parse_dwelling(raw)
    return compute_dpe(dwelling, tables, fallbacks=notes)
