# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Annual Demand Estimator
# © 2026 Aparajita Parihar. All rights reserved.
#
# Degree-day heating need (Bch) net of recovered solar and internal gains,
# and conventional domestic hot water need (Becs), both in kWh / year.
#
#   Bch  = max(0, H · DJU · 24/1000 · f_alt · I0 − (G_solar + G_int) · 0.75)
#   Becs = N · 365 · 0.056 · 4.186 · 40 / 3.6
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from config.constants import (
    ALTITUDE_FACTOR_HIGH,
    ALTITUDE_FACTOR_MID,
    ALTITUDE_HIGH_THRESHOLD_M,
    ALTITUDE_MID_THRESHOLD_M,
    DAYS_PER_YEAR,
    DEFAULT_DEGREE_DAYS,
    DHW_KWH_CONVERSION_DIVISOR,
    DHW_TEMPERATURE_RISE_K,
    DHW_VOLUME_M3_PER_OCCUPANT_DAY,
    GAINS_RECOVERY_FACTOR,
    HOURS_PER_DAY,
    INTERNAL_GAINS_W_M2,
    M2_PER_OCCUPANT,
    SOLAR_FLUX_KWH_M2,
    SOLAR_TRANSMISSION_FACTOR,
    SOLAR_UTILISATION_FACTOR,
    WATER_SPECIFIC_HEAT_KJ_KGK,
)
from core.models import ClimateZone, Dwelling, Opening, Regulation
from core.tables import DEFAULT_TABLES, MethodTables
from core.utils import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Demand:
    heating_need: float  # kWh / year
    dhw_need: float  # kWh / year
    occupants: int
    degree_days: float
    altitude_factor: float
    intermittency: float
    solar_gains: float
    internal_gains: float


# ─────────────────────────────────────────────────────────────────────────────
# CORRECTION FACTORS
# ─────────────────────────────────────────────────────────────────────────────

def degree_days(zone: Optional[ClimateZone], tables: MethodTables = DEFAULT_TABLES) -> float:
    if zone not in tables.degree_days:
        logger.warning("Unknown climate zone %r; using %s degree-days", zone, DEFAULT_DEGREE_DAYS)
        return DEFAULT_DEGREE_DAYS
    return float(tables.degree_days[zone])


def altitude_factor(altitude_m: float) -> float:
    if altitude_m > ALTITUDE_HIGH_THRESHOLD_M:
        return ALTITUDE_FACTOR_HIGH
    if altitude_m > ALTITUDE_MID_THRESHOLD_M:
        return ALTITUDE_FACTOR_MID
    return 1.0


def intermittency_factor(
    regulation: Optional[Regulation],
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    """I0 for the regulation level; no regulation when undeclared."""
    if regulation not in tables.intermittency:
        logger.debug("Regulation %r not declared; I0 = %s", regulation, tables.intermittency_fallback)
        return tables.intermittency_fallback
    return tables.intermittency[regulation]


def estimate_occupants(reference_area_m2: float) -> int:
    """Conventional occupancy: one person per 25 m², never fewer than one."""
    return max(1, int(round_half_up(reference_area_m2 / M2_PER_OCCUPANT)))


# ─────────────────────────────────────────────────────────────────────────────
# GAINS
# ─────────────────────────────────────────────────────────────────────────────

def glazed_area(openings: Iterable[Opening]) -> float:
    return sum(o.surface_m2 for o in openings if not o.kind.is_door)


def solar_gains_kwh(openings: Iterable[Opening]) -> float:
    return glazed_area(openings) * SOLAR_FLUX_KWH_M2 * SOLAR_TRANSMISSION_FACTOR * SOLAR_UTILISATION_FACTOR


def internal_gains_kwh(reference_area_m2: float) -> float:
    return reference_area_m2 * INTERNAL_GAINS_W_M2


# ─────────────────────────────────────────────────────────────────────────────
# NEEDS
# ─────────────────────────────────────────────────────────────────────────────

def heating_need_kwh(
    h_total: float,
    degree_days_value: float,
    altitude: float = 1.0,
    intermittency: float = 1.0,
    solar_gains: float = 0.0,
    internal_gains: float = 0.0,
) -> float:
    gross = h_total * degree_days_value * HOURS_PER_DAY / 1000.0 * altitude * intermittency
    return max(0.0, gross - (solar_gains + internal_gains) * GAINS_RECOVERY_FACTOR)


def dhw_need_kwh(occupants: int) -> float:
    return (
        occupants * DAYS_PER_YEAR * DHW_VOLUME_M3_PER_OCCUPANT_DAY
        * WATER_SPECIFIC_HEAT_KJ_KGK * DHW_TEMPERATURE_RISE_K / DHW_KWH_CONVERSION_DIVISOR
    )


def estimate_demand(
    dwelling: Dwelling,
    h_total: float,
    tables: MethodTables = DEFAULT_TABLES,
) -> Demand:
    s_ref = dwelling.reference_floor_area_m2
    djr = degree_days(dwelling.climate_zone, tables)
    f_alt = altitude_factor(dwelling.altitude_m)
    i0 = intermittency_factor(dwelling.heating.regulation, tables)
    solar = solar_gains_kwh(dwelling.openings)
    internal = internal_gains_kwh(s_ref)
    occupants = estimate_occupants(s_ref)
    return Demand(
        heating_need=heating_need_kwh(h_total, djr, f_alt, i0, solar, internal),
        dhw_need=dhw_need_kwh(occupants),
        occupants=occupants,
        degree_days=djr,
        altitude_factor=f_alt,
        intermittency=i0,
        solar_gains=solar,
        internal_gains=internal,
    )
