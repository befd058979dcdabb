# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Canonical Constants Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for the scalar physical and method constants of the
# simplified 3CL-DPE 2021 engine. Lookup tables live in core/tables.py.
#
# Sources:
#   Arrêté du 31 mars 2021 — méthode 3CL-DPE 2021 (annexe 1)
#   Guide Cerema 3CL-DPE 2021 (v3)
#
# This file has ZERO network and ZERO side-effect imports.
# It is safe to import in any context, including unit tests.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# REFERENCE AREA
# ─────────────────────────────────────────────────────────────────────────────

# Below this reference floor area the engine returns no result
MIN_REFERENCE_AREA_M2: float = 5.0  # m²


# ─────────────────────────────────────────────────────────────────────────────
# ENVELOPE DEFAULTS
# Applied when the collected description leaves a dimension blank.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_WALL_HEIGHT_M: float    = 2.5  # m
DEFAULT_OPENING_WIDTH_M: float  = 1.2  # m
DEFAULT_OPENING_HEIGHT_M: float = 1.2  # m

# Insulation conductivity used with a declared thickness
FLOOR_INSULATION_LAMBDA: float = 0.042  # W / m·K
ROOF_INSULATION_LAMBDA: float  = 0.040  # W / m·K

# Two-digit years at or above the pivot belong to the 1900s
TWO_DIGIT_YEAR_PIVOT: int = 75


# ─────────────────────────────────────────────────────────────────────────────
# THERMAL BRIDGES & AGGREGATION
# ─────────────────────────────────────────────────────────────────────────────

# Flat envelope surcharge when no wall segment is described
BRIDGE_FALLBACK_SURCHARGE: float = 1.10

# Structural partitions modelled as a share of deperditive wall length
PARTITION_LENGTH_RATIO: float = 0.25

# Volumetric heat capacity of air
AIR_HEAT_CAPACITY_WH_M3K: float = 0.34  # Wh / m³·K


# ─────────────────────────────────────────────────────────────────────────────
# CLIMATE & DEMAND
# ─────────────────────────────────────────────────────────────────────────────

# Degree-days used when the climate zone is not recognised
DEFAULT_DEGREE_DAYS: float = 2500.0  # °C·day / year

HOURS_PER_DAY: float = 24.0

ALTITUDE_HIGH_THRESHOLD_M: float = 800.0
ALTITUDE_MID_THRESHOLD_M: float  = 400.0
ALTITUDE_FACTOR_HIGH: float      = 1.30
ALTITUDE_FACTOR_MID: float       = 1.12

# Seasonal solar gain through glazing
SOLAR_FLUX_KWH_M2: float         = 50.0  # kWh / m² / heating season
SOLAR_TRANSMISSION_FACTOR: float = 0.55
SOLAR_UTILISATION_FACTOR: float  = 0.7

# Internal gains assumption
INTERNAL_GAINS_W_M2: float = 8.0  # W / m²

# Share of total gains recovered against the heating need
GAINS_RECOVERY_FACTOR: float = 0.75

# Occupancy estimate
M2_PER_OCCUPANT: float = 25.0

# Domestic hot water need
DHW_VOLUME_M3_PER_OCCUPANT_DAY: float = 0.056  # m³ / occupant / day
WATER_SPECIFIC_HEAT_KJ_KGK: float     = 4.186  # kJ / kg·K
DHW_TEMPERATURE_RISE_K: float         = 40.0   # K
DAYS_PER_YEAR: float                  = 365.0
# m³·kJ/kg → kWh  (1000 kg/m³ ÷ 3600 kJ/kWh)
DHW_KWH_CONVERSION_DIVISOR: float     = 3.6


# ─────────────────────────────────────────────────────────────────────────────
# ENERGY CONVERSION & COST
# ─────────────────────────────────────────────────────────────────────────────

# Auxiliary electricity allowance (pumps, fans, controls)
AUX_ELECTRICITY_KWH_M2: float = 2.5  # kWh / m² / year

# Annual cost reported as an uncertainty band around the point estimate
COST_BAND_LOW_FACTOR: float  = 0.85
COST_BAND_HIGH_FACTOR: float = 1.15


# ─────────────────────────────────────────────────────────────────────────────
# INPUT RELIABILITY SCORE
# ─────────────────────────────────────────────────────────────────────────────

RELIABILITY_MAX_SCORE: int = 100
RELIABILITY_MIN_SCORE: int = 5
