# © 2026 Aparajita Parihar. All rights reserved.
# OpenDPE Estimator — numeric helpers shared by the engine components

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Mapping, Optional


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards +infinity, as the published worked examples do.

    Python's round() uses banker's rounding, which would turn 2.45 W/K into
    2.4 instead of 2.5 in the thermal-bridge breakdown.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def frozen(mapping: Mapping) -> Mapping:
    """Read-only view of a (possibly nested) lookup table."""
    return MappingProxyType({
        key: frozen(val) if isinstance(val, dict) else val
        for key, val in mapping.items()
    })


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide with the denominator forced to at least 1."""
    return numerator / max(denominator, 1.0)


def to_float(value: Any, default: Optional[float]) -> Optional[float]:
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(out):
        return default
    return out
