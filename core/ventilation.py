# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Ventilation Rate Resolver
# © 2026 Aparajita Parihar. All rights reserved.
#
# Maps a declared ventilation subtype and installation period to the
# conventional air-renewal rate Qvarepconv (m³/h per m² of reference area).
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Optional

from core.models import VentilationSystem
from core.tables import DEFAULT_TABLES, LEGACY_VENTILATION_CODES, MethodTables

logger = logging.getLogger(__name__)


def legacy_ventilation(code: str) -> Optional[VentilationSystem]:
    """Translate a composite code from earlier questionnaires, if it is one."""
    entry = LEGACY_VENTILATION_CODES.get(str(code).strip().lower())
    if entry is None:
        return None
    subtype, period = entry
    return VentilationSystem(type=subtype, period=period)


def resolve_rate_key(
    ventilation: VentilationSystem,
    tables: MethodTables = DEFAULT_TABLES,
) -> Optional[str]:
    """Rate-table key for the system, or None when it cannot be resolved."""
    if ventilation.type is None:
        return None
    subtype = tables.ventilation_subtypes.get(ventilation.type)
    if subtype is None:
        logger.warning("Unknown ventilation subtype %r", ventilation.type)
        return None
    key = subtype.period_keys.get(ventilation.period)
    if key is None:
        key = next(iter(subtype.period_keys.values()))
        logger.debug("No installation period for %s; using %s", ventilation.type, key)
    return key


def air_renewal_rate(
    ventilation: VentilationSystem,
    tables: MethodTables = DEFAULT_TABLES,
) -> float:
    """Qvarepconv in m³/h·m²; manual window opening when unresolved."""
    key = resolve_rate_key(ventilation, tables)
    if key is None or key not in tables.ventilation_rates:
        logger.debug("Ventilation unresolved; assuming %s", tables.ventilation_fallback_key)
        key = tables.ventilation_fallback_key
    return tables.ventilation_rates[key]
