# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Input Parsing & Validation
# © 2026 Aparajita Parihar. All rights reserved.
#
# Converts the plain-dict dwelling description produced by the data-collection
# layer into a frozen Dwelling, and rejects physically impossible values.
#
# Parsing is lenient: blank dimensions take their documented defaults and
# unrecognised codes take their documented fallback. Every fallback is logged
# at WARNING and returned as a note so the result can list it.
# Validation is strict: negative lengths, surfaces or areas raise ValueError.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Optional, Type

from config.constants import (
    DEFAULT_OPENING_HEIGHT_M,
    DEFAULT_OPENING_WIDTH_M,
    DEFAULT_WALL_HEIGHT_M,
)
from core.models import (
    Adjacency,
    ClimateZone,
    DhwGenerator,
    DhwSystem,
    DoorMaterial,
    Dwelling,
    Emitter,
    FloorSituation,
    FloorSlab,
    FloorStructure,
    Frame,
    Glazing,
    HeatingGenerator,
    HeatingSystem,
    InstallationMode,
    NetworkInsulation,
    Opening,
    OpeningKind,
    Regulation,
    Room,
    RoofSituation,
    RoofStructure,
    RoofSurface,
    SlabInsulation,
    SolarMask,
    TankInsulation,
    VentilationPeriod,
    VentilationSystem,
    VentilationType,
    WallInsulation,
    WallMaterial,
    WallSegment,
)
from core.tables import REGULATION_ALIASES
from core.utils import to_float
from core.ventilation import legacy_ventilation

logger = logging.getLogger(__name__)

# Altitude range of metropolitan France, with margin
MIN_ALTITUDE_M = -100.0
MAX_ALTITUDE_M = 5000.0


# ─────────────────────────────────────────────────────────────────────────────
# VALIDATION HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def validate_surface(area_m2: Optional[float], label: str = "Surface") -> tuple[bool, str]:
    """Validate a surface in m² (None means "use the default")."""
    if area_m2 is None:
        return True, "ok"
    if not isinstance(area_m2, (int, float)):
        return False, f"{label} must be a number."
    if not math.isfinite(area_m2):
        return False, f"{label} must be finite."
    if area_m2 < 0:
        return False, f"{label} cannot be negative."
    return True, "ok"


def validate_length(length_m: Optional[float], label: str = "Length") -> tuple[bool, str]:
    """Validate a length or thickness in metres."""
    if length_m is None:
        return True, "ok"
    if not isinstance(length_m, (int, float)):
        return False, f"{label} must be a number."
    if not math.isfinite(length_m):
        return False, f"{label} must be finite."
    if length_m < 0:
        return False, f"{label} cannot be negative."
    return True, "ok"


def validate_altitude(altitude_m: float) -> tuple[bool, str]:
    if not isinstance(altitude_m, (int, float)):
        return False, "Altitude must be a number."
    if not math.isfinite(altitude_m):
        return False, "Altitude must be finite."
    if altitude_m < MIN_ALTITUDE_M or altitude_m > MAX_ALTITUDE_M:
        return False, f"Altitude ({altitude_m:,.0f} m) is outside the plausible range."
    return True, "ok"


def _check(result: tuple[bool, str]) -> None:
    ok, message = result
    if not ok:
        raise ValueError(message)


def validate_dwelling(dwelling: Dwelling) -> None:
    """Raise ValueError on physically impossible values."""
    if dwelling.heated_levels < 1:
        raise ValueError("heated_levels must be >= 1.")
    _check(validate_altitude(dwelling.altitude_m))
    for room in dwelling.rooms:
        _check(validate_surface(room.surface_m2, f"Room '{room.name}' surface"))
    for i, wall in enumerate(dwelling.walls):
        _check(validate_length(wall.length_m, f"Wall {i + 1} length"))
        _check(validate_length(wall.height_m, f"Wall {i + 1} height"))
        _check(validate_length(wall.insulation_thickness_m, f"Wall {i + 1} insulation thickness"))
        _check(validate_surface(wall.unheated_internal_area_m2, f"Wall {i + 1} Aiu"))
        _check(validate_surface(wall.unheated_external_area_m2, f"Wall {i + 1} Aue"))
    for name, slabs in (("Floor", dwelling.floors), ("Roof", dwelling.roofs)):
        for i, slab in enumerate(slabs):
            _check(validate_surface(slab.surface_m2, f"{name} {i + 1} surface"))
            _check(validate_length(slab.insulation_thickness_m, f"{name} {i + 1} insulation thickness"))
    for i, opening in enumerate(dwelling.openings):
        _check(validate_length(opening.width_m, f"Opening {i + 1} width"))
        _check(validate_length(opening.height_m, f"Opening {i + 1} height"))
        _check(validate_surface(opening.unheated_internal_area_m2, f"Opening {i + 1} Aiu"))
        _check(validate_surface(opening.unheated_external_area_m2, f"Opening {i + 1} Aue"))
        if opening.count < 0:
            raise ValueError(f"Opening {i + 1} count cannot be negative.")
        if not 0 <= opening.glazed_fraction_pct <= 100:
            raise ValueError(f"Opening {i + 1} glazed fraction must be between 0 and 100 %.")


# ─────────────────────────────────────────────────────────────────────────────
# COERCION
# ─────────────────────────────────────────────────────────────────────────────

class _Notes(list):
    """Fallback notes collected while parsing one dwelling."""

    def fallback(self, field: str, value: Any, default: Any) -> None:
        if default is None:
            shown = "default"
        else:
            shown = default.value if isinstance(default, Enum) else default
        logger.warning("Unrecognised %s %r; using %s", field, value, shown)
        self.append(f"{field}: unrecognised {value!r}, using {shown}")


def _enum(enum_cls: Type[Enum], value: Any, default: Any, field: str, notes: _Notes,
          aliases: Optional[dict] = None):
    if isinstance(value, enum_cls):
        return value
    if value is None or value == "":
        return default
    text = str(value).strip()
    try:
        return enum_cls(text)
    except ValueError:
        pass
    if aliases and text.lower() in aliases:
        return aliases[text.lower()]
    notes.fallback(field, value, default)
    return default


def _dimension(value: Any, default: float) -> float:
    """Blank or zero dimensions take the default."""
    out = to_float(value, default)
    return out if out != 0 else default


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return to_float(value, None)


def _year(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _system(raw: Any, field: str, notes: _Notes) -> dict:
    """A bare string names the generator; other non-mappings are ignored."""
    if isinstance(raw, dict):
        return raw
    if raw is None or raw == "":
        return {}
    if isinstance(raw, str):
        return {"generator": raw}
    notes.fallback(field, raw, None)
    return {}


def _items(raw: dict, key: str) -> list:
    items = raw.get(key) or []
    return [item for item in items if isinstance(item, dict)]


# ─────────────────────────────────────────────────────────────────────────────
# ELEMENT PARSERS
# ─────────────────────────────────────────────────────────────────────────────

def _parse_wall(raw: dict, notes: _Notes) -> WallSegment:
    return WallSegment(
        material=_enum(WallMaterial, raw.get("material"), WallMaterial.CONCRETE_BLOCK, "wall material", notes),
        insulation=_enum(WallInsulation, raw.get("insulation"), WallInsulation.NONE, "wall insulation", notes),
        length_m=to_float(raw.get("length_m"), 0.0),
        height_m=_dimension(raw.get("height_m"), DEFAULT_WALL_HEIGHT_M),
        adjacency=_enum(Adjacency, raw.get("adjacency"), Adjacency.EXTERIOR, "wall adjacency", notes),
        unheated_internal_area_m2=_optional_float(raw.get("unheated_internal_area_m2")),
        unheated_external_area_m2=_optional_float(raw.get("unheated_external_area_m2")),
        insulation_thickness_m=_optional_float(raw.get("insulation_thickness_m")),
        insulation_year=_year(raw.get("insulation_year")),
    )


def _parse_floor(raw: dict, notes: _Notes) -> FloorSlab:
    return FloorSlab(
        structure=_enum(FloorStructure, raw.get("structure"), FloorStructure.OTHER, "floor structure", notes),
        situation=_enum(FloorSituation, raw.get("situation"), FloorSituation.CRAWLSPACE, "floor situation", notes),
        insulation=_enum(SlabInsulation, raw.get("insulation"), SlabInsulation.NONE, "floor insulation", notes),
        surface_m2=_optional_float(raw.get("surface_m2")),
        insulation_thickness_m=_optional_float(raw.get("insulation_thickness_m")),
        insulation_year=_year(raw.get("insulation_year")),
    )


def _parse_roof(raw: dict, notes: _Notes) -> RoofSurface:
    return RoofSurface(
        structure=_enum(RoofStructure, raw.get("structure"), RoofStructure.OTHER, "roof structure", notes),
        situation=_enum(RoofSituation, raw.get("situation"), RoofSituation.EXTERIOR, "roof situation", notes),
        insulation=_enum(SlabInsulation, raw.get("insulation"), SlabInsulation.NONE, "roof insulation", notes),
        surface_m2=_optional_float(raw.get("surface_m2")),
        insulation_thickness_m=_optional_float(raw.get("insulation_thickness_m")),
        insulation_year=_year(raw.get("insulation_year")),
    )


def _parse_opening(raw: dict, notes: _Notes) -> Opening:
    count = int(to_float(raw.get("count"), 1)) or 1
    return Opening(
        kind=_enum(OpeningKind, raw.get("kind"), OpeningKind.WINDOW, "opening kind", notes),
        width_m=_dimension(raw.get("width_m"), DEFAULT_OPENING_WIDTH_M),
        height_m=_dimension(raw.get("height_m"), DEFAULT_OPENING_HEIGHT_M),
        count=count,
        glazing=_enum(Glazing, raw.get("glazing"), Glazing.DOUBLE_OLD, "glazing", notes),
        frame=_enum(Frame, raw.get("frame"), Frame.PVC, "frame", notes),
        adjacency=_enum(Adjacency, raw.get("adjacency"), Adjacency.EXTERIOR, "opening adjacency", notes),
        door_material=_enum(DoorMaterial, raw.get("door_material"), DoorMaterial.OTHER, "door material", notes),
        glazed_fraction_pct=to_float(raw.get("glazed_fraction_pct"), 0.0),
        solar_mask=_enum(SolarMask, raw.get("solar_mask"), SolarMask.NONE, "solar mask", notes),
        unheated_internal_area_m2=_optional_float(raw.get("unheated_internal_area_m2")),
        unheated_external_area_m2=_optional_float(raw.get("unheated_external_area_m2")),
    )


def _parse_ventilation(raw: Any, notes: _Notes) -> VentilationSystem:
    if isinstance(raw, str):
        raw = {"type": raw}
    if not isinstance(raw, dict) or not raw.get("type"):
        return VentilationSystem()

    code = raw.get("type")
    period = _enum(VentilationPeriod, raw.get("period"), None, "ventilation period", notes)
    if isinstance(code, VentilationType):
        return VentilationSystem(type=code, period=period)
    try:
        return VentilationSystem(type=VentilationType(str(code).strip()), period=period)
    except ValueError:
        pass
    legacy = legacy_ventilation(code)
    if legacy is not None:
        logger.debug("Legacy ventilation code %r → %s", code, legacy.type.value)
        return VentilationSystem(type=legacy.type, period=period or legacy.period)
    notes.fallback("ventilation type", code, VentilationType.WINDOW_OPENING)
    return VentilationSystem()


def _parse_heating(raw: dict, notes: _Notes) -> HeatingSystem:
    unknown = bool(raw.get("unknown"))
    generator = None
    if not unknown:
        generator = _enum(HeatingGenerator, raw.get("generator"), None, "heating generator", notes)
    return HeatingSystem(
        generator=generator,
        regulation=_enum(Regulation, raw.get("regulation"), None, "regulation", notes,
                         aliases=REGULATION_ALIASES),
        installation_mode=_enum(InstallationMode, raw.get("installation_mode"), None,
                                "heating installation mode", notes),
        emitter=_enum(Emitter, raw.get("emitter"), None, "emitter", notes),
        network_insulation=_enum(NetworkInsulation, raw.get("network_insulation"), None,
                                 "network insulation", notes),
        unknown=unknown,
    )


def _parse_dhw(raw: dict, notes: _Notes) -> DhwSystem:
    unknown = bool(raw.get("unknown"))
    generator = None
    if not unknown:
        generator = _enum(DhwGenerator, raw.get("generator"), None, "DHW generator", notes)
    return DhwSystem(
        generator=generator,
        tank_insulation=_enum(TankInsulation, raw.get("tank_insulation"), None, "tank insulation", notes),
        installation_mode=_enum(InstallationMode, raw.get("installation_mode"), None,
                                "DHW installation mode", notes),
        unknown=unknown,
    )


# ─────────────────────────────────────────────────────────────────────────────
# PUBLIC API
# ─────────────────────────────────────────────────────────────────────────────

def parse_dwelling(raw: dict) -> tuple[Dwelling, list[str]]:
    """Build a Dwelling from its plain-dict description.

    Returns the dwelling and the list of fallback notes raised while parsing.
    The result is not validated; call validate_dwelling (the engine does).
    """
    if not isinstance(raw, dict):
        raise ValueError("Dwelling description must be a mapping.")
    notes = _Notes()

    rooms = tuple(
        Room(name=str(r.get("name") or f"Room {i + 1}"), surface_m2=to_float(r.get("surface_m2"), 0.0))
        for i, r in enumerate(_items(raw, "rooms"))
    )
    levels = int(to_float(raw.get("heated_levels"), 1))

    dwelling = Dwelling(
        climate_zone=_enum(ClimateZone, raw.get("climate_zone"), None, "climate zone", notes),
        altitude_m=to_float(raw.get("altitude_m"), 0.0),
        heated_levels=levels,
        rooms=rooms,
        walls=tuple(_parse_wall(w, notes) for w in _items(raw, "walls")),
        floors=tuple(_parse_floor(f, notes) for f in _items(raw, "floors")),
        roofs=tuple(_parse_roof(r, notes) for r in _items(raw, "roofs")),
        openings=tuple(_parse_opening(o, notes) for o in _items(raw, "openings")),
        ventilation=_parse_ventilation(raw.get("ventilation"), notes),
        heating=_parse_heating(_system(raw.get("heating"), "heating system", notes), notes),
        dhw=_parse_dhw(_system(raw.get("dhw"), "DHW system", notes), notes),
    )
    return dwelling, list(notes)
