# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Input Reliability Assessment
# © 2026 Aparajita Parihar. All rights reserved.
#
# Scores how much of the dwelling description was actually declared, so the
# report can flag estimates built mostly on defaults. The score starts at 100
# and each gap subtracts a fixed weight; it never drops below 5.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from dataclasses import dataclass

from config.constants import RELIABILITY_MAX_SCORE, RELIABILITY_MIN_SCORE
from core.models import Dwelling, TankInsulation


@dataclass(frozen=True)
class Penalty:
    weight: int
    label: str
    impact: str

    def as_dict(self) -> dict:
        return {"weight": self.weight, "label": self.label, "impact": self.impact}


@dataclass(frozen=True)
class Reliability:
    score: int
    penalties: tuple[Penalty, ...] = ()
    unknown_fields: tuple[str, ...] = ()

    def as_dict(self) -> dict:
        return {
            "score":         self.score,
            "penalties":     [p.as_dict() for p in self.penalties],
            "unknownFields": list(self.unknown_fields),
        }


# (weight, label, impact)
HEATING_UNKNOWN = (25, "Heating system unknown", "±40–80 kWhep/m²/yr, one or two classes")
DHW_UNKNOWN = (12, "Hot water system unknown", "±10–20 kWhep/m²/yr, up to one class")
TANK_UNKNOWN = (5, "Hot water tank insulation unknown", "±5 kWhep/m²/yr")
INSTALLATION_MISSING = (5, "Heating installation type not declared", "Distribution and emitter data missing")
NO_WALLS = (10, "No wall declared", "Wall losses replaced by a flat surcharge")
NO_FLOORS = (5, "No floor declared", "Floor losses not counted")
NO_ROOFS = (8, "No roof declared", "Major loss path not counted")
NO_OPENINGS = (5, "No window or door declared", "Glazing losses and solar gains not counted")
NO_VENTILATION = (5, "Ventilation not declared", "Least favourable air renewal assumed")
NO_REGULATION = (3, "Heating regulation not declared", "±5–15 % on heating consumption")


def assess_reliability(dwelling: Dwelling) -> Reliability:
    penalties: list[Penalty] = []
    unknown: list[str] = []

    def penalise(entry: tuple) -> None:
        penalties.append(Penalty(*entry))

    heating, dhw = dwelling.heating, dwelling.dhw

    if heating.unknown:
        penalise(HEATING_UNKNOWN)
        unknown.append("heating")
    if dhw.unknown:
        penalise(DHW_UNKNOWN)
        unknown.append("dhw")
    if dhw.tank_insulation in (None, TankInsulation.UNKNOWN):
        penalise(TANK_UNKNOWN)
        unknown.append("tank_insulation")
    if heating.installation_mode is None and not heating.unknown:
        penalise(INSTALLATION_MISSING)
    if not dwelling.walls:
        penalise(NO_WALLS)
    if not dwelling.floors:
        penalise(NO_FLOORS)
    if not dwelling.roofs:
        penalise(NO_ROOFS)
    if not dwelling.openings:
        penalise(NO_OPENINGS)
    if dwelling.ventilation.type is None:
        penalise(NO_VENTILATION)
    if heating.regulation is None and not heating.unknown:
        penalise(NO_REGULATION)

    score = RELIABILITY_MAX_SCORE - sum(p.weight for p in penalties)
    return Reliability(
        score=max(score, RELIABILITY_MIN_SCORE),
        penalties=tuple(penalties),
        unknown_fields=tuple(unknown),
    )
