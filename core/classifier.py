# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Grade Classifier
# © 2026 Aparajita Parihar. All rights reserved.
#
# Double-threshold DPE label: the final class is the worse of the energy
# class and the GHG class. Classification runs on the unrounded indicators.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.tables import DEFAULT_TABLES, MethodTables


@dataclass(frozen=True)
class Classification:
    energy_index: int
    ghg_index: int
    grade_index: int
    energy_label: str
    ghg_label: str
    grade: str


def _band_index(value: float, thresholds: Sequence[float]) -> int:
    for i, upper in enumerate(thresholds):
        if value < upper:
            return i
    return len(thresholds)


def energy_grade_index(primary_energy_per_m2: float, tables: MethodTables = DEFAULT_TABLES) -> int:
    return _band_index(primary_energy_per_m2, tables.energy_thresholds)


def ghg_grade_index(ghg_per_m2: float, tables: MethodTables = DEFAULT_TABLES) -> int:
    return _band_index(ghg_per_m2, tables.ghg_thresholds)


def classify(
    primary_energy_per_m2: float,
    ghg_per_m2: float,
    tables: MethodTables = DEFAULT_TABLES,
) -> Classification:
    energy = energy_grade_index(primary_energy_per_m2, tables)
    ghg = ghg_grade_index(ghg_per_m2, tables)
    final = max(energy, ghg)
    labels = tables.grade_labels
    return Classification(
        energy_index=energy,
        ghg_index=ghg,
        grade_index=final,
        energy_label=labels[energy],
        ghg_label=labels[ghg],
        grade=labels[final],
    )
