# © 2026 Aparajita Parihar. All rights reserved.
# OpenDPE Estimator — Tests for the grade classifier

from dataclasses import replace

import pytest

from core.classifier import classify, energy_grade_index, ghg_grade_index
from core.tables import DEFAULT_TABLES


@pytest.mark.parametrize("value, expected", [
    (0, 0), (69.9, 0), (70, 1), (109.99, 1), (110, 2), (179, 2),
    (180, 3), (249.5, 3), (250, 4), (329, 4), (330, 5), (419.9, 5), (420, 6), (900, 6),
])
def test_energy_bands(value, expected):
    assert energy_grade_index(value) == expected


@pytest.mark.parametrize("value, expected", [
    (5.99, 0), (6, 1), (10.9, 1), (11, 2), (29.9, 2), (30, 3),
    (49.9, 3), (50, 4), (69.9, 4), (70, 5), (99.9, 5), (100, 6),
])
def test_ghg_bands(value, expected):
    assert ghg_grade_index(value) == expected


def test_classification_uses_unrounded_values():
    # 69.6 would round to 70, but stays in the first band
    assert energy_grade_index(69.6) == 0
    assert ghg_grade_index(5.96) == 0


class TestTieBreak:
    def test_ghg_worse_than_energy(self):
        grade = classify(90.0, 75.0)
        assert (grade.energy_index, grade.ghg_index, grade.grade_index) == (1, 5, 5)
        assert grade.grade == "F"

    def test_energy_worse_than_ghg(self):
        grade = classify(400.0, 4.0)
        assert (grade.energy_index, grade.ghg_index, grade.grade_index) == (5, 0, 5)

    def test_same_band(self):
        grade = classify(306.0, 59.4)
        assert grade.grade_index == grade.energy_index == grade.ghg_index == 4
        assert grade.grade == "E"


def test_labels_come_from_tables():
    tables = replace(DEFAULT_TABLES, grade_labels=("1", "2", "3", "4", "5", "6", "7"))
    grade = classify(200.0, 20.0, tables)
    assert grade.grade == "4"
    assert grade.energy_label == "4"
    assert grade.ghg_label == "3"


def test_default_labels_have_seven_classes():
    assert len(DEFAULT_TABLES.grade_labels) == 7
    assert DEFAULT_TABLES.grade_labels[0] == "A"
    assert DEFAULT_TABLES.grade_labels[-1] == "G"
