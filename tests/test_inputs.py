# © 2026 Aparajita Parihar. All rights reserved.
# OpenDPE Estimator — Tests for input parsing and validation

from dataclasses import replace

import pytest

from core.engine import compute_dpe_from_dict
from core.inputs import (
    parse_dwelling,
    validate_altitude,
    validate_dwelling,
    validate_length,
    validate_surface,
)
from core.models import (
    Adjacency,
    ClimateZone,
    DhwGenerator,
    DpeResult,
    HeatingGenerator,
    OpeningKind,
    Regulation,
    VentilationPeriod,
    VentilationType,
    WallMaterial,
)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Validators
# ─────────────────────────────────────────────────────────────────────────────
class TestValidators:
    def test_surface(self):
        assert validate_surface(12.5) == (True, "ok")
        assert validate_surface(None) == (True, "ok")
        ok, msg = validate_surface(-1, "Floor surface")
        assert not ok
        assert "Floor surface" in msg

    def test_length_rejects_text(self):
        ok, msg = validate_length("long")
        assert not ok
        assert "number" in msg

    @pytest.mark.parametrize("altitude, expected", [(-100, True), (0, True), (4800, True),
                                                    (-101, False), (9000, False)])
    def test_altitude_range(self, altitude, expected):
        assert validate_altitude(altitude)[0] is expected

    def test_validate_dwelling_raises_on_negative_wall(self, reference_dwelling):
        wall = replace(reference_dwelling.walls[0], length_m=-8.0)
        with pytest.raises(ValueError, match="Wall 1 length"):
            validate_dwelling(replace(reference_dwelling, walls=(wall,)))

    def test_validate_dwelling_raises_on_zero_levels(self, reference_dwelling):
        with pytest.raises(ValueError, match="heated_levels"):
            validate_dwelling(replace(reference_dwelling, heated_levels=0))

    def test_valid_dwelling_passes(self, detached_house):
        validate_dwelling(detached_house)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Parsing
# ─────────────────────────────────────────────────────────────────────────────
def test_reference_dict_matches_fixture(reference_dict, reference_dwelling):
    dwelling, notes = parse_dwelling(reference_dict)
    assert notes == []
    assert dwelling == reference_dwelling


def test_blank_dimensions_take_defaults():
    dwelling, _ = parse_dwelling({
        "rooms": [{"surface_m2": "30"}],
        "walls": [{"length_m": 6, "height_m": ""}],
        "openings": [{"kind": "window", "width_m": 0, "count": 0}],
    })
    assert dwelling.rooms[0].name == "Room 1"
    assert dwelling.rooms[0].surface_m2 == 30.0
    assert dwelling.walls[0].height_m == 2.5
    assert dwelling.walls[0].material == WallMaterial.CONCRETE_BLOCK
    assert dwelling.openings[0].width_m == 1.2
    assert dwelling.openings[0].count == 1


def test_unrecognised_codes_fall_back_with_notes():
    dwelling, notes = parse_dwelling({
        "climate_zone": "H9",
        "walls": [{"material": "adobe", "adjacency": "moon"}],
        "openings": [{"kind": "porthole"}],
    })
    assert dwelling.climate_zone is None
    assert dwelling.walls[0].material == WallMaterial.CONCRETE_BLOCK
    assert dwelling.walls[0].adjacency == Adjacency.EXTERIOR
    assert dwelling.openings[0].kind == OpeningKind.WINDOW
    assert "climate zone: unrecognised 'H9', using default" in notes
    assert "wall material: unrecognised 'adobe', using concrete_block" in notes
    assert len(notes) == 4


def test_regulation_aliases():
    dwelling, notes = parse_dwelling({"heating": {"generator": "gas_condensing", "regulation": "Thermostat"}})
    assert dwelling.heating.regulation == Regulation.CENTRAL_WITH_MINIMUM
    assert notes == []


class TestVentilation:
    def test_plain_string(self):
        dwelling, _ = parse_dwelling({"ventilation": "sf_hygro_b"})
        assert dwelling.ventilation.type == VentilationType.SF_HYGRO_B
        assert dwelling.ventilation.period is None

    def test_legacy_code(self):
        dwelling, _ = parse_dwelling({"ventilation": {"type": "vmc_hygro"}})
        assert dwelling.ventilation.type == VentilationType.SF_HYGRO_B
        assert dwelling.ventilation.period == VentilationPeriod.FROM_2001_TO_2012

    def test_declared_period_overrides_legacy_period(self):
        dwelling, _ = parse_dwelling({"ventilation": {"type": "vmc_auto", "period": "before_1982"}})
        assert dwelling.ventilation.period == VentilationPeriod.BEFORE_1982

    def test_unknown_code_is_noted(self):
        dwelling, notes = parse_dwelling({"ventilation": {"type": "vmc_magic"}})
        assert dwelling.ventilation.type is None
        assert notes == ["ventilation type: unrecognised 'vmc_magic', using window_opening"]

    def test_missing(self):
        dwelling, notes = parse_dwelling({})
        assert dwelling.ventilation.type is None
        assert notes == []


def test_unknown_systems_drop_generator():
    dwelling, _ = parse_dwelling({
        "heating": {"unknown": True, "generator": "heat_pump_geothermal"},
        "dhw": {"unknown": True, "generator": "thermodynamic"},
    })
    assert dwelling.heating.unknown and dwelling.heating.generator is None
    assert dwelling.dhw.unknown and dwelling.dhw.generator is None


def test_float_year_is_kept_as_integer():
    dwelling, _ = parse_dwelling({"floors": [{"insulation_year": 1995.0}]})
    assert dwelling.floors[0].insulation_year == 1995


def test_climate_zone_is_case_sensitive_code():
    dwelling, _ = parse_dwelling({"climate_zone": "H2b"})
    assert dwelling.climate_zone == ClimateZone.H2B


def test_non_mapping_input_is_rejected():
    with pytest.raises(ValueError):
        parse_dwelling(["not", "a", "dwelling"])


# ─────────────────────────────────────────────────────────────────────────────
# 3. Non-finite numbers
# ─────────────────────────────────────────────────────────────────────────────
class TestNonFinite:
    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_validators_reject(self, value):
        assert validate_length(value)[0] is False
        assert validate_surface(value)[0] is False
        assert validate_altitude(value)[0] is False

    def test_validate_dwelling_raises_value_error(self, reference_dwelling):
        wall = replace(reference_dwelling.walls[0], length_m=float("inf"))
        with pytest.raises(ValueError, match="finite"):
            validate_dwelling(replace(reference_dwelling, walls=(wall,)))

    def test_parser_treats_them_as_blank(self):
        dwelling, _ = parse_dwelling({
            "heated_levels": "inf",
            "rooms": [{"surface_m2": "1e400"}],
            "walls": [{"length_m": "inf", "height_m": "nan"}],
            "openings": [{"count": "inf", "width_m": "-inf"}],
        })
        assert dwelling.heated_levels == 1
        assert dwelling.rooms[0].surface_m2 == 0.0
        assert dwelling.walls[0].length_m == 0.0
        assert dwelling.walls[0].height_m == 2.5
        assert dwelling.openings[0].count == 1
        assert dwelling.openings[0].width_m == 1.2

    def test_infinite_wall_length_still_computes(self, reference_dict):
        reference_dict["walls"][0]["length_m"] = "inf"
        assert isinstance(compute_dpe_from_dict(reference_dict), DpeResult)


# ─────────────────────────────────────────────────────────────────────────────
# 4. System blocks given as plain values
# ─────────────────────────────────────────────────────────────────────────────
class TestSystemShorthand:
    def test_string_names_the_generator(self):
        dwelling, notes = parse_dwelling({"heating": "gas_condensing", "dhw": "thermodynamic"})
        assert dwelling.heating.generator == HeatingGenerator.GAS_CONDENSING
        assert dwelling.heating.unknown is False
        assert dwelling.dhw.generator == DhwGenerator.THERMODYNAMIC
        assert notes == []

    def test_unrecognised_string_falls_back_with_note(self):
        dwelling, notes = parse_dwelling({"heating": "coal_stove"})
        assert dwelling.heating.generator is None
        assert notes == ["heating generator: unrecognised 'coal_stove', using default"]

    def test_other_values_are_ignored_with_note(self):
        dwelling, notes = parse_dwelling({"heating": ["gas"], "dhw": 42})
        assert dwelling.heating.generator is None
        assert dwelling.dhw.generator is None
        assert notes == [
            "heating system: unrecognised ['gas'], using default",
            "DHW system: unrecognised 42, using default",
        ]

    def test_engine_accepts_string_heating(self, reference_dict):
        result = compute_dpe_from_dict(dict(reference_dict, heating="gas_condensing"))
        assert result.heating_generator == HeatingGenerator.GAS_CONDENSING
