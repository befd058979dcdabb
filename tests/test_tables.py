# © 2026 Aparajita Parihar. All rights reserved.
# OpenDPE Estimator — Consistency checks on the method tables

import pytest

from core.models import (
    Adjacency,
    ClimateZone,
    DhwGenerator,
    DoorMaterial,
    FloorStructure,
    Fuel,
    Glazing,
    HeatingGenerator,
    Regulation,
    RoofStructure,
    SlabInsulation,
    VentilationPeriod,
    VentilationType,
    WallInsulation,
    WallMaterial,
)
from core.tables import DEFAULT_TABLES, REGULATION_ALIASES

T = DEFAULT_TABLES


# ─────────────────────────────────────────────────────────────────────────────
# 1. Coverage: every enum member has a table entry
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("mapping, enum_cls", [
    (T.degree_days, ClimateZone),
    (T.adjacency_btr, Adjacency),
    (T.glazing_u, Glazing),
    (T.door_opaque_u, DoorMaterial),
    (T.floor_types, FloorStructure),
    (T.roof_types, RoofStructure),
    (T.wall_bridge_key, WallInsulation),
    (T.slab_bridge_key, SlabInsulation),
    (T.ventilation_subtypes, VentilationType),
    (T.intermittency, Regulation),
    (T.heating_generators, HeatingGenerator),
    (T.dhw_generators, DhwGenerator),
    (T.fuel_factors, Fuel),
])
def test_enum_is_fully_tabulated(mapping, enum_cls):
    assert set(mapping) == set(enum_cls)


def test_wall_u_covers_every_material_and_insulation():
    for material in WallMaterial:
        assert set(T.wall_u[material]) == set(WallInsulation)


def test_every_ventilation_period_resolves_to_a_rate():
    for subtype in T.ventilation_subtypes.values():
        assert set(subtype.period_keys) == set(VentilationPeriod)
        for key in subtype.period_keys.values():
            assert key in T.ventilation_rates


def test_psi_tables_share_bridge_keys():
    keys = set(T.slab_bridge_key.values())
    assert set(T.psi_partition_wall) == keys
    assert set(T.psi_opening_wall) == keys
    assert set(T.psi_intermediate_floor) == keys
    for row in list(T.psi_floor_wall.values()) + list(T.psi_roof_wall.values()):
        assert set(row) == keys


def test_regulation_aliases_target_members():
    assert all(isinstance(v, Regulation) for v in REGULATION_ALIASES.values())


# ─────────────────────────────────────────────────────────────────────────────
# 2. Ordering
# ─────────────────────────────────────────────────────────────────────────────
def test_year_brackets_are_strictly_ascending():
    tables = [T.floor_year_table] + list(T.roof_year_tables.values())
    for table in tables:
        bounds = [bound for bound, _ in table]
        assert bounds == sorted(bounds)
        assert len(set(bounds)) == len(bounds)
        for _, row in table:
            assert set(row) == {"H1", "H2", "H3"}


def test_grade_thresholds_are_ascending():
    assert list(T.energy_thresholds) == sorted(T.energy_thresholds)
    assert list(T.ghg_thresholds) == sorted(T.ghg_thresholds)
    assert len(T.energy_thresholds) == len(T.ghg_thresholds) == len(T.grade_labels) - 1


def test_ground_coupling_steps_are_descending():
    for steps in T.ground_coupling.values():
        thresholds = [threshold for threshold, _ in steps]
        assert thresholds == sorted(thresholds, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# 3. Immutability
# ─────────────────────────────────────────────────────────────────────────────
def test_tables_are_read_only():
    with pytest.raises(TypeError):
        T.degree_days[ClimateZone.H3] = 0
    with pytest.raises(TypeError):
        T.wall_u[WallMaterial.STONE][WallInsulation.NONE] = 0.1


def test_bundle_is_frozen():
    with pytest.raises(AttributeError):
        T.grade_labels = ()
