# © 2026 Aparajita Parihar. All rights reserved.
# OpenDPE Estimator — Tests for envelope transmittance and ground coupling

import pytest

from core.envelope import (
    adjacency_btr,
    effective_floor_u,
    floor_u,
    glazing_u,
    ground_coupled_u,
    opening_u,
    parse_year,
    roof_u,
    wall_u,
)
from core.models import (
    Adjacency,
    ClimateZone,
    DoorMaterial,
    FloorSituation,
    FloorSlab,
    FloorStructure,
    Glazing,
    Opening,
    OpeningKind,
    RoofSituation,
    RoofStructure,
    RoofSurface,
    SlabInsulation,
    WallInsulation,
    WallMaterial,
)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Year parsing
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("raw, expected", [
    ("82", 1982),
    ("05", 2005),
    ("1995", 1995),
    (75, 1975),
    ("74", 2074),
    (" 2012 ", 2012),
    (1988, 1988),
])
def test_parse_year_expands_two_digit_years(raw, expected):
    assert parse_year(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "19x5", "19955", "-82", True])
def test_parse_year_unparsable_is_no_evidence(raw):
    assert parse_year(raw) is None


# ─────────────────────────────────────────────────────────────────────────────
# 2. Walls, glazing, doors
# ─────────────────────────────────────────────────────────────────────────────
class TestWallU:
    def test_table_lookup(self):
        assert wall_u(WallMaterial.STONE, WallInsulation.EXTERIOR) == 0.28
        assert wall_u(WallMaterial.TIMBER_FRAME, WallInsulation.NONE) == 0.7

    def test_unknown_material_uses_concrete_block_row(self):
        assert wall_u(None, WallInsulation.NONE) == 1.5
        assert wall_u("adobe", WallInsulation.INTERIOR) == 0.35

    def test_unknown_insulation_treated_as_uninsulated(self):
        assert wall_u(WallMaterial.STONE, None) == 2.5

    def test_insulation_never_worse_than_bare_wall(self):
        for material in WallMaterial:
            bare = wall_u(material, WallInsulation.NONE)
            for insulation in WallInsulation:
                assert wall_u(material, insulation) <= bare


class TestOpeningU:
    def test_glazing_default_is_old_double(self):
        assert glazing_u(None) == 2.9
        assert glazing_u(Glazing.TRIPLE) == 0.8

    def test_window_uses_glazing(self):
        assert opening_u(Opening(OpeningKind.WINDOW, glazing=Glazing.SINGLE)) == 5.8

    def test_opaque_door_uses_material(self):
        door = Opening(OpeningKind.OPAQUE_DOOR, door_material=DoorMaterial.PVC)
        assert opening_u(door) == 1.2

    def test_glazed_door_blends_by_fraction(self):
        door = Opening(
            OpeningKind.GLAZED_DOOR,
            door_material=DoorMaterial.STEEL,
            glazing=Glazing.DOUBLE_RECENT,
            glazed_fraction_pct=50,
        )
        assert opening_u(door) == pytest.approx(2.7)

    def test_unknown_door_material_uses_other(self):
        door = Opening(OpeningKind.OPAQUE_DOOR, door_material="marble")
        assert opening_u(door) == 2.0


def test_adjacency_btr():
    assert adjacency_btr(Adjacency.UNHEATED_GARAGE) == 0.75
    assert adjacency_btr(Adjacency.HEATED_NEIGHBOUR) == 0.0
    assert adjacency_btr(Adjacency.CALCULATED_UNHEATED) is None
    assert adjacency_btr("basement_flat") == 1.0


# ─────────────────────────────────────────────────────────────────────────────
# 3. Floors and roofs
# ─────────────────────────────────────────────────────────────────────────────
class TestFloorU:
    def test_uninsulated_returns_base_coefficient(self):
        floor = FloorSlab(structure=FloorStructure.SOLID_CONCRETE, insulation=SlabInsulation.NONE)
        assert floor_u(floor, ClimateZone.H1A) == 2.0

    def test_thickness_formula(self):
        floor = FloorSlab(
            structure=FloorStructure.SOLID_CONCRETE,
            insulation=SlabInsulation.INTERIOR,
            insulation_thickness_m=0.10,
        )
        # 1 / (1/2.0 + 0.10/0.042) = 0.347
        assert floor_u(floor) == 0.35

    def test_thickness_takes_precedence_over_year(self):
        floor = FloorSlab(
            structure=FloorStructure.SOLID_CONCRETE,
            insulation=SlabInsulation.INTERIOR,
            insulation_thickness_m=0.10,
            insulation_year=2020,
        )
        assert floor_u(floor) == 0.35

    def test_year_bracket_uses_zone_column(self):
        floor = FloorSlab(
            structure=FloorStructure.SOLID_CONCRETE,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year="85",
        )
        assert floor_u(floor, ClimateZone.H1B) == 0.8
        assert floor_u(floor, ClimateZone.H2D) == 0.74
        assert floor_u(floor, ClimateZone.H3) == 0.89

    def test_year_value_capped_at_base_coefficient(self):
        floor = FloorSlab(
            structure=FloorStructure.POLYSTYRENE_INFILL,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year=1980,
        )
        assert floor_u(floor, ClimateZone.H1A) == 0.45

    def test_no_evidence_uses_oldest_bracket(self):
        floor = FloorSlab(structure=FloorStructure.SOLID_CONCRETE, insulation=SlabInsulation.UNKNOWN)
        assert floor_u(floor, ClimateZone.H2A) == 2.0

    def test_unparsable_year_is_no_evidence(self):
        floor = FloorSlab(
            structure=FloorStructure.CONCRETE_HOLLOW_CORE,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year="recent",
        )
        assert floor_u(floor) == 1.6

    def test_thinner_insulation_never_lowers_u(self):
        values = [
            floor_u(FloorSlab(
                structure=FloorStructure.SOLID_CONCRETE,
                insulation=SlabInsulation.INTERIOR,
                insulation_thickness_m=e,
            ))
            for e in (0.20, 0.12, 0.08, 0.04, 0.01)
        ]
        assert values == sorted(values)


class TestRoofU:
    def test_attic_year_bracket(self):
        roof = RoofSurface(
            structure=RoofStructure.LOST_ATTIC,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year=2010,
        )
        assert roof_u(roof, ClimateZone.H1C) == 0.2

    def test_unheated_room_above_forces_flat_roof_table(self):
        roof = RoofSurface(
            structure=RoofStructure.LOST_ATTIC,
            situation=RoofSituation.UNHEATED_ROOM,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year=2010,
        )
        assert roof_u(roof, ClimateZone.H1C) == 0.27

    def test_flat_roof_structure_uses_flat_table(self):
        roof = RoofSurface(
            structure=RoofStructure.FLAT_ROOF,
            insulation=SlabInsulation.INTERIOR,
            insulation_year="1995",
        )
        assert roof_u(roof, ClimateZone.H2B) == 0.42

    def test_thickness_uses_roof_conductivity(self):
        roof = RoofSurface(
            structure=RoofStructure.LOST_ATTIC,
            insulation=SlabInsulation.EXTERIOR,
            insulation_thickness_m=0.20,
        )
        # 1 / (1/2.5 + 0.20/0.040) = 0.185
        assert roof_u(roof) == 0.19

    def test_thatch_never_exceeds_its_base(self):
        roof = RoofSurface(
            structure=RoofStructure.THATCH,
            insulation=SlabInsulation.EXTERIOR,
            insulation_year=1960,
        )
        assert roof_u(roof) == 0.24


# ─────────────────────────────────────────────────────────────────────────────
# 4. Ground coupling
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("upb, expected", [
    (2.0, 0.60),
    (1.6, 0.46),
    (0.85, 0.38),
    (0.6, 0.32),
    (0.3, 0.27),
])
def test_ground_coupling_slab_on_grade(upb, expected):
    assert ground_coupled_u(upb, FloorSituation.SLAB_ON_GRADE) == expected


@pytest.mark.parametrize("upb, expected", [
    (3.2, 0.39),
    (2.0, 0.36),
    (0.8, 0.34),
    (0.5, 0.32),
    (0.2, 0.30),
])
def test_ground_coupling_crawlspace_and_cellar(upb, expected):
    assert ground_coupled_u(upb, FloorSituation.CRAWLSPACE) == expected
    assert ground_coupled_u(upb, FloorSituation.UNHEATED_CELLAR) == expected


def test_open_air_and_unheated_room_keep_upb():
    assert ground_coupled_u(1.7, FloorSituation.OPEN_AIR) == 1.7
    assert ground_coupled_u(1.7, FloorSituation.UNHEATED_ROOM) == 1.7


def test_effective_floor_u_chains_both_steps(detached_house):
    floor = detached_house.floors[0]
    # 1992 → 2000 bracket, H2 column 0.63, then crawlspace step ≥ 0.45
    assert floor_u(floor, detached_house.climate_zone) == 0.63
    assert effective_floor_u(floor, detached_house.climate_zone) == 0.32
