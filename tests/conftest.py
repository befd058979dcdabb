"""
Pytest configuration and fixtures for the OpenDPE Estimator tests.

Provides reusable dwelling descriptions:
- the single-wall reference house used to check the full calculation chain
- its plain-dict equivalent, as produced by the data-collection layer
- a fully described house exercising every envelope family
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.models import (
    Adjacency,
    ClimateZone,
    DhwGenerator,
    DhwSystem,
    Dwelling,
    FloorSituation,
    FloorSlab,
    FloorStructure,
    Glazing,
    HeatingGenerator,
    HeatingSystem,
    InstallationMode,
    Opening,
    OpeningKind,
    Regulation,
    RoofSituation,
    RoofStructure,
    RoofSurface,
    Room,
    SlabInsulation,
    TankInsulation,
    VentilationPeriod,
    VentilationSystem,
    VentilationType,
    WallInsulation,
    WallMaterial,
    WallSegment,
)


# =============================================================================
# REFERENCE HOUSE
# 20 m², one 8 × 2.5 m uninsulated block wall, systems unknown, zone H1a
# =============================================================================

@pytest.fixture
def reference_dwelling() -> Dwelling:
    return Dwelling(
        climate_zone=ClimateZone.H1A,
        altitude_m=100,
        heated_levels=1,
        rooms=(Room("Living room", 20.0),),
        walls=(WallSegment(
            material=WallMaterial.CONCRETE_BLOCK,
            insulation=WallInsulation.NONE,
            length_m=8.0,
            height_m=2.5,
            adjacency=Adjacency.EXTERIOR,
        ),),
        ventilation=VentilationSystem(type=VentilationType.WINDOW_OPENING),
        heating=HeatingSystem(unknown=True, regulation=Regulation.NONE),
        dhw=DhwSystem(unknown=True),
    )


@pytest.fixture
def reference_dict() -> dict:
    return {
        "id": "reference",
        "climate_zone": "H1a",
        "altitude_m": 100,
        "heated_levels": 1,
        "rooms": [{"name": "Living room", "surface_m2": 20}],
        "walls": [{
            "material": "concrete_block",
            "insulation": "none",
            "length_m": 8,
            "height_m": 2.5,
            "adjacency": "exterior",
        }],
        "ventilation": {"type": "window_opening"},
        "heating": {"unknown": True, "regulation": "none"},
        "dhw": {"unknown": True},
    }


# =============================================================================
# FULLY DESCRIBED HOUSE
# =============================================================================

@pytest.fixture
def detached_house() -> Dwelling:
    return Dwelling(
        climate_zone=ClimateZone.H2B,
        altitude_m=250,
        heated_levels=2,
        rooms=(Room("Ground floor", 55.0), Room("First floor", 45.0)),
        walls=(
            WallSegment(WallMaterial.SOLID_BRICK, WallInsulation.INTERIOR, 10.0, 5.0),
            WallSegment(WallMaterial.SOLID_BRICK, WallInsulation.INTERIOR, 8.0, 5.0),
            WallSegment(WallMaterial.SOLID_BRICK, WallInsulation.NONE, 10.0, 5.0,
                        adjacency=Adjacency.UNHEATED_GARAGE),
            WallSegment(WallMaterial.SOLID_BRICK, WallInsulation.NONE, 8.0, 5.0,
                        adjacency=Adjacency.HEATED_NEIGHBOUR),
        ),
        floors=(FloorSlab(
            structure=FloorStructure.CONCRETE_HOLLOW_CORE,
            situation=FloorSituation.CRAWLSPACE,
            insulation=SlabInsulation.EXTERIOR,
            surface_m2=55.0,
            insulation_year="92",
        ),),
        roofs=(RoofSurface(
            structure=RoofStructure.LOST_ATTIC,
            situation=RoofSituation.UNHEATED_ATTIC,
            insulation=SlabInsulation.EXTERIOR,
            surface_m2=55.0,
            insulation_thickness_m=0.20,
        ),),
        openings=(
            Opening(OpeningKind.WINDOW, 1.2, 1.4, count=6, glazing=Glazing.DOUBLE_RECENT),
            Opening(OpeningKind.FRENCH_WINDOW, 1.8, 2.15, glazing=Glazing.DOUBLE_RECENT),
            Opening(OpeningKind.OPAQUE_DOOR, 0.9, 2.15),
        ),
        ventilation=VentilationSystem(VentilationType.SF_HYGRO_B, VentilationPeriod.FROM_2001_TO_2012),
        heating=HeatingSystem(
            generator=HeatingGenerator.GAS_CONDENSING,
            regulation=Regulation.CENTRAL_WITH_MINIMUM,
            installation_mode=InstallationMode.INDIVIDUAL,
        ),
        dhw=DhwSystem(
            generator=DhwGenerator.COUPLED_TO_HEATING,
            tank_insulation=TankInsulation.GOOD,
            installation_mode=InstallationMode.INDIVIDUAL,
        ),
    )
