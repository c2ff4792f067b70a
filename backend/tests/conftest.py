"""Shared fixtures: a synthetic rule table and a site builder.

Fixture bands (half-open):
  FSI premium by road width:   [6,9)→0.1  [9,12)→0.3  [12,18)→0.5
  Front setback by road width: [6,9)→4    [9,12)→4.5  [12,18)→6
  Side setback by height:      [10,20)→3  [20,30)→5   [30,45)→7  [45,60)→9

Road widths below 6 or from 18 up fall outside every band.
"""

from __future__ import annotations

import pytest

from limit.models.schemas import (
    IntendedUse, PlotDimensions, SiteDescription, Zone,
)
from limit.regulation_engine.rule_table import RuleTable


def _zone(
    base_fsi: float = 1.2,
    max_fsi: float = 1.8,
    max_height: float = 45,
    ground_coverage: float = 60,
    rear: float = 3,
) -> dict:
    return {
        "base_fsi": base_fsi,
        "fsi_premium": [
            {"road_width": {"min": 6, "max": 9}, "premium": 0.1},
            {"road_width": {"min": 9, "max": 12}, "premium": 0.3},
            {"road_width": {"min": 12, "max": 18}, "premium": 0.5},
        ],
        "max_fsi": max_fsi,
        "max_height": max_height,
        "ground_coverage": ground_coverage,
        "setbacks": {
            "front": [
                {"road_width": {"min": 6, "max": 9}, "setback": 4},
                {"road_width": {"min": 9, "max": 12}, "setback": 4.5},
                {"road_width": {"min": 12, "max": 18}, "setback": 6},
            ],
            "side": [
                {"height": {"min": 10, "max": 20}, "setback": 3},
                {"height": {"min": 20, "max": 30}, "setback": 5},
                {"height": {"min": 30, "max": 45}, "setback": 7},
                {"height": {"min": 45, "max": 60}, "setback": 9},
            ],
            "rear": rear,
        },
    }


def fixture_rule_data() -> dict:
    norm = {
        "builtup_unit": 100, "ecs_per_builtup": 1,
        "description": "1 ECS per 100 sq.m of built-up area",
    }
    return {
        "version": "fixture",
        "zones": {
            "R1": _zone(),
            "R2": _zone(base_fsi=1.8, max_fsi=2.7, ground_coverage=50),
            "Commercial": _zone(base_fsi=2.0, max_fsi=4.0, rear=4.5),
            "Industrial": _zone(base_fsi=1.0, max_fsi=1.8, max_height=25, rear=6),
            "Mixed-Use": _zone(base_fsi=1.8, max_fsi=3.6, ground_coverage=50, rear=4.5),
        },
        "corner_plot_bonus": {"fsi_bonus": 0.2},
        "parking": {
            "ecs_area": 25,
            "norms": {
                use.value: dict(norm) for use in IntendedUse
            } | {
                "Commercial-Retail": {
                    "builtup_unit": 50, "ecs_per_builtup": 1,
                    "description": "1 ECS per 50 sq.m of built-up area",
                },
            },
        },
        "structural": {
            "plinth_height": {"min": 0.45, "max": 1.2},
            "floor_height": {"residential": 3.0, "commercial": 4.2},
            "parapet": {"min": 1.0},
        },
        "fire_safety": {
            "height_threshold": 15,
            "requirements": [
                "Fire NOC required",
                "Two staircases",
                "Sprinkler system",
            ],
        },
        "accessibility": {
            "lift_threshold": 15,
            "ramp_required": True,
            "requirements": [
                "Ramp at entrance",
                "Lift required for buildings above 15m",
                "Accessible toilet",
            ],
        },
        "gdcr_clauses": {
            "fsi": "F-1",
            "height": "H-1",
            "setbacks": "S-1",
            "ground_coverage": "G-1",
            "parking": "P-1",
            "structural": "ST-1",
            "fire_safety": "FS-1",
            "accessibility": "A-1",
        },
    }


@pytest.fixture
def rule_data() -> dict:
    return fixture_rule_data()


@pytest.fixture
def rules(rule_data) -> RuleTable:
    return RuleTable.model_validate(rule_data)


@pytest.fixture
def make_site():
    def _make_site(
        zone: Zone = Zone.R1,
        road_width: float = 9,
        length: float = 30,
        width: float = 20,
        is_corner_plot: bool = False,
        intended_use: IntendedUse = IntendedUse.RESIDENTIAL_SINGLE,
        project_name: str = "Test Site",
    ) -> SiteDescription:
        return SiteDescription(
            project_name=project_name,
            address="Test address",
            zone=zone,
            plot_dimensions=PlotDimensions.from_sides(length, width),
            is_corner_plot=is_corner_plot,
            road_width_primary=road_width,
            intended_use=intended_use,
        )
    return _make_site
