"""
GDCR parking requirement in Equivalent Car Spaces (ECS).

  required ECS = (max built-up area / built-up unit) × ECS per unit
  reported count = ceil(required ECS)
  parking area = required ECS (unrounded) × ECS area

The reported count is rounded up but the area is taken from the exact ECS
figure, so ``area_required`` can be less than ``required × ecs_area``. Reports
are audited against both numbers; keep them as they are.
"""

from __future__ import annotations

import math

from limit.models.schemas import ParkingResult, SiteDescription
from limit.regulation_engine.derivation import fixed, lines, num
from limit.regulation_engine.rule_table import RuleTable


def required_ecs(max_built_up_area: float, builtup_unit: float, ecs_per_builtup: float) -> float:
    """Exact (fractional) ECS requirement."""
    return (max_built_up_area / builtup_unit) * ecs_per_builtup


def calculate_parking(
    site: SiteDescription,
    rules: RuleTable,
    max_built_up_area: float,
) -> ParkingResult:
    """Parking for the intended use, driven by the FSI step's max built-up area."""
    norm = rules.parking_norm(site.intended_use)
    ecs_area = rules.parking.ecs_area

    ecs = required_ecs(max_built_up_area, norm.builtup_unit, norm.ecs_per_builtup)
    area_required = ecs * ecs_area

    calculation = lines(
        f"Use Type: {site.intended_use.value}",
        f"Parking Norm: {norm.description}",
        "",
        f"Required ECS = (Built-up Area / {num(norm.builtup_unit)}) × {num(norm.ecs_per_builtup)}",
        f"= ({fixed(max_built_up_area)} sq.m / {num(norm.builtup_unit)}) × {num(norm.ecs_per_builtup)}",
        f"= {fixed(ecs)} ECS",
        "",
        f"Parking Area Required = ECS × {num(ecs_area)} sq.m",
        f"= {fixed(ecs)} × {num(ecs_area)} sq.m",
        f"= {fixed(area_required)} sq.m",
    )

    return ParkingResult(
        required=math.ceil(ecs),
        area_required=area_required,
        calculation=calculation,
    )
