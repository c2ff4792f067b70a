"""
Structural minimums, fire safety and accessibility obligations.

Fire safety and the lift obligation are gated on the permissible height.
"""

from __future__ import annotations

from limit.models.schemas import (
    AccessibilityResult, FireSafetyResult, SiteDescription, StructuralResult,
)
from limit.regulation_engine.rule_table import RuleTable

FIRE_SAFETY_FALLBACK = "Fire extinguisher on ground floor (recommended)"

LIFT_REQUIREMENT_MARKER = "Lift required"
LIFT_RECOMMENDATION = "Lift recommended for heights above 15m"


def is_commercial_use(site: SiteDescription) -> bool:
    return site.intended_use.value.startswith("Commercial")


def get_structural_requirements(site: SiteDescription, rules: RuleTable) -> StructuralResult:
    structural = rules.structural
    if is_commercial_use(site):
        floor_height = structural.floor_height.commercial
    else:
        floor_height = structural.floor_height.residential

    return StructuralResult(
        plinth_height=structural.plinth_height.max,
        floor_height=floor_height,
        parapet=structural.parapet.min,
    )


def get_fire_safety_requirements(building_height: float, rules: RuleTable) -> FireSafetyResult:
    """Full requirement list above the height threshold, a single recommendation otherwise."""
    fire = rules.fire_safety
    required = building_height > fire.height_threshold
    requirements = list(fire.requirements) if required else [FIRE_SAFETY_FALLBACK]
    return FireSafetyResult(required=required, requirements=requirements)


def get_accessibility_requirements(building_height: float, rules: RuleTable) -> AccessibilityResult:
    """Ramp flag copied from the rules; lift required only above the lift threshold.

    Below the threshold the first entry mentioning the lift requirement is
    softened to a recommendation. Lists without such an entry are returned
    unchanged.
    """
    access = rules.accessibility
    lift_required = building_height > access.lift_threshold
    requirements = list(access.requirements)

    if not lift_required:
        for i, req in enumerate(requirements):
            if LIFT_REQUIREMENT_MARKER in req:
                requirements[i] = LIFT_RECOMMENDATION
                break

    return AccessibilityResult(
        ramp_required=access.ramp_required,
        lift_required=lift_required,
        requirements=requirements,
    )
