"""
Main regulation calculator: takes a SiteDescription and a RuleTable and
produces a RegulationResult plus the GDCR clause list.

Pipeline (each step feeds the next where noted):
  1. FSI            → max built-up area
  2. Height         (zone rules + road width)
  3. Setbacks       (side band uses the capped height from 2)
  4. Ground coverage
  5. Parking        (uses max built-up area from 1)
  6. Structural
  7. Fire safety    (uses height from 2)
  8. Accessibility  (uses height from 2)

The calculator holds no state; the rule table is passed on every call.
"""

from __future__ import annotations

from limit.models.schemas import GDCRClause, RegulationResult, SiteDescription
from limit.regulation_engine.building_services import (
    get_accessibility_requirements,
    get_fire_safety_requirements,
    get_structural_requirements,
)
from limit.regulation_engine.clauses import build_clauses
from limit.regulation_engine.coverage import calculate_ground_coverage
from limit.regulation_engine.fsi import calculate_fsi
from limit.regulation_engine.height_setback import calculate_height, calculate_setbacks
from limit.regulation_engine.parking import calculate_parking
from limit.regulation_engine.rule_table import RuleTable


class RegulationCalculator:
    """Computes the permissible building envelope for a site under GDCR rules."""

    def calculate(
        self,
        site: SiteDescription,
        rules: RuleTable,
    ) -> tuple[RegulationResult, list[GDCRClause]]:
        """Full calculation: result record + clause citations."""
        # Resolve up front so a missing zone or use fails before any step runs
        rules.zone_rules(site.zone)
        rules.parking_norm(site.intended_use)

        fsi = calculate_fsi(site, rules)
        height = calculate_height(site, rules)
        setbacks = calculate_setbacks(site, rules, height.max)
        ground_coverage = calculate_ground_coverage(site, rules)
        parking = calculate_parking(site, rules, fsi.max_built_up_area)
        structural = get_structural_requirements(site, rules)
        fire_safety = get_fire_safety_requirements(height.max, rules)
        accessibility = get_accessibility_requirements(height.max, rules)

        result = RegulationResult(
            fsi=fsi,
            height=height,
            setbacks=setbacks,
            ground_coverage=ground_coverage,
            parking=parking,
            structural=structural,
            fire_safety=fire_safety,
            accessibility=accessibility,
        )
        return result, build_clauses(rules)


def calculate_regulations(
    site: SiteDescription,
    rules: RuleTable,
) -> tuple[RegulationResult, list[GDCRClause]]:
    return RegulationCalculator().calculate(site, rules)
