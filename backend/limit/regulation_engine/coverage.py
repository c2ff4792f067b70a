"""Ground coverage: max footprint = plot area × coverage % / 100."""

from __future__ import annotations

from limit.models.schemas import GroundCoverageResult, SiteDescription
from limit.regulation_engine.derivation import fixed, lines, num
from limit.regulation_engine.rule_table import RuleTable


def calculate_ground_coverage(site: SiteDescription, rules: RuleTable) -> GroundCoverageResult:
    max_percentage = rules.zone_rules(site.zone).ground_coverage
    area = site.plot_dimensions.area
    max_area = area * max_percentage / 100

    calculation = lines(
        f"Maximum Ground Coverage: {num(max_percentage)}%",
        f"Plot Area: {fixed(area)} sq.m",
        "",
        "Maximum Ground Floor Area = Plot Area × Coverage %",
        f"= {fixed(area)} sq.m × {num(max_percentage)}%",
        f"= {fixed(max_area)} sq.m",
    )

    return GroundCoverageResult(
        max_percentage=max_percentage,
        max_area=max_area,
        calculation=calculation,
    )
