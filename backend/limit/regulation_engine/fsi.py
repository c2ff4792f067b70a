"""
Floor Space Index.

  total FSI = min(base + road-width premium [+ corner plot bonus], max FSI)
  max built-up area = plot area × total FSI
"""

from __future__ import annotations

from limit.models.schemas import FSIResult, SiteDescription
from limit.regulation_engine.bands import BandMatch, lookup_band
from limit.regulation_engine.derivation import fixed, lines, num
from limit.regulation_engine.rule_table import FSIPremiumBand, RuleTable, ZoneRules

DEFAULT_FSI_PREMIUM = 0


def find_fsi_premium(zone_rules: ZoneRules, road_width: float) -> BandMatch[FSIPremiumBand]:
    """Premium band for the primary road width; 0 when no band covers it."""
    return lookup_band(
        zone_rules.fsi_premium,
        road_width,
        key=lambda b: b.road_width,
        value=lambda b: b.premium,
        default=DEFAULT_FSI_PREMIUM,
        kind="FSI premium band",
    )


def calculate_fsi(site: SiteDescription, rules: RuleTable) -> FSIResult:
    zone_rules = rules.zone_rules(site.zone)
    road_width = site.road_width_primary
    area = site.plot_dimensions.area

    base = zone_rules.base_fsi
    match = find_fsi_premium(zone_rules, road_width)
    premium = match.value

    bonus = rules.corner_plot_bonus.fsi_bonus
    if site.is_corner_plot:
        premium += bonus

    total = min(base + premium, zone_rules.max_fsi)
    max_built_up_area = area * total

    calculation = lines(
        f"Base FSI ({site.zone.value}): {num(base)}",
        f"Road Width Premium ({num(road_width)}m): +{num(match.value)}",
        f"Corner Plot Bonus: +{num(bonus)}" if site.is_corner_plot else "",
        f"Total FSI: {fixed(total)} (Max: {num(zone_rules.max_fsi)})",
        "",
        "Maximum Built-up Area = Plot Area × FSI",
        f"= {fixed(area)} sq.m × {fixed(total)}",
        f"= {fixed(max_built_up_area)} sq.m",
    )

    return FSIResult(
        base=base,
        premium=premium,
        total=total,
        max_built_up_area=max_built_up_area,
        calculation=calculation,
    )
