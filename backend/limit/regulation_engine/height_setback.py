"""
GDCR height and setback rules.

Height:
  permissible height = min(2 × (road width + front setback), zone max height)

Setbacks:
  - front: banded by primary road width (3 m when no band covers it)
  - side: banded by the permissible (already capped) height (0 m when no band covers it)
  - rear: flat value per zone

The front setback band is looked up separately for height and for setbacks.
Both read the same band table, so the two always agree.
"""

from __future__ import annotations

from limit.models.schemas import HeightResult, SetbackResult, SiteDescription
from limit.regulation_engine.bands import BandMatch, lookup_band
from limit.regulation_engine.derivation import fixed, lines, num
from limit.regulation_engine.rule_table import (
    FrontSetbackBand, RuleTable, SideSetbackBand, ZoneRules,
)

DEFAULT_FRONT_SETBACK = 3
DEFAULT_SIDE_SETBACK = 0

HEIGHT_FORMULA = "2 × (Road Width + Front Setback)"


def find_front_setback(zone_rules: ZoneRules, road_width: float) -> BandMatch[FrontSetbackBand]:
    return lookup_band(
        zone_rules.setbacks.front,
        road_width,
        key=lambda b: b.road_width,
        value=lambda b: b.setback,
        default=DEFAULT_FRONT_SETBACK,
        kind="front setback band",
    )


def find_side_setback(zone_rules: ZoneRules, building_height: float) -> BandMatch[SideSetbackBand]:
    return lookup_band(
        zone_rules.setbacks.side,
        building_height,
        key=lambda b: b.height,
        value=lambda b: b.setback,
        default=DEFAULT_SIDE_SETBACK,
        kind="side setback band",
    )


def calculate_height(site: SiteDescription, rules: RuleTable) -> HeightResult:
    """Permissible height from the road-width formula, capped at the zone maximum."""
    zone_rules = rules.zone_rules(site.zone)
    road_width = site.road_width_primary
    front_setback = find_front_setback(zone_rules, road_width).value

    calculated = 2 * (road_width + front_setback)
    zone_limit = zone_rules.max_height
    max_height = min(calculated, zone_limit)
    governs = "zone max governs" if calculated > zone_limit else "calculated governs"

    calculation = lines(
        f"Formula: {HEIGHT_FORMULA}",
        f"= 2 × ({num(road_width)}m + {num(front_setback)}m)",
        f"= 2 × {num(road_width + front_setback)}m",
        f"= {fixed(calculated)}m",
        "",
        f"Zone Maximum: {num(zone_limit)}m",
        f"Permissible Height: {fixed(max_height)}m "
        f"(lower of calculated and zone max; {governs})",
    )

    return HeightResult(
        max=max_height,
        formula=HEIGHT_FORMULA,
        zone_limit=zone_limit,
        calculation=calculation,
    )


def calculate_setbacks(
    site: SiteDescription,
    rules: RuleTable,
    building_height: float,
) -> SetbackResult:
    """Front, side and rear margins.

    ``building_height`` must be the capped permissible height from
    :func:`calculate_height`, not the raw formula value.
    """
    zone_rules = rules.zone_rules(site.zone)
    road_width = site.road_width_primary

    front = find_front_setback(zone_rules, road_width).value
    side = find_side_setback(zone_rules, building_height).value
    rear = zone_rules.setbacks.rear

    calculations = lines(
        f"Front Setback (Road Width {num(road_width)}m): {num(front)}m",
        f"Side Setback (Building Height {fixed(building_height)}m): {num(side)}m",
        f"Rear Setback: {num(rear)}m",
        "",
        "Corner Plot: Front setback required on both road-facing sides"
        if site.is_corner_plot else "",
    )

    return SetbackResult(front=front, side=side, rear=rear, calculations=calculations)
