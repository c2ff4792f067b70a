"""Tests for height and setback rules."""

from __future__ import annotations

import pytest

from limit.models.schemas import Zone
from limit.regulation_engine.height_setback import (
    DEFAULT_FRONT_SETBACK,
    calculate_height,
    calculate_setbacks,
    find_front_setback,
    find_side_setback,
)


class TestFrontSetbackBands:
    """Front setback by primary road width."""

    @pytest.mark.parametrize("road_width,setback", [
        (6, 4),
        (8.999, 4),
        (9, 4.5),
        (11.99, 4.5),
        (12, 6),
        (17.99, 6),
    ])
    def test_band_edges(self, rules, road_width, setback):
        match = find_front_setback(rules.zone_rules(Zone.R1), road_width)
        assert match.value == setback
        assert match.default_used is False

    @pytest.mark.parametrize("road_width", [2, 5.999, 18, 100])
    def test_out_of_range_defaults_to_three(self, rules, road_width):
        match = find_front_setback(rules.zone_rules(Zone.R1), road_width)
        assert match.value == DEFAULT_FRONT_SETBACK == 3
        assert match.default_used is True


class TestSideSetbackBands:
    """Side setback by building height."""

    def test_height_at_band_max_goes_to_next(self, rules):
        match = find_side_setback(rules.zone_rules(Zone.R1), 30)
        assert match.value == 7

    def test_below_all_bands_defaults_to_zero(self, rules):
        match = find_side_setback(rules.zone_rules(Zone.R1), 8)
        assert match.value == 0
        assert match.default_used is True


class TestHeight:
    """Height = min(2 × (road width + front setback), zone max)."""

    def test_example_site_under_cap(self, rules, make_site):
        height = calculate_height(make_site(road_width=9), rules)
        assert height.max == 27
        assert height.zone_limit == 45
        assert height.formula == "2 × (Road Width + Front Setback)"

    def test_uses_default_front_setback(self, rules, make_site):
        # 18 is outside every band: 2 × (18 + 3) = 42
        height = calculate_height(make_site(road_width=18), rules)
        assert height.max == 42

    def test_capped_at_zone_max(self, rules, make_site):
        # 2 × (20 + 3) = 46 > 45
        height = calculate_height(make_site(road_width=20), rules)
        assert height.max == 45
        assert "zone max governs" in height.calculation

    @pytest.mark.parametrize("road_width", [1, 9, 17, 30, 100, 1000])
    def test_never_exceeds_zone_max(self, rules, make_site, road_width):
        for zone in Zone:
            height = calculate_height(make_site(zone=zone, road_width=road_width), rules)
            assert height.max <= rules.zone_rules(zone).max_height

    def test_derivation_text(self, rules, make_site):
        height = calculate_height(make_site(road_width=9), rules)
        assert height.calculation == (
            "Formula: 2 × (Road Width + Front Setback)\n"
            "= 2 × (9m + 4.5m)\n"
            "= 2 × 13.5m\n"
            "= 27.00m\n"
            "\n"
            "Zone Maximum: 45m\n"
            "Permissible Height: 27.00m (lower of calculated and zone max; calculated governs)"
        )


class TestSetbacks:
    """Front / side / rear setbacks."""

    def test_example_site(self, rules, make_site):
        site = make_site(road_width=9)
        height = calculate_height(site, rules)
        setbacks = calculate_setbacks(site, rules, height.max)
        assert setbacks.front == 4.5
        assert setbacks.side == 5  # 27 m falls in [20, 30)
        assert setbacks.rear == 3

    def test_side_setback_uses_capped_height(self, rules, make_site):
        # Industrial caps height at 25; formula gives 2 × (12 + 6) = 36,
        # which would select the [30, 45) band (7 m).
        site = make_site(zone=Zone.INDUSTRIAL, road_width=12)
        height = calculate_height(site, rules)
        assert height.max == 25
        setbacks = calculate_setbacks(site, rules, height.max)
        assert setbacks.side == 5
        assert setbacks.rear == 6

    def test_low_building_side_default(self, rules, make_site):
        # Road 1 m: 2 × (1 + 3) = 8 m, below every side band
        site = make_site(road_width=1)
        height = calculate_height(site, rules)
        setbacks = calculate_setbacks(site, rules, height.max)
        assert setbacks.front == 3
        assert setbacks.side == 0

    def test_front_agrees_with_height_step(self, rules, make_site):
        for road_width in [1, 6, 9, 12, 18, 25]:
            site = make_site(road_width=road_width)
            height = calculate_height(site, rules)
            setbacks = calculate_setbacks(site, rules, height.max)
            assert height.max == min(2 * (road_width + setbacks.front), 45)

    def test_corner_plot_note(self, rules, make_site):
        site = make_site(road_width=9, is_corner_plot=True)
        setbacks = calculate_setbacks(site, rules, 27)
        assert setbacks.calculations.endswith(
            "Corner Plot: Front setback required on both road-facing sides"
        )

    def test_interior_plot_text(self, rules, make_site):
        setbacks = calculate_setbacks(make_site(road_width=9), rules, 27)
        assert setbacks.calculations == (
            "Front Setback (Road Width 9m): 4.5m\n"
            "Side Setback (Building Height 27.00m): 5m\n"
            "Rear Setback: 3m"
        )
