"""
GDCR 2017 (Comprehensive General Development Control Regulations, Gujarat)
reference tables.

Road-width bands are shared by the FSI premium and front setback tables:
  [0, 9)  [9, 12)  [12, 18)  [18, 30)  [30, 1000)   metres

Side setbacks are banded by the permissible building height:
  [0, 15)  [15, 25)  [25, 45)  [45, 70)  [70, 1000)  metres

All bands are half-open and contiguous; RuleTable validation rejects gaps.

Sources:
  - GDCR 2017 Part II (Development Regulations), FSI and height tables
  - GDCR 2017 Part III (Building Regulations), structural and services clauses
  - GDCR 2017 Part IV (Fire Safety) and Annexure on universal accessibility
"""

from __future__ import annotations

ROAD_WIDTH_BANDS = [(0, 9), (9, 12), (12, 18), (18, 30), (30, 1000)]
HEIGHT_BANDS = [(0, 15), (15, 25), (25, 45), (45, 70), (70, 1000)]


def _premium_bands(premiums: list[float]) -> list[dict]:
    return [
        {"road_width": {"min": lo, "max": hi}, "premium": p}
        for (lo, hi), p in zip(ROAD_WIDTH_BANDS, premiums)
    ]


def _front_bands(setbacks: list[float]) -> list[dict]:
    return [
        {"road_width": {"min": lo, "max": hi}, "setback": s}
        for (lo, hi), s in zip(ROAD_WIDTH_BANDS, setbacks)
    ]


def _side_bands(setbacks: list[float]) -> list[dict]:
    return [
        {"height": {"min": lo, "max": hi}, "setback": s}
        for (lo, hi), s in zip(HEIGHT_BANDS, setbacks)
    ]


# Front margin by road width (same for every zone)
FRONT_SETBACKS = [3, 4.5, 6, 7.5, 9]

# ──────────────────────────────────────────────────────────────────
# ZONES
# ──────────────────────────────────────────────────────────────────

ZONES = {
    # Residential 1: plotted / low-rise housing
    "R1": {
        "base_fsi": 1.2,
        "fsi_premium": _premium_bands([0, 0.3, 0.6, 0.9, 1.2]),
        "max_fsi": 1.8,
        "max_height": 45,
        "ground_coverage": 60,
        "setbacks": {
            "front": _front_bands(FRONT_SETBACKS),
            "side": _side_bands([3, 4, 6, 8, 10]),
            "rear": 3,
        },
    },
    # Residential 2: apartments / group housing
    "R2": {
        "base_fsi": 1.8,
        "fsi_premium": _premium_bands([0, 0.4, 0.8, 1.2, 1.6]),
        "max_fsi": 2.7,
        "max_height": 45,
        "ground_coverage": 50,
        "setbacks": {
            "front": _front_bands(FRONT_SETBACKS),
            "side": _side_bands([3, 4, 6, 8, 10]),
            "rear": 3,
        },
    },
    "Commercial": {
        "base_fsi": 2.0,
        "fsi_premium": _premium_bands([0, 0.5, 1.0, 1.5, 2.0]),
        "max_fsi": 4.0,
        "max_height": 70,
        "ground_coverage": 60,
        "setbacks": {
            "front": _front_bands(FRONT_SETBACKS),
            "side": _side_bands([3, 4.5, 6, 9, 12]),
            "rear": 4.5,
        },
    },
    "Industrial": {
        "base_fsi": 1.0,
        "fsi_premium": _premium_bands([0, 0.2, 0.4, 0.6, 0.8]),
        "max_fsi": 1.8,
        "max_height": 25,
        "ground_coverage": 60,
        "setbacks": {
            "front": _front_bands(FRONT_SETBACKS),
            "side": _side_bands([4.5, 6, 6, 9, 12]),
            "rear": 6,
        },
    },
    "Mixed-Use": {
        "base_fsi": 1.8,
        "fsi_premium": _premium_bands([0, 0.5, 1.0, 1.5, 2.0]),
        "max_fsi": 3.6,
        "max_height": 70,
        "ground_coverage": 50,
        "setbacks": {
            "front": _front_bands(FRONT_SETBACKS),
            "side": _side_bands([3, 4.5, 6, 9, 12]),
            "rear": 4.5,
        },
    },
}

# ──────────────────────────────────────────────────────────────────
# PARKING (ECS per built-up area)
# ──────────────────────────────────────────────────────────────────

PARKING = {
    "ecs_area": 25,
    "norms": {
        "Residential-Single": {
            "builtup_unit": 100, "ecs_per_builtup": 1,
            "description": "1 ECS per 100 sq.m of built-up area",
        },
        "Residential-Multi": {
            "builtup_unit": 100, "ecs_per_builtup": 1.25,
            "description": "1.25 ECS per 100 sq.m of built-up area",
        },
        "Commercial-Office": {
            "builtup_unit": 100, "ecs_per_builtup": 2,
            "description": "2 ECS per 100 sq.m of built-up area",
        },
        "Commercial-Retail": {
            "builtup_unit": 100, "ecs_per_builtup": 2.5,
            "description": "2.5 ECS per 100 sq.m of built-up area",
        },
        "Commercial-Hospitality": {
            "builtup_unit": 100, "ecs_per_builtup": 1.5,
            "description": "1.5 ECS per 100 sq.m of built-up area",
        },
        "Mixed-Use": {
            "builtup_unit": 100, "ecs_per_builtup": 1.5,
            "description": "1.5 ECS per 100 sq.m of built-up area",
        },
    },
}

# ──────────────────────────────────────────────────────────────────
# STRUCTURAL, FIRE SAFETY, ACCESSIBILITY
# ──────────────────────────────────────────────────────────────────

STRUCTURAL = {
    "plinth_height": {"min": 0.45, "max": 1.2},
    "floor_height": {"residential": 3.0, "commercial": 4.2},
    "parapet": {"min": 1.0},
}

FIRE_SAFETY = {
    "height_threshold": 15,
    "requirements": [
        "Fire NOC from the Chief Fire Officer",
        "Minimum two staircases, one of which is a fire escape staircase",
        "Automatic sprinkler system in all floors",
        "Wet riser with hose reel on every floor",
        "Manually operated fire alarm and automatic detection system",
        "Underground static water storage tank for fire fighting",
        "Refuge area for buildings above 24m",
    ],
}

ACCESSIBILITY = {
    "lift_threshold": 15,
    "ramp_required": True,
    "requirements": [
        "Ramp at entrance with gradient not steeper than 1:12",
        "Lift required for buildings above 15m",
        "Minimum clear door width of 0.9m on accessible routes",
        "At least one accessible toilet on the ground floor",
        "Reserved accessible parking bay near the entrance",
    ],
}

GDCR_CLAUSES = {
    "fsi": "GDCR 2017 Reg. 8.2",
    "height": "GDCR 2017 Reg. 8.3",
    "setbacks": "GDCR 2017 Reg. 8.4",
    "ground_coverage": "GDCR 2017 Reg. 8.5",
    "parking": "GDCR 2017 Reg. 8.8",
    "structural": "GDCR 2017 Reg. 13.1",
    "fire_safety": "GDCR 2017 Reg. 13.7",
    "accessibility": "GDCR 2017 Reg. 13.12",
}

GDCR_2017 = {
    "version": "GDCR 2017",
    "zones": ZONES,
    "corner_plot_bonus": {"fsi_bonus": 0.2},
    "parking": PARKING,
    "structural": STRUCTURAL,
    "fire_safety": FIRE_SAFETY,
    "accessibility": ACCESSIBILITY,
    "gdcr_clauses": GDCR_CLAUSES,
}
