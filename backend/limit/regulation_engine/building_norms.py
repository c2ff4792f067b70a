"""
GDCR 2017 building norms catalog.

Granular construction-element norms (room sizes, structural elements,
openings, services, fire safety, accessibility, parking, common areas),
each tagged with the intended uses it applies to. Independent of the zone
rule table; consulted by the applicable-norms filter.
"""

from __future__ import annotations

RESIDENTIAL = ["Residential-Single", "Residential-Multi", "Mixed-Use"]
COMMERCIAL = [
    "Commercial-Office", "Commercial-Retail", "Commercial-Hospitality", "Mixed-Use",
]
MULTI_OCCUPANCY = [
    "Residential-Multi", "Commercial-Office", "Commercial-Retail",
    "Commercial-Hospitality", "Mixed-Use",
]
ALL_USES = [
    "Residential-Single", "Residential-Multi", "Commercial-Office",
    "Commercial-Retail", "Commercial-Hospitality", "Mixed-Use",
]

BUILDING_NORMS = [
    # ── Room dimensions ──
    {
        "rule_id": "RD-001",
        "category": "Room Dimensions",
        "element": "Habitable Room",
        "requirements": {"min_area": 9.5, "min_width": 2.4, "min_height": 2.9},
        "unit": "sq.m / m",
        "applicable_to": RESIDENTIAL,
        "source": "GDCR 2017 Reg. 13.1.1",
        "notes": "At least one habitable room per dwelling unit shall meet these minimums.",
    },
    {
        "rule_id": "RD-002",
        "category": "Room Dimensions",
        "element": "Kitchen",
        "requirements": {"min_area": 5.5, "min_width": 1.8, "min_height": 2.75},
        "unit": "sq.m / m",
        "applicable_to": RESIDENTIAL,
        "source": "GDCR 2017 Reg. 13.1.2",
    },
    {
        "rule_id": "RD-003",
        "category": "Room Dimensions",
        "element": "Bathroom",
        "requirements": {"min_area": 1.8, "min_width": 1.2, "min_height": 2.2},
        "unit": "sq.m / m",
        "applicable_to": RESIDENTIAL,
        "source": "GDCR 2017 Reg. 13.1.3",
    },
    {
        "rule_id": "RD-004",
        "category": "Room Dimensions",
        "element": "Office Workspace",
        "requirements": {"min_area_per_person": 10, "min_height": 3.0},
        "unit": "sq.m / m",
        "applicable_to": ["Commercial-Office", "Mixed-Use"],
        "source": "GDCR 2017 Reg. 13.1.6",
    },
    {
        "rule_id": "RD-005",
        "category": "Room Dimensions",
        "element": "Guest Room",
        "requirements": {"min_area": 12, "min_width": 3.0, "attached_toilet": True},
        "unit": "sq.m / m",
        "applicable_to": ["Commercial-Hospitality"],
        "source": "GDCR 2017 Reg. 13.1.8",
    },
    # ── Structural elements ──
    {
        "rule_id": "SE-001",
        "category": "Structural Elements",
        "element": "Plinth",
        "requirements": {"min_height": 0.45, "max_height": 1.2},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.2.1",
        "notes": "Measured from the average ground level of the plot.",
        "zone_specific": {
            "Industrial": {"min_height": 0.6},
        },
    },
    {
        "rule_id": "SE-002",
        "category": "Structural Elements",
        "element": "Floor to Floor Height",
        "requirements": {"residential": 3.0, "commercial": 4.2},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.2.3",
    },
    {
        "rule_id": "SE-003",
        "category": "Structural Elements",
        "element": "Parapet Wall",
        "requirements": {"min_height": 1.0, "max_height": 1.5},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.2.5",
    },
    # ── Openings ──
    {
        "rule_id": "OP-001",
        "category": "Openings",
        "element": "Window Area for Light and Ventilation",
        "requirements": {"min_ratio_to_floor_area": 0.1, "max_distance_from_opening": 7.5},
        "unit": "ratio / m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.3.1",
        "notes": "Openings on a ventilation shaft count at half their area.",
    },
    {
        "rule_id": "OP-002",
        "category": "Openings",
        "element": "Main Entrance Door",
        "requirements": {"min_width": 1.0, "min_height": 2.1},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.3.2",
    },
    {
        "rule_id": "OP-003",
        "category": "Openings",
        "element": "Shop Front Opening",
        "requirements": {"min_width": 2.4, "rolling_shutter_allowed": True},
        "unit": "m",
        "applicable_to": ["Commercial-Retail", "Mixed-Use"],
        "source": "GDCR 2017 Reg. 13.3.4",
    },
    # ── Services ──
    {
        "rule_id": "SV-001",
        "category": "Services",
        "element": "Overhead Water Storage",
        "requirements": {"litres_per_person": 135, "min_capacity": 1000},
        "unit": "litres",
        "applicable_to": RESIDENTIAL,
        "source": "GDCR 2017 Reg. 13.5.1",
    },
    {
        "rule_id": "SV-002",
        "category": "Services",
        "element": "Rainwater Harvesting",
        "requirements": {"min_plot_area": 500, "recharge_well": True, "percolation_pits": 1},
        "unit": "sq.m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.5.4",
        "notes": "Mandatory for plots of 500 sq.m and above.",
    },
    {
        "rule_id": "SV-003",
        "category": "Services",
        "element": "Solar Water Heating",
        "requirements": {"applicable_uses": ["hotel", "hostel", "hospital"], "min_capacity": 100},
        "unit": "litres per day",
        "applicable_to": ["Commercial-Hospitality", "Residential-Multi"],
        "source": "GDCR 2017 Reg. 13.5.6",
    },
    {
        "rule_id": "SV-004",
        "category": "Services",
        "element": "Sanitary Fixtures",
        "requirements": {"wc_per_persons": 25, "urinal_per_persons": 50, "wash_basin_per_persons": 40},
        "unit": "fixtures",
        "applicable_to": COMMERCIAL,
        "source": "GDCR 2017 Reg. 13.5.8",
    },
    # ── Fire safety ──
    {
        "rule_id": "FS-001",
        "category": "Fire Safety",
        "element": "Staircase Width",
        "requirements": {"residential_min_width": 1.2, "commercial_min_width": 1.5},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.7.2",
    },
    {
        "rule_id": "FS-002",
        "category": "Fire Safety",
        "element": "Fire Escape Staircase",
        "requirements": {"required_above_height": 15, "min_width": 1.2, "max_travel_distance": 30},
        "unit": "m",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Reg. 13.7.4",
        "notes": "Travel distance is measured from the farthest point of the floor.",
    },
    {
        "rule_id": "FS-003",
        "category": "Fire Safety",
        "element": "Fire Extinguishers",
        "requirements": {"per_floor_area": 200, "type": "ABC dry powder"},
        "unit": "sq.m per extinguisher",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 13.7.9",
    },
    # ── Accessibility ──
    {
        "rule_id": "AC-001",
        "category": "Accessibility",
        "element": "Entrance Ramp",
        "requirements": {"max_gradient": "1:12", "min_width": 1.2, "handrail_heights": [0.76, 0.9]},
        "unit": "m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Annexure 4",
    },
    {
        "rule_id": "AC-002",
        "category": "Accessibility",
        "element": "Passenger Lift",
        "requirements": {"required_above_height": 15, "min_car_size": [1.1, 2.0], "door_width": 0.9},
        "unit": "m",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Annexure 4",
        "notes": "At least one lift shall accommodate a wheelchair.",
    },
    {
        "rule_id": "AC-003",
        "category": "Accessibility",
        "element": "Accessible Toilet",
        "requirements": {"min_size": [1.5, 1.75], "grab_bars": True},
        "unit": "m",
        "applicable_to": COMMERCIAL,
        "source": "GDCR 2017 Annexure 4",
    },
    # ── Parking ──
    {
        "rule_id": "PK-001",
        "category": "Parking",
        "element": "Equivalent Car Space",
        "requirements": {"open_area": 12.5, "covered_area": 25, "min_aisle_width": 6},
        "unit": "sq.m / m",
        "applicable_to": ALL_USES,
        "source": "GDCR 2017 Reg. 8.8",
    },
    {
        "rule_id": "PK-002",
        "category": "Parking",
        "element": "Visitor Parking",
        "requirements": {"share_of_required_ecs": 0.1},
        "unit": "ratio",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Reg. 8.8.3",
        "zone_specific": {
            "Commercial": {"share_of_required_ecs": 0.2},
        },
    },
    {
        "rule_id": "PK-003",
        "category": "Parking",
        "element": "Ramp to Basement Parking",
        "requirements": {"max_gradient": "1:8", "min_width_one_way": 3.6, "min_width_two_way": 6},
        "unit": "m",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Reg. 8.8.6",
    },
    # ── Common areas ──
    {
        "rule_id": "CA-001",
        "category": "Common Areas",
        "element": "Common Plot",
        "requirements": {"min_share_of_plot": 0.1, "min_plot_area": 2000, "min_width": 6},
        "unit": "ratio / sq.m / m",
        "applicable_to": ["Residential-Multi", "Mixed-Use"],
        "source": "GDCR 2017 Reg. 9.2",
        "notes": "Applies to layouts and group housing on plots of 2000 sq.m and above.",
    },
    {
        "rule_id": "CA-002",
        "category": "Common Areas",
        "element": "Corridor",
        "requirements": {"residential_min_width": 1.2, "commercial_min_width": 2.0},
        "unit": "m",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Reg. 13.4.2",
    },
    {
        "rule_id": "CA-003",
        "category": "Common Areas",
        "element": "Refuge Area",
        "requirements": {"required_above_height": 24, "floor_interval": 7, "min_share_of_floor": 0.04},
        "unit": "m / floors / ratio",
        "applicable_to": MULTI_OCCUPANCY,
        "source": "GDCR 2017 Reg. 13.7.12",
    },
]

BUILDING_NORMS_DATA = {
    "version": "GDCR 2017",
    "last_updated": "2017-10-12",
    "norms": BUILDING_NORMS,
}
