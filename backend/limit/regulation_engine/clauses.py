"""GDCR clause citations reported alongside every calculation."""

from __future__ import annotations

from limit.models.schemas import GDCRClause
from limit.regulation_engine.rule_table import RuleTable

# (clause key, category, description), in pipeline order
CLAUSE_CATEGORIES = [
    ("fsi", "FSI", "Floor Space Index regulations based on zone and road width"),
    ("height", "Height", "Maximum permissible building height"),
    ("setbacks", "Setbacks", "Mandatory setback distances from plot boundaries"),
    ("ground_coverage", "Ground Coverage", "Maximum ground floor coverage percentage"),
    ("parking", "Parking", "Parking space requirements in ECS units"),
    ("structural", "Structural", "Structural specifications for plinth, floor, and parapet"),
    ("fire_safety", "Fire Safety", "Fire safety and emergency requirements"),
    ("accessibility", "Accessibility", "Universal accessibility standards"),
]


def build_clauses(rules: RuleTable) -> list[GDCRClause]:
    return [
        GDCRClause(clause_number=rules.clause(key), description=description, category=category)
        for key, category, description in CLAUSE_CATEGORIES
    ]
