from __future__ import annotations

from limit.regulation_engine.calculator import RegulationCalculator, calculate_regulations
from limit.regulation_engine.rule_table import RegulationConfigError, RuleTable, get_rule_table

__all__ = [
    "RegulationCalculator",
    "RegulationConfigError",
    "RuleTable",
    "calculate_regulations",
    "get_rule_table",
]
