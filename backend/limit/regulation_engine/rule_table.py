"""
Typed GDCR rule table.

The table is an immutable value passed into the calculator on every call.
It is built once from reference data (the built-in ``GDCR_2017`` dict or a
JSON file named in settings), validated for band contiguity and checked for
coverage of every zone, intended use and clause category before it is used.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from limit.models.schemas import IntendedUse, Zone

logger = logging.getLogger(__name__)

CLAUSE_KEYS = (
    "fsi",
    "height",
    "setbacks",
    "ground_coverage",
    "parking",
    "structural",
    "fire_safety",
    "accessibility",
)


class RegulationConfigError(ValueError):
    """Reference data does not cover a zone, intended use or clause category."""


# ──────────────────────────────────────────────────────────────────
# BANDS
# ──────────────────────────────────────────────────────────────────

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Range(_Frozen):
    """Half-open interval ``[min, max)``."""
    min: float
    max: float

    @model_validator(mode="after")
    def _check_order(self) -> Range:
        if self.min >= self.max:
            raise ValueError(f"band range [{self.min}, {self.max}) is empty")
        return self

    def contains(self, x: float) -> bool:
        return self.min <= x < self.max


def _check_contiguous(ranges: list[Range], what: str) -> None:
    for prev, nxt in zip(ranges, ranges[1:]):
        if nxt.min != prev.max:
            raise ValueError(
                f"{what} bands must be contiguous and non-overlapping: "
                f"[{prev.min}, {prev.max}) is followed by [{nxt.min}, {nxt.max})"
            )


class FSIPremiumBand(_Frozen):
    road_width: Range
    premium: float


class FrontSetbackBand(_Frozen):
    road_width: Range
    setback: float


class SideSetbackBand(_Frozen):
    height: Range
    setback: float


# ──────────────────────────────────────────────────────────────────
# ZONE RULES
# ──────────────────────────────────────────────────────────────────

class ZoneSetbacks(_Frozen):
    front: tuple[FrontSetbackBand, ...]
    side: tuple[SideSetbackBand, ...]
    rear: float

    @field_validator("front")
    @classmethod
    def _front_contiguous(cls, v):
        _check_contiguous([b.road_width for b in v], "front setback")
        return v

    @field_validator("side")
    @classmethod
    def _side_contiguous(cls, v):
        _check_contiguous([b.height for b in v], "side setback")
        return v


class ZoneRules(_Frozen):
    base_fsi: float
    fsi_premium: tuple[FSIPremiumBand, ...]
    max_fsi: float
    max_height: float
    ground_coverage: float  # percent of plot area
    setbacks: ZoneSetbacks

    @field_validator("fsi_premium")
    @classmethod
    def _premium_contiguous(cls, v):
        _check_contiguous([b.road_width for b in v], "FSI premium")
        return v

    @field_validator("ground_coverage")
    @classmethod
    def _coverage_percent(cls, v):
        if not 0 <= v <= 100:
            raise ValueError(f"ground coverage must be a percentage, got {v}")
        return v


# ──────────────────────────────────────────────────────────────────
# GLOBAL RULES
# ──────────────────────────────────────────────────────────────────

class CornerPlotBonus(_Frozen):
    fsi_bonus: float


class ParkingNorm(_Frozen):
    builtup_unit: float
    ecs_per_builtup: float
    description: str


class ParkingRules(_Frozen):
    ecs_area: float  # sq.m per Equivalent Car Space
    norms: dict[IntendedUse, ParkingNorm]


class PlinthHeight(_Frozen):
    min: Optional[float] = None
    max: float


class FloorHeight(_Frozen):
    residential: float
    commercial: float


class Parapet(_Frozen):
    min: float


class StructuralRules(_Frozen):
    plinth_height: PlinthHeight
    floor_height: FloorHeight
    parapet: Parapet


class FireSafetyRules(_Frozen):
    height_threshold: float
    requirements: tuple[str, ...]


class AccessibilityRules(_Frozen):
    lift_threshold: float
    ramp_required: bool
    requirements: tuple[str, ...]


class RuleTable(_Frozen):
    version: str = "GDCR 2017"
    zones: dict[Zone, ZoneRules]
    corner_plot_bonus: CornerPlotBonus
    parking: ParkingRules
    structural: StructuralRules
    fire_safety: FireSafetyRules
    accessibility: AccessibilityRules
    gdcr_clauses: dict[str, str]

    def zone_rules(self, zone: Zone) -> ZoneRules:
        try:
            return self.zones[zone]
        except KeyError:
            raise RegulationConfigError(
                f"regulation configuration incomplete for zone {zone.value}"
            ) from None

    def parking_norm(self, intended_use: IntendedUse) -> ParkingNorm:
        try:
            return self.parking.norms[intended_use]
        except KeyError:
            raise RegulationConfigError(
                f"regulation configuration incomplete for use {intended_use.value}"
            ) from None

    def clause(self, key: str) -> str:
        try:
            return self.gdcr_clauses[key]
        except KeyError:
            raise RegulationConfigError(
                f"regulation configuration incomplete for clause {key}"
            ) from None

    def check_coverage(self) -> None:
        """Fail fast unless every zone, intended use and clause has an entry."""
        missing = [f"zone {z.value}" for z in Zone if z not in self.zones]
        missing += [f"use {u.value}" for u in IntendedUse if u not in self.parking.norms]
        missing += [f"clause {k}" for k in CLAUSE_KEYS if k not in self.gdcr_clauses]
        if missing:
            raise RegulationConfigError(
                "regulation configuration incomplete for " + ", ".join(missing)
            )


# ──────────────────────────────────────────────────────────────────
# LOADING
# ──────────────────────────────────────────────────────────────────

_rule_table: Optional[RuleTable] = None


def load_rule_table(path: str | None = None) -> RuleTable:
    """Build and coverage-check a rule table from a JSON file or the built-in data."""
    if path:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        source = path
    else:
        from limit.regulation_engine.gdcr_tables import GDCR_2017
        data = GDCR_2017
        source = "built-in tables"

    table = RuleTable.model_validate(data)
    table.check_coverage()
    logger.info("Loaded rule table %s from %s (%d zones)", table.version, source, len(table.zones))
    return table


def get_rule_table() -> RuleTable:
    """Process-wide rule table, loaded on first use from the configured source."""
    global _rule_table
    if _rule_table is None:
        from limit.config import settings
        _rule_table = load_rule_table(settings.rule_table_path or None)
    return _rule_table


def reload_rule_table() -> RuleTable:
    global _rule_table
    _rule_table = None
    return get_rule_table()
