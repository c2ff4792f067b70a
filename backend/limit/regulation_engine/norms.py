"""
Applicable-norms filter over the building norms catalog.

Two stages:
  1. ``filter_norms``: keep norms whose ``applicable_to`` contains the
     intended use and group them by category.
  2. ``search_norms``: optionally narrow the grouped norms by a
     case-insensitive search string (element, rule id, source, notes) and
     a single category ("all" keeps every category).

Categories appear in order of first occurrence in the catalog, and norms
keep catalog order within each category.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from limit.models.schemas import (
    BuildingNorm, BuildingNormsCatalog, IntendedUse, NormCategory, RequirementValue,
)
from limit.regulation_engine.derivation import num

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"

GroupedNorms = dict[NormCategory, list[BuildingNorm]]


def filter_norms(catalog: Iterable[BuildingNorm], intended_use: IntendedUse) -> GroupedNorms:
    grouped: GroupedNorms = {}
    for norm in catalog:
        if intended_use in norm.applicable_to:
            grouped.setdefault(norm.category, []).append(norm)
    return grouped


def _matches_search(norm: BuildingNorm, search_lower: str) -> bool:
    return (
        search_lower in norm.element.lower()
        or search_lower in norm.rule_id.lower()
        or search_lower in norm.source.lower()
        or (norm.notes is not None and search_lower in norm.notes.lower())
    )


def search_norms(
    grouped: GroupedNorms,
    search: str = "",
    category: NormCategory | str = ALL_CATEGORIES,
) -> GroupedNorms:
    """Narrow grouped norms by search text and category; empty groups are dropped."""
    search_lower = search.lower()
    filtered: GroupedNorms = {}
    for norm_category, norms in grouped.items():
        if category != ALL_CATEGORIES and norm_category != category:
            continue
        matching = [n for n in norms if _matches_search(n, search_lower)]
        if matching:
            filtered[norm_category] = matching
    return filtered


def applicable_norms(
    catalog: Iterable[BuildingNorm],
    intended_use: IntendedUse,
    search: str = "",
    category: NormCategory | str = ALL_CATEGORIES,
) -> GroupedNorms:
    return search_norms(filter_norms(catalog, intended_use), search, category)


def count_norms(grouped: GroupedNorms) -> int:
    return sum(len(norms) for norms in grouped.values())


# ──────────────────────────────────────────────────────────────────
# DISPLAY FORMATTING
# ──────────────────────────────────────────────────────────────────

def format_requirement(value: RequirementValue) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return num(value)
    if isinstance(value, list):
        return ", ".join(num(v) if isinstance(v, (int, float)) else str(v) for v in value)
    return str(value)


def format_requirement_key(key: str) -> str:
    return key.replace("_", " ")


# ──────────────────────────────────────────────────────────────────
# CATALOG LOADING
# ──────────────────────────────────────────────────────────────────

_catalog: Optional[BuildingNormsCatalog] = None


def load_norms_catalog(path: str | None = None) -> BuildingNormsCatalog:
    if path:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        source = path
    else:
        from limit.regulation_engine.building_norms import BUILDING_NORMS_DATA
        data = BUILDING_NORMS_DATA
        source = "built-in catalog"

    catalog = BuildingNormsCatalog.model_validate(data)
    rule_ids = [n.rule_id for n in catalog.norms]
    duplicates = sorted({r for r in rule_ids if rule_ids.count(r) > 1})
    if duplicates:
        raise ValueError(f"duplicate building norm rule_id: {', '.join(duplicates)}")

    logger.info("Loaded %d building norms (%s) from %s", len(catalog.norms), catalog.version, source)
    return catalog


def get_norms_catalog() -> BuildingNormsCatalog:
    global _catalog
    if _catalog is None:
        from limit.config import settings
        _catalog = load_norms_catalog(settings.norms_catalog_path or None)
    return _catalog


def reload_norms_catalog() -> BuildingNormsCatalog:
    global _catalog
    _catalog = None
    return get_norms_catalog()
