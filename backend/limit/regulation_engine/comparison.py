"""
Comparative view across several calculated projects.

Sorting keys:
  - fsi: total FSI
  - height: permissible height
  - coverage: max ground coverage percentage
  - parking: required ECS
  - area: plot area

Projects without a result (or a site) count as 0 for the key.
"""

from __future__ import annotations

from typing import Callable, Sequence

from limit.models.schemas import ProjectRecord


def _fsi(p: ProjectRecord) -> float:
    return p.result.fsi.total if p.result else 0


def _height(p: ProjectRecord) -> float:
    return p.result.height.max if p.result else 0


def _coverage(p: ProjectRecord) -> float:
    return p.result.ground_coverage.max_percentage if p.result else 0


def _parking(p: ProjectRecord) -> float:
    return p.result.parking.required if p.result else 0


def _area(p: ProjectRecord) -> float:
    return p.site.plot_dimensions.area if p.site else 0


SORT_KEYS: dict[str, Callable[[ProjectRecord], float]] = {
    "fsi": _fsi,
    "height": _height,
    "coverage": _coverage,
    "parking": _parking,
    "area": _area,
}


def sort_projects(
    projects: Sequence[ProjectRecord],
    key: str = "fsi",
    order: str = "desc",
) -> list[ProjectRecord]:
    """Stable sort by one comparison key."""
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key}. Expected one of {', '.join(SORT_KEYS)}")
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown sort order: {order}. Expected 'asc' or 'desc'")
    return sorted(projects, key=SORT_KEYS[key], reverse=order == "desc")


def comparison_extremes(projects: Sequence[ProjectRecord]) -> dict[str, float]:
    """Min/max FSI and height used to flag the best and worst sites."""
    if not projects:
        return {}
    fsis = [_fsi(p) for p in projects]
    heights = [_height(p) for p in projects]
    return {
        "max_fsi": max(fsis),
        "min_fsi": min(fsis),
        "max_height": max(heights),
        "min_height": min(heights),
    }
