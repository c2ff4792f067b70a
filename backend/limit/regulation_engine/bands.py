"""
Half-open band lookup shared by the FSI premium, front setback and side
setback tables.

Every band covers ``[min, max)``; the first band containing the value wins.
A value outside every band is not an error: the caller's documented default
is returned and ``default_used`` is set so the two outcomes stay
distinguishable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

from limit.regulation_engine.rule_table import Range

logger = logging.getLogger(__name__)

B = TypeVar("B")


@dataclass(frozen=True)
class BandMatch(Generic[B]):
    """Outcome of one band lookup."""
    value: float
    band: Optional[B] = None
    default_used: bool = False


def lookup_band(
    bands: Sequence[B],
    x: float,
    key: Callable[[B], Range],
    value: Callable[[B], float],
    default: float,
    kind: str = "band",
) -> BandMatch[B]:
    """Return the value of the first band whose range contains ``x``."""
    for band in bands:
        if key(band).contains(x):
            return BandMatch(value=value(band), band=band)
    logger.debug("No %s covers %s; using default %s", kind, x, default)
    return BandMatch(value=default, default_used=True)
