from __future__ import annotations

from limit.models.schemas import (
    IntendedUse,
    RegulationResult,
    SiteDescription,
    Zone,
)

__all__ = ["IntendedUse", "RegulationResult", "SiteDescription", "Zone"]
