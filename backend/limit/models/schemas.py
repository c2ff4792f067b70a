from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ──────────────────────────────────────────────────────────────────
# ENUMERATIONS
# ──────────────────────────────────────────────────────────────────

class Authority(str, Enum):
    AUDA = "AUDA"
    AMC = "AMC"


class Zone(str, Enum):
    R1 = "R1"
    R2 = "R2"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    MIXED_USE = "Mixed-Use"


class IntendedUse(str, Enum):
    RESIDENTIAL_SINGLE = "Residential-Single"
    RESIDENTIAL_MULTI = "Residential-Multi"
    COMMERCIAL_OFFICE = "Commercial-Office"
    COMMERCIAL_RETAIL = "Commercial-Retail"
    COMMERCIAL_HOSPITALITY = "Commercial-Hospitality"
    MIXED_USE = "Mixed-Use"


class NormCategory(str, Enum):
    ROOM_DIMENSIONS = "Room Dimensions"
    STRUCTURAL_ELEMENTS = "Structural Elements"
    OPENINGS = "Openings"
    SERVICES = "Services"
    FIRE_SAFETY = "Fire Safety"
    ACCESSIBILITY = "Accessibility"
    PARKING = "Parking"
    COMMON_AREAS = "Common Areas"


# ──────────────────────────────────────────────────────────────────
# SITE DESCRIPTION (calculator input)
# ──────────────────────────────────────────────────────────────────

class Location(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = 0
    lng: float = 0


class PlotDimensions(BaseModel):
    """Plot size in metres / sq.m. ``area`` is expected to equal length × width."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    length: float = Field(ge=0)
    width: float = Field(ge=0)
    area: float = Field(ge=0)

    @classmethod
    def from_sides(cls, length: float, width: float) -> PlotDimensions:
        return cls(length=length, width=width, area=length * width)


class SpecialConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    heritage: bool = False
    toz: bool = False  # Traffic Optimization Zone
    sez: bool = False  # Special Economic Zone


class SiteDescription(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    project_name: str
    address: str = ""
    location: Location = Location()
    authority: Authority = Authority.AUDA
    zone: Zone
    plot_dimensions: PlotDimensions
    is_corner_plot: bool = False
    road_width_primary: float = Field(gt=0)
    road_width_secondary: Optional[float] = None  # corner plots; not used by current rules
    intended_use: IntendedUse
    special_conditions: SpecialConditions = SpecialConditions()


# ──────────────────────────────────────────────────────────────────
# REGULATION RESULT (calculator output)
# ──────────────────────────────────────────────────────────────────

class FSIResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: float
    premium: float  # road-width premium + corner bonus, before the cap
    total: float
    max_built_up_area: float
    calculation: str


class HeightResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    max: float
    formula: str
    zone_limit: float
    calculation: str


class SetbackResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    front: float
    side: float
    rear: float
    calculations: str


class GroundCoverageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_percentage: float
    max_area: float
    calculation: str


class ParkingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: int  # ECS, rounded up
    area_required: float  # sq.m, from the unrounded ECS count
    calculation: str


class StructuralResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    plinth_height: float
    floor_height: float
    parapet: float


class FireSafetyResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool
    requirements: list[str]


class AccessibilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ramp_required: bool
    lift_required: bool
    requirements: list[str]


class RegulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    fsi: FSIResult
    height: HeightResult
    setbacks: SetbackResult
    ground_coverage: GroundCoverageResult
    parking: ParkingResult
    structural: StructuralResult
    fire_safety: FireSafetyResult
    accessibility: AccessibilityResult


class GDCRClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    clause_number: str
    description: str
    category: str


# ──────────────────────────────────────────────────────────────────
# BUILDING NORMS CATALOG
# ──────────────────────────────────────────────────────────────────

RequirementValue = Union[bool, int, float, str, list[Union[int, float, str]]]


class BuildingNorm(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str
    category: NormCategory
    element: str
    requirements: dict[str, RequirementValue]
    unit: str
    applicable_to: list[IntendedUse]
    source: str
    notes: Optional[str] = None
    zone_specific: Optional[dict[Zone, dict[str, RequirementValue]]] = None

    def requirements_for(self, zone: Zone | None) -> dict[str, RequirementValue]:
        """Base requirements with the zone's override map laid on top."""
        resolved = dict(self.requirements)
        if zone is not None and self.zone_specific and zone in self.zone_specific:
            resolved.update(self.zone_specific[zone])
        return resolved


class BuildingNormsCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    last_updated: str
    norms: list[BuildingNorm]


# ──────────────────────────────────────────────────────────────────
# BULK / PROJECT RECORDS
# ──────────────────────────────────────────────────────────────────

class CSVRow(BaseModel):
    row_number: int
    project_name: str
    plot_area: float = 0
    plot_width: float = 0
    plot_depth: float = 0
    road_width: float = 0
    zone: Zone = Zone.R1
    is_corner_plot: bool = False
    premium_fsi: bool = False  # carried from the CSV format, not consumed
    tdr_fsi: float = 0  # carried from the CSV format, not consumed


class ProjectRecord(BaseModel):
    site: Optional[SiteDescription] = None
    result: Optional[RegulationResult] = None
    clauses: list[GDCRClause] = []


class BulkItem(ProjectRecord):
    row_number: int
    project_name: str
    status: str = "completed"  # completed, error
    error: Optional[str] = None


class BulkAnalysis(BaseModel):
    items: list[BulkItem] = []
    total: int = 0
    succeeded: int = 0
    failed: int = 0


# ──────────────────────────────────────────────────────────────────
# API BODIES
# ──────────────────────────────────────────────────────────────────

class CalculationResponse(BaseModel):
    site: SiteDescription
    result: RegulationResult
    clauses: list[GDCRClause]


class ResolvedNorm(BaseModel):
    rule_id: str
    category: NormCategory
    element: str
    requirements: dict[str, RequirementValue]
    formatted: dict[str, str] = {}  # display labels and values
    unit: str
    source: str
    notes: Optional[str] = None


class NormsResponse(BaseModel):
    intended_use: IntendedUse
    zone: Optional[Zone] = None
    total: int
    category_counts: dict[str, int]
    categories: dict[str, list[ResolvedNorm]]


class BulkAnalysisRequest(BaseModel):
    csv_text: str


class ExportRequest(BaseModel):
    projects: list[ProjectRecord]


class ComparisonRequest(BaseModel):
    projects: list[ProjectRecord]
    sort_key: str = "fsi"  # fsi, height, coverage, parking, area
    order: str = "desc"


class ComparisonResponse(BaseModel):
    projects: list[ProjectRecord]
    extremes: dict[str, float]
