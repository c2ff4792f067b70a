from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from limit.config import settings
from limit.models.schemas import (
    BuildingNorm, BulkAnalysis, BulkAnalysisRequest, CalculationResponse, ComparisonRequest,
    ComparisonResponse, ExportRequest, IntendedUse, NormsResponse, ResolvedNorm,
    SiteDescription, Zone,
)
from limit.regulation_engine.calculator import RegulationCalculator
from limit.regulation_engine.comparison import comparison_extremes, sort_projects
from limit.regulation_engine.norms import (
    ALL_CATEGORIES, applicable_norms, count_norms, filter_norms, format_requirement,
    format_requirement_key, get_norms_catalog,
)
from limit.regulation_engine.rule_table import RegulationConfigError, get_rule_table
from limit.services.bulk import BatchTooLargeError, run_bulk_analysis
from limit.services.csv_bulk import generate_csv_template, results_to_csv

router = APIRouter(prefix="/api/v1")
calculator = RegulationCalculator()


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _resolve_norm(norm: BuildingNorm, zone: Optional[Zone]) -> ResolvedNorm:
    requirements = norm.requirements_for(zone)
    return ResolvedNorm(
        rule_id=norm.rule_id,
        category=norm.category,
        element=norm.element,
        requirements=requirements,
        formatted={
            format_requirement_key(k): format_requirement(v) for k, v in requirements.items()
        },
        unit=norm.unit,
        source=norm.source,
        notes=norm.notes,
    )


@router.post("/calculate", response_model=CalculationResponse)
async def calculate(site: SiteDescription):
    """Run the GDCR calculation for one site."""
    try:
        result, clauses = calculator.calculate(site, get_rule_table())
    except RegulationConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return CalculationResponse(site=site, result=result, clauses=clauses)


@router.get("/norms", response_model=NormsResponse)
async def norms(
    intended_use: IntendedUse = Query(..., description="Intended use of the building"),
    zone: Optional[Zone] = Query(None, description="Zone for zone-specific overrides"),
    search: str = Query("", description="Case-insensitive search text"),
    category: str = Query(ALL_CATEGORIES, description="Norm category or 'all'"),
):
    """Building norms applicable to an intended use, grouped by category."""
    catalog = get_norms_catalog().norms
    grouped = filter_norms(catalog, intended_use)
    filtered = applicable_norms(catalog, intended_use, search, category)

    categories = {
        cat.value: [_resolve_norm(n, zone) for n in norms_in_cat]
        for cat, norms_in_cat in filtered.items()
    }

    return NormsResponse(
        intended_use=intended_use,
        zone=zone,
        total=count_norms(grouped),
        category_counts={cat.value: len(n) for cat, n in grouped.items()},
        categories=categories,
    )


@router.post("/bulk/analyze", response_model=BulkAnalysis)
async def bulk_analyze(request: BulkAnalysisRequest):
    """Calculate every row of a CSV batch; row failures are reported per item."""
    try:
        return run_bulk_analysis(
            request.csv_text, get_rule_table(), max_rows=settings.bulk_max_rows,
        )
    except RegulationConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except BatchTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/bulk/export")
async def bulk_export(request: ExportRequest):
    return _csv_response(results_to_csv(request.projects), "bulk-analysis-results.csv")


@router.get("/bulk/template")
async def bulk_template():
    return _csv_response(generate_csv_template(), "limit-bulk-template.csv")


@router.post("/compare", response_model=ComparisonResponse)
async def compare(request: ComparisonRequest):
    """Sort calculated projects by one parameter and report FSI/height extremes."""
    try:
        projects = sort_projects(request.projects, request.sort_key, request.order)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ComparisonResponse(projects=projects, extremes=comparison_extremes(projects))
