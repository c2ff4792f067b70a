"""
Bulk analysis: run the regulation calculator over every row of a CSV batch.

Each row is independent. A row that cannot be turned into a site
description, or whose calculation fails, is recorded as an error
item and the batch carries on. Incomplete reference data is the one
exception: it aborts the batch, since every row would be wrong the same way.

Usage::

    from limit.services.bulk import run_bulk_analysis
    analysis = run_bulk_analysis(csv_text, get_rule_table())
    failed = [i for i in analysis.items if i.status == "error"]
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from limit.models.schemas import BulkAnalysis, BulkItem, CSVRow
from limit.regulation_engine.calculator import RegulationCalculator
from limit.regulation_engine.rule_table import RegulationConfigError, RuleTable
from limit.services.csv_bulk import parse_rows, row_to_site

logger = logging.getLogger(__name__)


class BatchTooLargeError(ValueError):
    """Batch has more data rows than the configured limit."""


def analyze_row(
    row: CSVRow,
    rules: RuleTable,
    calculator: RegulationCalculator,
) -> BulkItem:
    try:
        site = row_to_site(row)
        result, clauses = calculator.calculate(site, rules)
        return BulkItem(
            row_number=row.row_number,
            project_name=row.project_name,
            site=site,
            result=result,
            clauses=clauses,
        )
    except RegulationConfigError:
        raise
    except Exception as exc:
        logger.warning("Bulk row %d (%s) failed: %s", row.row_number, row.project_name, exc)
        return BulkItem(
            row_number=row.row_number,
            project_name=row.project_name,
            status="error",
            error=str(exc),
        )


def analyze_rows(rows: Sequence[CSVRow], rules: RuleTable) -> BulkAnalysis:
    calculator = RegulationCalculator()
    items = [analyze_row(row, rules, calculator) for row in rows]
    succeeded = sum(1 for i in items if i.status == "completed")
    return BulkAnalysis(
        items=items,
        total=len(items),
        succeeded=succeeded,
        failed=len(items) - succeeded,
    )


def run_bulk_analysis(
    csv_text: str,
    rules: RuleTable,
    max_rows: Optional[int] = None,
) -> BulkAnalysis:
    """Parse a CSV batch and calculate every row.

    Raises ValueError for an empty CSV or one with more than ``max_rows``
    data rows.
    """
    rows = parse_rows(csv_text)
    if not rows:
        raise ValueError("No valid rows found in CSV file")
    if max_rows is not None and len(rows) > max_rows:
        raise BatchTooLargeError(f"CSV has {len(rows)} rows; the limit is {max_rows}")
    return analyze_rows(rows, rules)
