"""
CSV bulk adapter.

Input columns (header names are matched case-insensitively, in any order):
  project_name, plot_area, plot_width, plot_depth, road_width, zone,
  corner_plot, premium_fsi, tdr_fsi

Rows whose column count differs from the header, or whose zone is not a
known zone, are skipped with a warning. Missing or unparseable numbers
read as 0; a missing project name becomes ``Project {row}``.

The CSV format carries no address, location, authority, intended use or
special conditions; ``row_to_site`` fills those with fixed placeholders.
"""

from __future__ import annotations

import io
import logging
from typing import Sequence

import pandas as pd

from limit.models.schemas import (
    Authority, CSVRow, IntendedUse, Location, PlotDimensions, ProjectRecord,
    SiteDescription, SpecialConditions, Zone,
)
from limit.regulation_engine.derivation import num

logger = logging.getLogger(__name__)

TEMPLATE_HEADERS = [
    "project_name",
    "plot_area",
    "plot_width",
    "plot_depth",
    "road_width",
    "zone",
    "corner_plot",
    "premium_fsi",
    "tdr_fsi",
]

TEMPLATE_SAMPLE_ROWS = [
    ["Sample Project 1", "500", "20", "25", "12", "R1", "no", "yes", "0"],
    ["Sample Project 2", "800", "25", "32", "18", "R2", "yes", "yes", "0.5"],
    ["Commercial Complex", "1200", "30", "40", "24", "Commercial", "yes", "yes", "0"],
]

EXPORT_HEADERS = [
    "Project Name",
    "Plot Area (sq.m)",
    "Zone",
    "Base FSI",
    "Max Height (m)",
    "Ground Coverage (%)",
    "Parking (ECS)",
    "Front Setback (m)",
    "Side Setback (m)",
    "Rear Setback (m)",
]

# Placeholders for fields the CSV format does not carry
CSV_ADDRESS = "Imported from CSV"
CSV_LOCATION = Location(lat=23.0225, lng=72.5714)  # Ahmedabad
CSV_AUTHORITY = Authority.AUDA
CSV_INTENDED_USE = IntendedUse.RESIDENTIAL_SINGLE

NUMERIC_COLUMNS = ["plot_area", "plot_width", "plot_depth", "road_width", "tdr_fsi"]


def _blank_long_row(fields: list[str]) -> list[str]:
    logger.warning(
        "Skipping row with %d columns (%s): column count mismatch",
        len(fields), ",".join(fields),
    )
    # An emptied row keeps its position so later rows keep their numbers
    return []


def _column(frame: pd.DataFrame, name: str) -> pd.Series:
    if name in frame.columns:
        return frame[name]
    return pd.Series("", index=frame.index, dtype=object)


def _parse_yes(value: str) -> bool:
    return value.lower() == "yes"


# ──────────────────────────────────────────────────────────────────
# PARSING
# ──────────────────────────────────────────────────────────────────

def parse_rows(csv_text: str) -> list[CSVRow]:
    """Parse CSV text into rows; malformed rows are skipped, not fatal."""
    text = csv_text.strip()
    if len(text.splitlines()) < 2:
        raise ValueError("CSV file is empty or has no data rows")

    # Header read as a data row so frame index i is data row i
    frame = pd.read_csv(
        io.StringIO(text),
        header=None,
        dtype=object,
        keep_default_na=False,
        skipinitialspace=True,
        engine="python",
        on_bad_lines=_blank_long_row,
    )
    headers = [str(h).strip().lower() for h in frame.iloc[0]]
    body = frame.iloc[1:].set_axis(headers, axis=1)

    # Short rows are padded with NA; emptied long rows are all NA
    complete = []
    for index, record in body.iterrows():
        if record.isna().all():
            continue
        if record.isna().any():
            logger.warning("Skipping row %d: column count mismatch", index + 1)
            continue
        complete.append(index)
    if not complete:
        return []

    body = body.loc[complete].apply(lambda column: column.str.strip())
    numbers = {
        name: pd.to_numeric(_column(body, name), errors="coerce").fillna(0).astype(float)
        for name in NUMERIC_COLUMNS
    }

    rows: list[CSVRow] = []
    for i in body.index:
        zone_value = _column(body, "zone")[i] or Zone.R1.value
        try:
            zone = Zone(zone_value)
        except ValueError:
            logger.warning("Skipping row %d: unknown zone %r", i + 1, zone_value)
            continue

        rows.append(CSVRow(
            row_number=i,
            project_name=_column(body, "project_name")[i] or f"Project {i}",
            plot_area=numbers["plot_area"][i],
            plot_width=numbers["plot_width"][i],
            plot_depth=numbers["plot_depth"][i],
            road_width=numbers["road_width"][i],
            zone=zone,
            is_corner_plot=_parse_yes(_column(body, "corner_plot")[i]),
            premium_fsi=_parse_yes(_column(body, "premium_fsi")[i]),
            tdr_fsi=numbers["tdr_fsi"][i],
        ))

    return rows


def row_to_site(row: CSVRow) -> SiteDescription:
    """Site description for a CSV row; raises ValidationError for e.g. a zero road width."""
    return SiteDescription(
        project_name=row.project_name,
        address=CSV_ADDRESS,
        location=CSV_LOCATION,
        authority=CSV_AUTHORITY,
        zone=row.zone,
        plot_dimensions=PlotDimensions(
            length=row.plot_depth,
            width=row.plot_width,
            area=row.plot_area,
        ),
        is_corner_plot=row.is_corner_plot,
        road_width_primary=row.road_width,
        intended_use=CSV_INTENDED_USE,
        special_conditions=SpecialConditions(),
    )


# ──────────────────────────────────────────────────────────────────
# WRITING
# ──────────────────────────────────────────────────────────────────

def _write_csv(header: list[str], rows: list[list[str]]) -> str:
    frame = pd.DataFrame(rows, columns=header)
    return frame.to_csv(index=False, lineterminator="\n").rstrip("\n")


def _single_line(text: str) -> str:
    return " ".join(text.splitlines())


def _export_row(project: ProjectRecord) -> list[str]:
    site = project.site
    result = project.result
    return [
        _single_line(site.project_name) if site and site.project_name else "N/A",
        num(site.plot_dimensions.area) if site else "0",
        site.zone.value if site else "N/A",
        num(result.fsi.base) if result else "0",
        num(result.height.max) if result else "0",
        num(result.ground_coverage.max_percentage) if result else "0",
        str(result.parking.required) if result else "0",
        num(result.setbacks.front) if result else "0",
        num(result.setbacks.side) if result else "0",
        num(result.setbacks.rear) if result else "0",
    ]


def results_to_csv(projects: Sequence[ProjectRecord]) -> str:
    """One line per project under a fixed header; missing values become 0 / N/A."""
    return _write_csv(EXPORT_HEADERS, [_export_row(p) for p in projects])


def generate_csv_template() -> str:
    return _write_csv(TEMPLATE_HEADERS, TEMPLATE_SAMPLE_ROWS)
