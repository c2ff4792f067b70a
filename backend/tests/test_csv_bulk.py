"""Tests for the CSV bulk adapter."""

from __future__ import annotations

import logging

import pytest

from limit.models.schemas import (
    Authority, CSVRow, IntendedUse, ProjectRecord, Zone,
)
from limit.regulation_engine.calculator import RegulationCalculator
from limit.services.csv_bulk import (
    EXPORT_HEADERS,
    TEMPLATE_HEADERS,
    generate_csv_template,
    parse_rows,
    results_to_csv,
    row_to_site,
)

HEADER = "project_name,plot_area,plot_width,plot_depth,road_width,zone,corner_plot,premium_fsi,tdr_fsi"


class TestParseRows:
    """Header matching, defaults and skipped rows."""

    def test_basic_row(self):
        rows = parse_rows(HEADER + "\nTower A,600,20,30,9,R2,yes,no,0.5")
        assert len(rows) == 1
        row = rows[0]
        assert row.row_number == 1
        assert row.project_name == "Tower A"
        assert row.plot_area == 600
        assert row.plot_width == 20
        assert row.plot_depth == 30
        assert row.road_width == 9
        assert row.zone == Zone.R2
        assert row.is_corner_plot is True
        assert row.premium_fsi is False
        assert row.tdr_fsi == 0.5

    def test_header_order_and_case_independent(self):
        text = "Zone,Road_Width,PROJECT_NAME,plot_area\nCommercial,18,Mall,1200"
        row = parse_rows(text)[0]
        assert row.zone == Zone.COMMERCIAL
        assert row.road_width == 18
        assert row.project_name == "Mall"
        assert row.plot_area == 1200
        assert row.plot_width == 0

    def test_defaults_for_blank_and_bad_values(self):
        row = parse_rows(HEADER + "\n,abc,,20,x,,YES,,")[0]
        assert row.project_name == "Project 1"
        assert row.plot_area == 0
        assert row.plot_depth == 20
        assert row.road_width == 0
        assert row.zone == Zone.R1
        assert row.is_corner_plot is True

    def test_column_mismatch_skipped_with_warning(self, caplog):
        text = HEADER + "\nA,600,20,30,9,R1,no,no,0\nB,600,20\nC,500,20,25,12,R2,no,no,0"
        with caplog.at_level(logging.WARNING):
            rows = parse_rows(text)
        assert [r.project_name for r in rows] == ["A", "C"]
        assert [r.row_number for r in rows] == [1, 3]
        assert "Skipping row 3" in caplog.text

    def test_long_row_skipped_and_numbering_kept(self, caplog):
        text = HEADER + "\nA,600,20,30,9,R1,no,no,0\nB,600,20,30,9,R1,no,no,0,extra\nC,500,20,25,12,R2,no,no,0"
        with caplog.at_level(logging.WARNING):
            rows = parse_rows(text)
        assert [r.project_name for r in rows] == ["A", "C"]
        assert [r.row_number for r in rows] == [1, 3]
        assert "column count mismatch" in caplog.text

    def test_spaces_after_delimiters(self):
        row = parse_rows("project_name, plot_area, zone\nTower,  750 , R2")[0]
        assert row.plot_area == 750
        assert row.zone == Zone.R2

    def test_unknown_zone_skipped(self, caplog):
        text = HEADER + "\nA,600,20,30,9,R9,no,no,0\nB,600,20,30,9,Industrial,no,no,0"
        with caplog.at_level(logging.WARNING):
            rows = parse_rows(text)
        assert [r.project_name for r in rows] == ["B"]
        assert "unknown zone" in caplog.text

    def test_windows_line_endings(self):
        rows = parse_rows(HEADER + "\r\nA,600,20,30,9,R1,no,no,0\r\n")
        assert rows[0].tdr_fsi == 0

    @pytest.mark.parametrize("text", ["", "   ", HEADER])
    def test_no_data_rows(self, text):
        with pytest.raises(ValueError, match="empty or has no data rows"):
            parse_rows(text)


class TestRowToSite:
    """Placeholders for fields the CSV does not carry."""

    def test_mapping(self):
        row = CSVRow(
            row_number=2, project_name="Plot 7", plot_area=500,
            plot_width=20, plot_depth=25, road_width=12, zone=Zone.R1,
            is_corner_plot=True,
        )
        site = row_to_site(row)
        assert site.project_name == "Plot 7"
        assert site.address == "Imported from CSV"
        assert site.location.lat == 23.0225
        assert site.authority == Authority.AUDA
        assert site.intended_use == IntendedUse.RESIDENTIAL_SINGLE
        assert site.plot_dimensions.length == 25
        assert site.plot_dimensions.width == 20
        assert site.plot_dimensions.area == 500
        assert site.is_corner_plot is True
        assert site.road_width_primary == 12
        assert site.special_conditions.heritage is False

    def test_zero_road_width_rejected(self):
        row = CSVRow(row_number=1, project_name="No road", road_width=0)
        with pytest.raises(ValueError):
            row_to_site(row)


class TestResultsToCSV:
    """Export in fixed column order."""

    def test_one_line_per_project(self, rules, make_site):
        calculator = RegulationCalculator()
        projects = []
        for name in ["A", "B", "C"]:
            site = make_site(project_name=name)
            result, clauses = calculator.calculate(site, rules)
            projects.append(ProjectRecord(site=site, result=result, clauses=clauses))

        lines = results_to_csv(projects).split("\n")
        assert lines[0] == ",".join(EXPORT_HEADERS)
        assert len(lines[1:]) == 3
        assert lines[1] == "A,600,R1,1.2,27,60,9,4.5,5,3"

    def test_missing_result_defaults(self, make_site):
        lines = results_to_csv([
            ProjectRecord(site=make_site(project_name="Pending")),
            ProjectRecord(),
        ]).split("\n")
        assert lines[1] == "Pending,600,R1,0,0,0,0,0,0,0"
        assert lines[2] == "N/A,0,N/A,0,0,0,0,0,0,0"

    def test_name_with_comma_quoted(self, make_site):
        lines = results_to_csv([ProjectRecord(site=make_site(project_name="Tower, East"))]).split("\n")
        assert len(lines) == 2
        assert lines[1].startswith('"Tower, East",')

    def test_multiline_name_kept_on_one_line(self, make_site):
        lines = results_to_csv([ProjectRecord(site=make_site(project_name="Tower\nEast"))]).split("\n")
        assert len(lines) == 2
        assert lines[1].startswith("Tower East,")

    def test_empty_batch(self):
        assert results_to_csv([]) == ",".join(EXPORT_HEADERS)


class TestTemplate:
    """Downloadable template."""

    def test_template_header_and_rows(self):
        template = generate_csv_template()
        lines = template.split("\n")
        assert lines[0] == ",".join(TEMPLATE_HEADERS)
        rows = parse_rows(template)
        assert [r.zone for r in rows] == [Zone.R1, Zone.R2, Zone.COMMERCIAL]
        assert rows[1].is_corner_plot is True
