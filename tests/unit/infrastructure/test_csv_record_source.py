"""Tests for the CSV record source."""

import logging
import math
from datetime import date

import pytest

from tests.shared.fixtures.csv_files import RECORDS_CSV, SITES_CSV, write_data_dir
from wastekpi.application.queries import SiteKPIQuery
from wastekpi.domain.organization import SiteStatus
from wastekpi.infrastructure.persistence import (
    CsvRecordSource,
    CsvSourceFactory,
    MalformedRecordError,
    RecordSourceUnavailableError,
    parse_construction_amount,
    parse_weight,
)
from wastekpi_config import Settings

pytestmark = pytest.mark.csv


class TestParseWeight:
    """Test weight cell coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1200", 1200.0),
            (" 12.5 ", 12.5),
            ("1,500", 1500.0),
            ("", 0.0),
            (None, 0.0),
        ],
    )
    def test_parses_or_defaults(self, raw, expected):
        assert parse_weight(raw) == expected

    def test_unparseable_value_is_logged_and_zeroed(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_weight("n/a", column="recycled_weight", row_number=3) == 0.0

        assert "recycled_weight" in caplog.text

    @pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-inf", "Infinity"])
    def test_non_finite_value_is_logged_and_zeroed(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_weight(raw, column="total_weight", row_number=2) == 0.0

        assert "total_weight" in caplog.text


class TestParseConstructionAmount:
    """Test construction amount cell coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("250", 250.0),
            ("1,200.5", 1200.5),
            ("0", 0.0),
            ("", None),
            (None, None),
        ],
    )
    def test_parses_or_is_absent(self, raw, expected):
        assert parse_construction_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["N/A", "tbd", "nan", "inf"])
    def test_unparseable_value_is_logged_and_absent(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_construction_amount(raw, row_number=4) is None

        assert "construction_amount" in caplog.text


class TestCsvRecordSource:
    """Test loading branches, sites and records from CSV files."""

    def test_load_branches(self, data_dir):
        branches = CsvRecordSource(data_dir).load_branches()

        assert [b.code for b in branches] == ["DEPT000", "DEPT001"]
        assert branches[1].region == "Kanto"

    def test_load_sites(self, data_dir):
        sites = CsvRecordSource(data_dir).load_sites()

        assert len(sites) == 3
        company, tower, depot = sites
        assert company.construction_amount is None
        assert tower.status == SiteStatus.ACTIVE
        assert tower.start_date == date(2023, 4, 1)
        assert tower.end_date is None
        assert tower.construction_amount == 250.0
        assert depot.status == SiteStatus.COMPLETED
        assert depot.construction_amount is None

    def test_load_waste_records_coerces_weights(self, data_dir):
        records = CsvRecordSource(data_dir).load_waste_records()

        assert len(records) == 3
        wood = records[1]
        assert wood.sorted_weight == 0.0
        assert wood.recycled_weight == 0.0
        assert wood.thermal_recycled_weight == 150.0
        assert records[2].total_weight == 1500.0

    def test_lookups(self, data_dir):
        source = CsvRecordSource(data_dir)

        assert source.get_branch_by_id("B001").code == "DEPT001"
        assert source.get_branch_by_code("DEPT000").id == "B000"
        assert source.get_site_by_id("S002").code == "SITE002"
        assert source.get_site_by_code("SITE001").id == "S001"
        assert source.get_site_by_id("S404") is None
        assert source.get_branch_by_code("DEPT404") is None

    def test_rereads_files_on_every_call(self, data_dir):
        source = CsvRecordSource(data_dir)
        assert len(source.load_waste_records()) == 3

        write_data_dir(data_dir, records=RECORDS_CSV.splitlines()[0] + "\n")

        assert source.load_waste_records() == []

    def test_blank_lines_are_skipped(self, tmp_path):
        write_data_dir(tmp_path, records=RECORDS_CSV + "\n,,,,,,,,\n")

        assert len(CsvRecordSource(tmp_path).load_waste_records()) == 3

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RecordSourceUnavailableError) as exc_info:
            CsvRecordSource(tmp_path).load_branches()

        assert exc_info.value.path.name == "branches.csv"

    def test_malformed_row_reports_row_number(self, tmp_path):
        records = RECORDS_CSV + "SITE001,2024/05,glass,10,10,0,10,0,0\n"
        write_data_dir(tmp_path, records=records)

        with pytest.raises(MalformedRecordError) as exc_info:
            CsvRecordSource(tmp_path).load_waste_records()

        assert exc_info.value.row_number == 5

    def test_non_finite_weight_does_not_reach_kpis(self, tmp_path):
        records = RECORDS_CSV.replace(
            "SITE001,2024-04,concrete debris,2000,",
            "SITE001,2024-04,concrete debris,nan,",
        )
        write_data_dir(tmp_path, records=records)

        result = SiteKPIQuery(CsvRecordSource(tmp_path)).execute("S001", "2024-04")

        assert result.total_waste == 500.0
        assert not math.isnan(result.sorting_rate)
        assert not math.isnan(result.final_disposal_rate)

    def test_unparseable_construction_amount_is_absent(self, tmp_path):
        sites = SITES_CSV.replace(",2023-04-01,,250,", ",2023-04-01,,N/A,")
        write_data_dir(tmp_path, sites=sites)
        source = CsvRecordSource(tmp_path)

        assert source.get_site_by_id("S001").construction_amount is None

        result = SiteKPIQuery(source).execute("S001", "2024-04")
        assert result.total_waste == 2500.0
        assert result.waste_intensity is None

    def test_custom_file_names(self, tmp_path):
        (tmp_path / "b.csv").write_text("id,code,name\nB1,DEPT001,Tokyo\n")

        source = CsvRecordSource(tmp_path, branches_file="b.csv")

        assert source.load_branches()[0].region == ""


class TestCsvSourceFactory:
    def test_builds_source_from_settings(self, data_dir):
        settings = Settings(data_dir=str(data_dir))

        source = CsvSourceFactory(settings).record_source()

        assert isinstance(source, CsvRecordSource)
        assert source.data_dir == data_dir
        assert len(source.load_sites()) == 3
