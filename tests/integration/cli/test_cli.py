"""Integration tests for the wastekpi CLI."""

import pytest
from typer.testing import CliRunner

from tests.shared.fixtures.csv_files import write_data_dir
from wastekpi.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture
def data_dir(tmp_path):
    return write_data_dir(tmp_path)


def _invoke(data_dir, *args):
    return runner.invoke(app, ["--data-dir", str(data_dir), *args])


class TestKpiCommands:
    """Tests for `wastekpi kpi ...`."""

    def test_company(self, data_dir):
        result = _invoke(data_dir, "kpi", "company", "--period", "2024-04")

        assert result.exit_code == 0, result.output
        assert "Company" in result.output
        assert "1.50 t" in result.output
        assert "Final disposal rate" in result.output

    def test_site(self, data_dir):
        result = _invoke(data_dir, "kpi", "site", "S001", "-p", "2024-04")

        assert result.exit_code == 0, result.output
        assert "Harbor Tower" in result.output
        assert "2.50 t" in result.output

    def test_site_by_code(self, data_dir):
        result = _invoke(
            data_dir, "kpi", "site", "SITE001", "--by-code", "-p", "2024-04",
        )

        assert result.exit_code == 0, result.output
        assert "Harbor Tower" in result.output

    def test_unknown_branch(self, data_dir):
        result = _invoke(data_dir, "kpi", "branch", "B404")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_branch_comparison(self, data_dir):
        result = _invoke(data_dir, "kpi", "branches", "-p", "2024-04")

        assert result.exit_code == 0, result.output
        assert "Tokyo" in result.output
        assert "Head Office" not in result.output

    def test_invalid_period(self, data_dir):
        result = _invoke(data_dir, "kpi", "company", "--period", "2024-4")

        assert result.exit_code == 1
        assert "INVALID_PERIOD" in result.output

    def test_missing_data_dir(self, tmp_path):
        result = _invoke(tmp_path / "missing", "kpi", "company")

        assert result.exit_code == 1
        assert "DATA_SOURCE_UNAVAILABLE" in result.output


class TestOtherCommands:
    def test_trend(self, data_dir):
        result = _invoke(data_dir, "trend", "company", "--months", "3")

        assert result.exit_code == 0, result.output
        assert "Apr 2024" in result.output

    def test_trend_requires_target(self, data_dir):
        result = _invoke(data_dir, "trend", "site")

        assert result.exit_code == 1
        assert "--target" in result.output

    def test_flow(self, data_dir):
        result = _invoke(data_dir, "flow", "-p", "2024-04")

        assert result.exit_code == 0, result.output
        assert "concrete debris" in result.output
        assert "Recycled" in result.output

    def test_flow_without_data(self, data_dir):
        result = _invoke(data_dir, "flow", "-p", "2023-01")

        assert result.exit_code == 0, result.output
        assert "No waste records" in result.output

    def test_periods(self, data_dir):
        result = _invoke(data_dir, "periods")

        assert result.exit_code == 0, result.output
        assert "2024-04" in result.output
