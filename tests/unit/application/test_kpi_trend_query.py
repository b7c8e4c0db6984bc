"""Unit tests for KPITrendQuery."""

from unittest.mock import Mock

import pytest

from tests.shared.fixtures.factories import TestRecordSourceFactory
from wastekpi.application.queries.kpi import KPITrendQuery
from wastekpi.domain.organization import HierarchyLevel


@pytest.fixture
def query():
    return KPITrendQuery(TestRecordSourceFactory.default())


class TestKPITrendQuery:
    """Test period windows and per-period dispatch."""

    def test_company_trend_is_ascending(self, query):
        series = query.execute(HierarchyLevel.COMPANY)

        assert [p.year_month for p in series] == ["2024-02", "2024-03", "2024-04"]
        assert [p.total_waste for p in series] == [800.0, 1000.0, 1500.0]

    def test_takes_most_recent_months(self, query):
        series = query.execute(HierarchyLevel.COMPANY, months=2)

        assert [p.year_month for p in series] == ["2024-03", "2024-04"]

    def test_no_padding_when_history_is_short(self, query):
        series = query.execute(HierarchyLevel.COMPANY, months=24)

        assert len(series) == 3

    def test_site_trend_uses_global_periods(self, query):
        series = query.execute(HierarchyLevel.SITE, target_id="S001", months=3)

        # SITE001 has no 2024-02 records but the period still exists globally
        assert [p.year_month for p in series] == ["2024-02", "2024-03", "2024-04"]
        assert series[0].total_waste == 0.0
        assert series[-1].total_waste == pytest.approx(2500.0)

    def test_branch_trend(self, query):
        series = query.execute(HierarchyLevel.BRANCH, target_id="B002", months=1)

        assert len(series) == 1
        assert series[0].branch_name == "Osaka Branch"

    def test_unknown_target_yields_empty_series(self, query):
        assert query.execute(HierarchyLevel.SITE, target_id="S999") == []

    @pytest.mark.parametrize("level", [HierarchyLevel.SITE, HierarchyLevel.BRANCH])
    def test_missing_target_yields_empty_series(self, query, level):
        assert query.execute(level, target_id=None) == []

    def test_empty_source(self):
        query = KPITrendQuery(TestRecordSourceFactory.empty())

        assert query.execute(HierarchyLevel.COMPANY) == []


class TestKPITrendQueryDependencyInjection:
    def test_from_factory_creates_query(self):
        factory = Mock()

        query = KPITrendQuery.from_factory(factory)

        assert isinstance(query, KPITrendQuery)
        factory.record_source.assert_called_once()
