"""Branch comparison query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import BranchKPI
from wastekpi.application.ports import RecordSource
from wastekpi.application.queries.kpi.branch_kpi_query import compute_branch_kpi
from wastekpi.domain.shared import validate_year_month

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class BranchComparisonQuery:
    """KPIs of every real branch that produced waste in the period.

    The whole-company branch is skipped and branches without waste are
    dropped. Source order is kept.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> BranchComparisonQuery:
        return cls(record_source=factory.record_source())

    def execute(self, year_month: str) -> list[BranchKPI]:
        validate_year_month(year_month)

        sites = self._source.load_sites()
        records = self._source.load_waste_records()

        results = []
        for branch in self._source.load_branches():
            if branch.is_company:
                continue
            branch_kpi = compute_branch_kpi(branch, sites, records, year_month)
            if branch_kpi.total_waste > 0:
                results.append(branch_kpi)

        logger.debug("Compared %d branches for %s", len(results), year_month)
        return results
