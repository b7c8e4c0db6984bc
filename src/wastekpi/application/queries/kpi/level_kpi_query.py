"""Dispatch a KPI computation by hierarchy level."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import LevelKPI
from wastekpi.application.ports import RecordSource
from wastekpi.application.queries.kpi.branch_kpi_query import BranchKPIQuery
from wastekpi.application.queries.kpi.company_kpi_query import CompanyKPIQuery
from wastekpi.application.queries.kpi.site_kpi_query import SiteKPIQuery
from wastekpi.domain.organization import HierarchyLevel

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class LevelKPIQuery:
    """Run the site, branch or company KPI query for a single period."""

    def __init__(self, record_source: RecordSource):
        self._site_query = SiteKPIQuery(record_source)
        self._branch_query = BranchKPIQuery(record_source)
        self._company_query = CompanyKPIQuery(record_source)

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> LevelKPIQuery:
        return cls(record_source=factory.record_source())

    def execute(
        self,
        level: HierarchyLevel,
        target_id: str | None,
        year_month: str,
    ) -> LevelKPI | None:
        """Return ``None`` when the target is missing or unknown."""
        if level is HierarchyLevel.COMPANY:
            return self._company_query.execute(year_month)

        if not target_id:
            logger.info("No target id given for level %s", level.value)
            return None

        if level is HierarchyLevel.SITE:
            return self._site_query.execute(target_id, year_month)
        return self._branch_query.execute(target_id, year_month)
