"""Site-level KPI query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import SiteKPI, kpi_fields
from wastekpi.application.ports import RecordSource
from wastekpi.domain.kpi import aggregate_records, derive_kpis
from wastekpi.domain.organization import Site
from wastekpi.domain.shared import validate_year_month

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class SiteKPIQuery:
    """Compute the KPIs of one site for one period.

    Returns ``None`` when the site or its owning branch cannot be resolved.
    The site's own construction amount is the intensity denominator.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> SiteKPIQuery:
        return cls(record_source=factory.record_source())

    def execute(self, site_id: str, year_month: str) -> SiteKPI | None:
        validate_year_month(year_month)
        site = self._source.get_site_by_id(site_id)
        if site is None:
            logger.info("Site id %s not found", site_id)
            return None
        return self._compute(site, year_month)

    def execute_by_code(self, site_code: str, year_month: str) -> SiteKPI | None:
        validate_year_month(year_month)
        site = self._source.get_site_by_code(site_code)
        if site is None:
            logger.info("Site code %s not found", site_code)
            return None
        return self._compute(site, year_month)

    def _compute(self, site: Site, year_month: str) -> SiteKPI | None:
        branch = self._source.get_branch_by_id(site.branch_id)
        if branch is None:
            logger.info("Branch %s of site %s not found", site.branch_id, site.code)
            return None

        records = [
            record
            for record in self._source.load_waste_records()
            if record.site_code == site.code and record.year_month == year_month
        ]
        metrics = aggregate_records(records, site.positive_construction_amount)
        kpis = derive_kpis(metrics)

        logger.debug(
            "Site %s %s: %d records, total %.1f kg",
            site.code,
            year_month,
            len(records),
            metrics.total_waste,
        )
        return SiteKPI(
            site_id=site.id,
            site_code=site.code,
            site_name=site.name,
            branch_name=branch.name,
            **kpi_fields(year_month, metrics, kpis),
        )
