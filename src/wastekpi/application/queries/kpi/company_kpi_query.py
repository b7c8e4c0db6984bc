"""Company-level KPI query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import CompanyKPI, kpi_fields
from wastekpi.application.ports import RecordSource
from wastekpi.domain.kpi import (
    aggregate_records,
    derive_kpis,
    total_construction_amount,
)
from wastekpi.domain.organization import WellKnownCodes
from wastekpi.domain.shared import validate_year_month

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class CompanyKPIQuery:
    """Company-wide KPIs for one period.

    Weights come straight from the pre-aggregated records of the company
    site; they are never re-summed from branches. The intensity
    denominator covers every active real site.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> CompanyKPIQuery:
        return cls(record_source=factory.record_source())

    def execute(self, year_month: str) -> CompanyKPI:
        validate_year_month(year_month)

        records = [
            record
            for record in self._source.load_waste_records()
            if record.site_code == WellKnownCodes.COMPANY_SITE
            and record.year_month == year_month
        ]
        active_sites = [
            site
            for site in self._source.load_sites()
            if site.is_active and not site.is_company
        ]
        branches = [
            branch for branch in self._source.load_branches() if not branch.is_company
        ]

        metrics = aggregate_records(
            records,
            total_construction_amount(active_sites),
        )
        kpis = derive_kpis(metrics)

        logger.debug(
            "Company %s: %d records, total %.1f kg",
            year_month,
            len(records),
            metrics.total_waste,
        )
        return CompanyKPI(
            branch_count=len(branches),
            site_count=len(active_sites),
            **kpi_fields(year_month, metrics, kpis),
        )
