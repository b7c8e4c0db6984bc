"""Branch-level KPI query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import BranchKPI, kpi_fields
from wastekpi.application.ports import RecordSource
from wastekpi.domain.kpi import (
    aggregate_records,
    derive_kpis,
    total_construction_amount,
)
from wastekpi.domain.organization import Branch, Site
from wastekpi.domain.shared import validate_year_month
from wastekpi.domain.waste import WasteRecord

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class BranchKPIQuery:
    """Roll up the active sites of a branch for one period."""

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> BranchKPIQuery:
        return cls(record_source=factory.record_source())

    def execute(self, branch_id: str, year_month: str) -> BranchKPI | None:
        validate_year_month(year_month)
        branch = self._source.get_branch_by_id(branch_id)
        if branch is None:
            logger.info("Branch %s not found", branch_id)
            return None
        return compute_branch_kpi(
            branch,
            self._source.load_sites(),
            self._source.load_waste_records(),
            year_month,
        )


def compute_branch_kpi(
    branch: Branch,
    sites: list[Site],
    records: list[WasteRecord],
    year_month: str,
) -> BranchKPI:
    """Aggregate the branch's active sites from already loaded data."""
    active_sites = [
        site for site in sites if site.branch_id == branch.id and site.is_active
    ]
    site_codes = {site.code for site in active_sites}
    branch_records = [
        record
        for record in records
        if record.site_code in site_codes and record.year_month == year_month
    ]

    metrics = aggregate_records(
        branch_records,
        total_construction_amount(active_sites),
    )
    kpis = derive_kpis(metrics)

    logger.debug(
        "Branch %s %s: %d active sites, total %.1f kg",
        branch.code,
        year_month,
        len(active_sites),
        metrics.total_waste,
    )
    return BranchKPI(
        branch_id=branch.id,
        branch_code=branch.code,
        branch_name=branch.name,
        site_count=len(active_sites),
        **kpi_fields(year_month, metrics, kpis),
    )
