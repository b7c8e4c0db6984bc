"""Site overview query for the site listing page."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from wastekpi.application.dtos.organization import SiteOverviewItem
from wastekpi.application.ports import RecordSource
from wastekpi.domain.shared import validate_year_month

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)

UNKNOWN_BRANCH_NAME = "Unknown"


class SiteOverviewQuery:
    """List real sites with their branch and period waste total.

    Active sites come first, then newer start dates; sites without a start
    date sort last within their group.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> SiteOverviewQuery:
        return cls(record_source=factory.record_source())

    def execute(self, year_month: str) -> list[SiteOverviewItem]:
        validate_year_month(year_month)

        branch_names = {
            branch.id: branch.name for branch in self._source.load_branches()
        }
        totals: dict[str, float] = {}
        for record in self._source.load_waste_records():
            if record.year_month == year_month:
                totals[record.site_code] = (
                    totals.get(record.site_code, 0.0) + record.total_weight
                )

        sites = [site for site in self._source.load_sites() if not site.is_company]
        sites.sort(key=lambda site: site.start_date or date.min, reverse=True)
        sites.sort(key=lambda site: not site.is_active)

        items = []
        for site in sites:
            branch_name = branch_names.get(site.branch_id)
            if branch_name is None:
                logger.warning(
                    "Site %s references unknown branch %s",
                    site.code,
                    site.branch_id,
                )
                branch_name = UNKNOWN_BRANCH_NAME
            items.append(
                SiteOverviewItem(
                    site_id=site.id,
                    site_code=site.code,
                    site_name=site.name,
                    branch_id=site.branch_id,
                    branch_name=branch_name,
                    construction_type=site.construction_type,
                    status=site.status,
                    total_waste=totals.get(site.code, 0.0),
                    start_date=site.start_date,
                    end_date=site.end_date,
                    construction_amount=site.construction_amount,
                ),
            )
        return items
