"""Waste flow (Sankey) query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.flow import SankeyData, WasteFlowItem
from wastekpi.application.ports import RecordSource
from wastekpi.application.services import build_sankey_graph
from wastekpi.domain.kpi import aggregate_by_waste_type
from wastekpi.domain.organization import WellKnownCodes
from wastekpi.domain.shared import validate_year_month

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)

COMPANY_SCOPE = "company"


class WasteFlowQuery:
    """Generate Sankey nodes/links for total → waste type → treatment.

    Scope precedence: ``site_code``, then ``site_id``, then ``branch_id``
    (every site of the branch regardless of status), else the whole company.
    A ``site_id`` that does not resolve falls through to the next scope.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> WasteFlowQuery:
        return cls(record_source=factory.record_source())

    def execute(
        self,
        year_month: str,
        site_id: str | None = None,
        site_code: str | None = None,
        branch_id: str | None = None,
    ) -> SankeyData:
        validate_year_month(year_month)
        scope, site_codes = self._resolve_scope(site_id, site_code, branch_id)

        records = [
            record
            for record in self._source.load_waste_records()
            if record.site_code in site_codes and record.year_month == year_month
        ]
        if not records:
            logger.info("No waste flow data for %s in %s", scope, year_month)
            return SankeyData(
                year_month=year_month,
                scope=scope,
                message=f"No waste records for {scope} in {year_month}",
            )

        by_type = aggregate_by_waste_type(records)
        flows = sorted(
            (
                WasteFlowItem(
                    waste_type=waste_type,
                    total_weight=metrics.total_waste,
                    recycled_weight=metrics.recycled_waste,
                    thermal_recycled_weight=metrics.thermal_recycled_waste,
                    final_disposal_weight=metrics.final_disposal_waste,
                )
                for waste_type, metrics in by_type.items()
            ),
            key=lambda flow: flow.total_weight,
            reverse=True,
        )
        graph = build_sankey_graph(flows)

        return SankeyData(
            nodes=graph.nodes,
            links=graph.links,
            year_month=year_month,
            scope=scope,
            total_weight=sum(flow.total_weight for flow in flows),
        )

    def _resolve_scope(
        self,
        site_id: str | None,
        site_code: str | None,
        branch_id: str | None,
    ) -> tuple[str, set[str]]:
        if site_code:
            return f"site:{site_code}", {site_code}

        if site_id:
            site = self._source.get_site_by_id(site_id)
            if site is not None:
                return f"site:{site.code}", {site.code}
            logger.info("Site id %s not found, widening flow scope", site_id)

        if branch_id:
            codes = {
                site.code
                for site in self._source.load_sites()
                if site.branch_id == branch_id
            }
            return f"branch:{branch_id}", codes

        return COMPANY_SCOPE, {WellKnownCodes.COMPANY_SITE}
