"""KPI trend query over the most recent periods."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import LevelKPI
from wastekpi.application.ports import RecordSource
from wastekpi.application.queries.kpi.level_kpi_query import LevelKPIQuery
from wastekpi.domain.kpi import available_periods, latest_periods
from wastekpi.domain.organization import HierarchyLevel

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)

DEFAULT_TREND_MONTHS = 6


class KPITrendQuery:
    """Per-period KPIs for the last ``months`` periods with data.

    Periods are the distinct months found across all records, so the
    series has no gaps and is never padded. Periods for which the target
    yields no result are skipped; a missing site or branch target yields
    an empty series.
    """

    def __init__(self, record_source: RecordSource):
        self._source = record_source
        self._level_query = LevelKPIQuery(record_source)

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> KPITrendQuery:
        return cls(record_source=factory.record_source())

    def execute(
        self,
        level: HierarchyLevel,
        target_id: str | None = None,
        months: int = DEFAULT_TREND_MONTHS,
    ) -> list[LevelKPI]:
        if level.requires_target_id() and not target_id:
            logger.info("Trend for level %s requested without target", level.value)
            return []

        periods = latest_periods(
            available_periods(self._source.load_waste_records()),
            months,
        )

        series: list[LevelKPI] = []
        for period in periods:
            result = self._level_query.execute(level, target_id, period)
            if result is not None:
                series.append(result)

        logger.debug(
            "Trend %s/%s: %d of %d periods",
            level.value,
            target_id or "-",
            len(series),
            len(periods),
        )
        return series
