"""KPI summary with month-over-month trends and targets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wastekpi.application.dtos.kpi import KPISummary
from wastekpi.application.ports import RecordSource
from wastekpi.application.queries.kpi.level_kpi_query import LevelKPIQuery
from wastekpi.domain.kpi import (
    KPI_TARGETS,
    KPIKind,
    KPIRating,
    MonthlyTrend,
    achievement_rate,
    available_periods,
    monthly_trend,
    previous_period,
    rate_kpi,
)
from wastekpi.domain.organization import HierarchyLevel

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class KPISummaryQuery:
    """Current KPIs compared with the closest earlier period that has data."""

    def __init__(self, record_source: RecordSource):
        self._source = record_source
        self._level_query = LevelKPIQuery(record_source)

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> KPISummaryQuery:
        return cls(record_source=factory.record_source())

    def execute(
        self,
        level: HierarchyLevel,
        target_id: str | None,
        year_month: str,
    ) -> KPISummary | None:
        current = self._level_query.execute(level, target_id, year_month)
        if current is None:
            return None

        periods = available_periods(self._source.load_waste_records())
        earlier = previous_period(periods, year_month)
        previous = (
            self._level_query.execute(level, target_id, earlier) if earlier else None
        )

        trends: dict[KPIKind, MonthlyTrend] = {}
        targets: dict[KPIKind, float] = {}
        achievement_rates: dict[KPIKind, float] = {}
        ratings: dict[KPIKind, KPIRating] = {}
        for kind in KPIKind:
            value = current.kpi_value(kind)
            if value is None:
                continue

            target = KPI_TARGETS[kind]
            targets[kind] = target
            achievement_rates[kind] = achievement_rate(value, target)
            ratings[kind] = rate_kpi(kind, value)

            previous_value = previous.kpi_value(kind) if previous else None
            if previous_value is not None:
                trends[kind] = monthly_trend(value, previous_value)

        summary = KPISummary(
            level=level,
            current=current,
            previous=previous,
            trends=trends,
            targets=targets,
            achievement_rates=achievement_rates,
            ratings=ratings,
        )

        logger.debug(
            "Summary %s/%s %s against %s",
            level.value,
            target_id or "-",
            year_month,
            earlier or "none",
        )
        return summary
