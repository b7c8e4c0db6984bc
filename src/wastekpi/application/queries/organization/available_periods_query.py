"""Available periods query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wastekpi.application.ports import RecordSource
from wastekpi.domain.kpi import available_periods

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory


class AvailablePeriodsQuery:
    """Distinct YYYY-MM periods with waste records, oldest first."""

    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> AvailablePeriodsQuery:
        return cls(record_source=factory.record_source())

    def execute(self) -> list[str]:
        return available_periods(self._source.load_waste_records())
