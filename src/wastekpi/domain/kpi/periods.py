"""Period window selection over the available record months."""

from collections.abc import Iterable
from typing import Optional

from wastekpi.domain.waste import WasteRecord


def available_periods(records: Iterable[WasteRecord]) -> list[str]:
    """Distinct periods present in ``records``, oldest first."""
    return sorted({record.year_month for record in records})


def latest_periods(periods: list[str], count: int) -> list[str]:
    """The ``count`` most recent periods of an ascending list.

    Fewer available periods than ``count`` returns all of them.
    """
    if count <= 0:
        return []
    return periods[-count:]


def previous_period(periods: Iterable[str], current: str) -> Optional[str]:
    """The closest available period strictly before ``current``."""
    earlier = [period for period in periods if period < current]
    return max(earlier) if earlier else None
