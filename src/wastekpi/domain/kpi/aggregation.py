"""Roll-up of waste records into aggregate metrics.

The fold is a plain sum per field, so record order never changes the
result and partial aggregates can be combined with ``+``.
"""

from collections.abc import Iterable
from typing import Optional

from wastekpi.domain.kpi.value_objects import WasteMetrics
from wastekpi.domain.organization import Site
from wastekpi.domain.waste import WasteRecord


def aggregate_records(
    records: Iterable[WasteRecord],
    construction_amount: Optional[float] = None,
) -> WasteMetrics:
    """Sum the six weight fields of ``records``."""
    metrics = WasteMetrics()
    for record in records:
        metrics = metrics + WasteMetrics.from_record(record)
    return metrics.with_construction_amount(construction_amount)


def aggregate_by_waste_type(
    records: Iterable[WasteRecord],
) -> dict[str, WasteMetrics]:
    """Sum weights per waste type label, keyed in first-seen order."""
    by_type: dict[str, WasteMetrics] = {}
    for record in records:
        current = by_type.get(record.waste_type, WasteMetrics())
        by_type[record.waste_type] = current + WasteMetrics.from_record(record)
    return by_type


def total_construction_amount(sites: Iterable[Site]) -> Optional[float]:
    """Sum of declared construction amounts, or None when not positive."""
    total = sum(site.construction_amount or 0.0 for site in sites)
    return total if total > 0 else None
