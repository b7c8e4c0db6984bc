"""Aggregated waste weights."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from wastekpi.domain.waste import WasteRecord


@dataclass(frozen=True)
class WasteMetrics:
    """Six summed weight totals (kg) plus an optional intensity denominator.

    ``construction_amount`` is ``None`` when no contributing site declares a
    positive amount. It is never zero-filled.
    """

    total_waste: float = 0.0
    sorted_waste: float = 0.0
    mixed_waste: float = 0.0
    recycled_waste: float = 0.0
    thermal_recycled_waste: float = 0.0
    final_disposal_waste: float = 0.0
    construction_amount: Optional[float] = None

    @classmethod
    def from_record(cls, record: WasteRecord) -> WasteMetrics:
        return cls(
            total_waste=record.total_weight,
            sorted_waste=record.sorted_weight,
            mixed_waste=record.mixed_weight,
            recycled_waste=record.recycled_weight,
            thermal_recycled_waste=record.thermal_recycled_weight,
            final_disposal_waste=record.final_disposal_weight,
        )

    def __add__(self, other: WasteMetrics) -> WasteMetrics:
        """Sum the weights; the denominator is kept from the left operand."""
        return WasteMetrics(
            total_waste=self.total_waste + other.total_waste,
            sorted_waste=self.sorted_waste + other.sorted_waste,
            mixed_waste=self.mixed_waste + other.mixed_waste,
            recycled_waste=self.recycled_waste + other.recycled_waste,
            thermal_recycled_waste=(
                self.thermal_recycled_waste + other.thermal_recycled_waste
            ),
            final_disposal_waste=self.final_disposal_waste + other.final_disposal_waste,
            construction_amount=self.construction_amount,
        )

    def with_construction_amount(self, amount: Optional[float]) -> WasteMetrics:
        return replace(self, construction_amount=amount)

    @property
    def recovered_waste(self) -> float:
        return self.recycled_waste + self.thermal_recycled_waste

    @property
    def has_construction_amount(self) -> bool:
        return self.construction_amount is not None and self.construction_amount > 0
