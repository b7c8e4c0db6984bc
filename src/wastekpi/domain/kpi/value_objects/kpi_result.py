"""Derived KPI ratios."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KPIResult:
    """The four waste KPIs.

    Rates are percentages (0-100 for consistent input). ``waste_intensity``
    is tons per 100 million JPY of construction and is ``None`` when no
    positive construction amount exists.
    """

    sorting_rate: float
    real_recycling_rate: float
    final_disposal_rate: float
    waste_intensity: Optional[float] = None

    @property
    def has_waste_intensity(self) -> bool:
        return self.waste_intensity is not None
