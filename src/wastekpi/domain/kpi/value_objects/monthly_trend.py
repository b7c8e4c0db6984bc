"""Month-over-month comparison of a single value."""

from dataclasses import dataclass
from enum import Enum


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class MonthlyTrend:
    """Two-point comparison between the current and the previous value."""

    delta: float
    percentage: float  # 0 when the previous value is 0
    direction: TrendDirection
