"""KPI targets, rating thresholds and rating colors."""

from enum import Enum


class KPIKind(str, Enum):
    SORTING_RATE = "sorting_rate"
    REAL_RECYCLING_RATE = "real_recycling_rate"
    FINAL_DISPOSAL_RATE = "final_disposal_rate"
    WASTE_INTENSITY = "waste_intensity"

    @property
    def lower_is_better(self) -> bool:
        return self in (KPIKind.FINAL_DISPOSAL_RATE, KPIKind.WASTE_INTENSITY)


class KPIRating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"
    CRITICAL = "critical"

    @property
    def color(self) -> str:
        return RATING_COLORS[self]


RATING_COLORS: dict[KPIRating, str] = {
    KPIRating.EXCELLENT: "#00E676",
    KPIRating.GOOD: "#4CAF50",
    KPIRating.AVERAGE: "#FFB300",
    KPIRating.POOR: "#FF6F00",
    KPIRating.CRITICAL: "#F44336",
}

# Bounds for excellent, good, average, poor (in that order)
RATING_THRESHOLDS: dict[KPIKind, tuple[float, float, float, float]] = {
    KPIKind.SORTING_RATE: (95.0, 90.0, 80.0, 70.0),
    KPIKind.REAL_RECYCLING_RATE: (95.0, 90.0, 85.0, 80.0),
    KPIKind.FINAL_DISPOSAL_RATE: (2.0, 3.0, 5.0, 7.0),
    KPIKind.WASTE_INTENSITY: (40.0, 50.0, 60.0, 70.0),  # t per 100M JPY
}

KPI_TARGETS: dict[KPIKind, float] = {
    KPIKind.SORTING_RATE: 90.0,
    KPIKind.REAL_RECYCLING_RATE: 85.0,
    KPIKind.FINAL_DISPOSAL_RATE: 3.0,
    KPIKind.WASTE_INTENSITY: 50.0,
}

_RATING_ORDER = (
    KPIRating.EXCELLENT,
    KPIRating.GOOD,
    KPIRating.AVERAGE,
    KPIRating.POOR,
)


def rate_kpi(kind: KPIKind, value: float) -> KPIRating:
    """Classify a KPI value against its thresholds (bounds are inclusive)."""
    for rating, bound in zip(_RATING_ORDER, RATING_THRESHOLDS[kind]):
        if kind.lower_is_better and value <= bound:
            return rating
        if not kind.lower_is_better and value >= bound:
            return rating
    return KPIRating.CRITICAL
