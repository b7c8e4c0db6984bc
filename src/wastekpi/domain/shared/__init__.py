"""Shared domain building blocks."""

from wastekpi.domain.shared.exceptions import (
    DataSourceError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InvalidPeriodError,
    ValidationError,
)
from wastekpi.domain.shared.formatting import format_percentage, format_weight
from wastekpi.domain.shared.year_month import (
    YEAR_MONTH_PATTERN,
    is_valid_year_month,
    period_label,
    validate_year_month,
)

__all__ = [
    "YEAR_MONTH_PATTERN",
    "DataSourceError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InvalidPeriodError",
    "ValidationError",
    "format_percentage",
    "format_weight",
    "is_valid_year_month",
    "period_label",
    "validate_year_month",
]
