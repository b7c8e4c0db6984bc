"""Helpers for YYYY-MM period tokens.

Periods are fixed-width and zero-padded, so plain string comparison is
chronological comparison.
"""

import re
from datetime import date

from wastekpi.domain.shared.exceptions import InvalidPeriodError

YEAR_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
_YEAR_MONTH_RE = re.compile(YEAR_MONTH_PATTERN)


def is_valid_year_month(value: str) -> bool:
    return bool(_YEAR_MONTH_RE.match(value))


def validate_year_month(value: str) -> str:
    """Return the token unchanged or raise InvalidPeriodError."""
    if not is_valid_year_month(value):
        raise InvalidPeriodError(value)
    return value


def period_label(year_month: str) -> str:
    """Human-readable label for chart axes (e.g. 'Apr 2024')."""
    year, month = validate_year_month(year_month).split("-")
    return date(int(year), int(month), 1).strftime("%b %Y")
