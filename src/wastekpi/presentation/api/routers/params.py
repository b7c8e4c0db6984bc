"""Shared query parameter declarations."""

from typing import Annotated, Optional

from fastapi import Query

from wastekpi.domain.shared import YEAR_MONTH_PATTERN

YearMonthParam = Annotated[
    Optional[str],
    Query(
        pattern=YEAR_MONTH_PATTERN,
        description="Period (YYYY-MM format), defaults to the configured period",
    ),
]
