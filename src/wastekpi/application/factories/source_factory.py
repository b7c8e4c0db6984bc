"""Record source factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from wastekpi.application.ports import RecordSource


class SourceFactory(Protocol):
    """Protocol for handing out record sources to queries."""

    def record_source(self) -> RecordSource:
        """Get the record source."""
        ...
