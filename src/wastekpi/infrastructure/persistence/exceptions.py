"""Record source errors raised by the persistence adapters."""

from pathlib import Path

from wastekpi.domain.shared import DataSourceError, ErrorCode


class RecordSourceUnavailableError(DataSourceError):
    """Raised when a CSV file of the record source cannot be opened."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            message=f"Record file not found: {path.name}",
            details={"path": str(path)},
        )
        self.path = path


class MalformedRecordError(DataSourceError):
    """Raised when a CSV row cannot be turned into a domain object."""

    def __init__(self, path: Path, row_number: int, reason: str) -> None:
        super().__init__(
            message=f"Malformed row {row_number} in {path.name}",
            code=ErrorCode.MALFORMED_RECORD,
            details={"path": str(path), "row": row_number, "reason": reason},
        )
        self.path = path
        self.row_number = row_number
