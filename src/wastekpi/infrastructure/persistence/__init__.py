"""Record source adapters."""

from wastekpi.infrastructure.persistence.csv_record_source import (
    CsvRecordSource,
    parse_construction_amount,
    parse_weight,
)
from wastekpi.infrastructure.persistence.csv_source_factory import CsvSourceFactory
from wastekpi.infrastructure.persistence.exceptions import (
    MalformedRecordError,
    RecordSourceUnavailableError,
)
from wastekpi.infrastructure.persistence.memory_record_source import (
    InMemoryRecordSource,
)

__all__ = [
    "CsvRecordSource",
    "CsvSourceFactory",
    "InMemoryRecordSource",
    "MalformedRecordError",
    "RecordSourceUnavailableError",
    "parse_construction_amount",
    "parse_weight",
]
