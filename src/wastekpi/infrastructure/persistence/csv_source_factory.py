"""Source factory wiring the CSV record source from settings."""

from __future__ import annotations

from typing import Optional

from wastekpi.infrastructure.persistence.csv_record_source import CsvRecordSource
from wastekpi_config import Settings, get_settings


class CsvSourceFactory:
    """Hand out CSV record sources configured from ``Settings``.

    Queries are built through ``Query.from_factory(factory)``.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def record_source(self) -> CsvRecordSource:
        return CsvRecordSource(
            self._settings.data_path,
            branches_file=self._settings.branches_file,
            sites_file=self._settings.sites_file,
            waste_records_file=self._settings.waste_records_file,
            encoding=self._settings.csv_encoding,
        )
