"""CSV-backed record source.

Reads three comma-separated files with a header row:

* branches: ``id, code, name, region``
* sites: ``id, code, name, branch_id, construction_type, start_date,
  end_date, construction_amount, status``
* waste records: ``site_code, year_month, waste_type, total_weight,
  sorted_weight, mixed_weight, recycled_weight, thermal_recycled_weight,
  final_disposal_weight``

Files are re-read on every call; nothing is cached between calls.
"""

from __future__ import annotations

import csv
import logging
import math
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wastekpi.domain.organization import Branch, Site
from wastekpi.domain.waste import WasteRecord
from wastekpi.infrastructure.persistence.exceptions import (
    MalformedRecordError,
    RecordSourceUnavailableError,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

WEIGHT_COLUMNS = (
    "total_weight",
    "sorted_weight",
    "mixed_weight",
    "recycled_weight",
    "thermal_recycled_weight",
    "final_disposal_weight",
)


def _parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse a numeric cell; ``None`` when empty, unparseable or not finite."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip().replace(",", ""))
    except ValueError:
        return None
    # float() accepts "nan" and "inf"
    return value if math.isfinite(value) else None


def parse_weight(
    raw: Optional[str],
    *,
    column: str = "",
    row_number: int = 0,
) -> float:
    """Parse a weight cell; empty or unparseable cells become 0.0."""
    value = _parse_number(raw)
    if value is None:
        if raw is not None and raw.strip():
            logger.warning(
                "Row %d: unparseable %s %r coerced to 0",
                row_number,
                column or "weight",
                raw,
            )
        return 0.0
    return value


def parse_construction_amount(
    raw: Optional[str],
    *,
    row_number: int = 0,
) -> Optional[float]:
    """Parse a construction amount cell; empty or unparseable cells are absent."""
    value = _parse_number(raw)
    if value is None and raw is not None and raw.strip():
        logger.warning(
            "Row %d: unparseable construction_amount %r treated as absent",
            row_number,
            raw,
        )
    return value


class CsvRecordSource:
    """Record source reading branches, sites and waste records from CSV."""

    def __init__(
        self,
        data_dir: Path,
        *,
        branches_file: str = "branches.csv",
        sites_file: str = "sites.csv",
        waste_records_file: str = "waste-records.csv",
        encoding: str = "utf-8",
    ):
        self._data_dir = Path(data_dir)
        self._branches_path = self._data_dir / branches_file
        self._sites_path = self._data_dir / sites_file
        self._records_path = self._data_dir / waste_records_file
        self._encoding = encoding

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def load_branches(self) -> list[Branch]:
        return self._load(self._branches_path, Branch, self._branch_fields)

    def load_sites(self) -> list[Site]:
        return self._load(self._sites_path, Site, self._site_fields)

    def load_waste_records(self) -> list[WasteRecord]:
        return self._load(self._records_path, WasteRecord, self._record_fields)

    def get_branch_by_id(self, branch_id: str) -> Optional[Branch]:
        return next((b for b in self.load_branches() if b.id == branch_id), None)

    def get_branch_by_code(self, code: str) -> Optional[Branch]:
        return next((b for b in self.load_branches() if b.code == code), None)

    def get_site_by_id(self, site_id: str) -> Optional[Site]:
        return next((s for s in self.load_sites() if s.id == site_id), None)

    def get_site_by_code(self, code: str) -> Optional[Site]:
        return next((s for s in self.load_sites() if s.code == code), None)

    def _load(
        self,
        path: Path,
        model: type[ModelT],
        to_fields: Callable[[dict[str, str], int], dict[str, object]],
    ) -> list[ModelT]:
        items = []
        for row_number, row in self._read_rows(path):
            try:
                items.append(model(**to_fields(row, row_number)))
            except PydanticValidationError as e:
                raise MalformedRecordError(path, row_number, str(e)) from e

        logger.debug("Loaded %d rows from %s", len(items), path.name)
        return items

    def _read_rows(self, path: Path) -> Iterator[tuple[int, dict[str, str]]]:
        if not path.is_file():
            logger.error("Record file not found: %s", path)
            raise RecordSourceUnavailableError(path)

        with path.open(encoding=self._encoding, newline="") as f:
            reader = csv.DictReader(f)
            # Header is row 1
            for row_number, row in enumerate(reader, start=2):
                if not any((value or "").strip() for value in row.values()):
                    continue
                yield row_number, row

    @staticmethod
    def _branch_fields(row: dict[str, str], row_number: int) -> dict[str, object]:
        return {
            "id": row.get("id", ""),
            "code": row.get("code", ""),
            "name": row.get("name", ""),
            "region": row.get("region") or "",
        }

    @staticmethod
    def _site_fields(row: dict[str, str], row_number: int) -> dict[str, object]:
        fields: dict[str, object] = {
            "id": row.get("id", ""),
            "code": row.get("code", ""),
            "name": row.get("name", ""),
            "branch_id": row.get("branch_id", ""),
            "construction_type": row.get("construction_type") or "",
            "start_date": row.get("start_date"),
            "end_date": row.get("end_date"),
            "construction_amount": parse_construction_amount(
                row.get("construction_amount"),
                row_number=row_number,
            ),
        }
        if row.get("status"):
            fields["status"] = row["status"]
        return fields

    @staticmethod
    def _record_fields(row: dict[str, str], row_number: int) -> dict[str, object]:
        fields: dict[str, object] = {
            "site_code": row.get("site_code", ""),
            "year_month": row.get("year_month", ""),
            "waste_type": row.get("waste_type", ""),
        }
        for column in WEIGHT_COLUMNS:
            fields[column] = parse_weight(
                row.get(column),
                column=column,
                row_number=row_number,
            )
        return fields
