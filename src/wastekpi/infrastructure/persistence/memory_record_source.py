"""In-memory record source for embedding and tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from wastekpi.domain.organization import Branch, Site
from wastekpi.domain.waste import WasteRecord


class InMemoryRecordSource:
    """Record source over already constructed domain objects."""

    def __init__(
        self,
        branches: Iterable[Branch] = (),
        sites: Iterable[Site] = (),
        records: Iterable[WasteRecord] = (),
    ):
        self._branches = list(branches)
        self._sites = list(sites)
        self._records = list(records)

    def load_branches(self) -> list[Branch]:
        return list(self._branches)

    def load_sites(self) -> list[Site]:
        return list(self._sites)

    def load_waste_records(self) -> list[WasteRecord]:
        return list(self._records)

    def get_branch_by_id(self, branch_id: str) -> Optional[Branch]:
        return next((b for b in self._branches if b.id == branch_id), None)

    def get_branch_by_code(self, code: str) -> Optional[Branch]:
        return next((b for b in self._branches if b.code == code), None)

    def get_site_by_id(self, site_id: str) -> Optional[Site]:
        return next((s for s in self._sites if s.id == site_id), None)

    def get_site_by_code(self, code: str) -> Optional[Site]:
        return next((s for s in self._sites if s.code == code), None)
