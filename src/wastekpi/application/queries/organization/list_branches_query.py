"""List branches query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wastekpi.application.ports import RecordSource
from wastekpi.domain.organization import Branch

if TYPE_CHECKING:
    from wastekpi.application.factories import SourceFactory


class ListBranchesQuery:
    def __init__(self, record_source: RecordSource):
        self._source = record_source

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> ListBranchesQuery:
        return cls(record_source=factory.record_source())

    def execute(self, include_company: bool = False) -> list[Branch]:
        branches = self._source.load_branches()
        if include_company:
            return branches
        return [branch for branch in branches if not branch.is_company]
