"""Record source port.

This is the *application* read-side contract for the reference data the
KPI engine consumes. Implementations perform their own I/O and hand over
fully typed rows: weights are always floats, never missing.
"""

from __future__ import annotations

from typing import Optional, Protocol

from wastekpi.domain.organization import Branch, Site
from wastekpi.domain.waste import WasteRecord


class RecordSource(Protocol):
    """Read-only access to branches, sites and waste records."""

    def load_branches(self) -> list[Branch]:
        """All branches, including the whole-company branch."""
        ...

    def load_sites(self) -> list[Site]:
        """All sites regardless of status."""
        ...

    def load_waste_records(self) -> list[WasteRecord]:
        """All monthly waste records."""
        ...

    def get_branch_by_id(self, branch_id: str) -> Optional[Branch]:
        ...

    def get_branch_by_code(self, code: str) -> Optional[Branch]:
        ...

    def get_site_by_id(self, site_id: str) -> Optional[Site]:
        ...

    def get_site_by_code(self, code: str) -> Optional[Site]:
        ...
