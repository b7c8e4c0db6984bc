"""Unit tests for organization entities."""

from datetime import date

import pytest
from pydantic import ValidationError

from tests.shared.fixtures.factories import TestBranchFactory, TestSiteFactory
from wastekpi.domain.organization import (
    Branch,
    HierarchyLevel,
    Site,
    SiteNotFoundError,
    SiteStatus,
)
from wastekpi.domain.shared import ErrorCode


class TestBranch:
    def test_company_branch_is_flagged(self):
        assert TestBranchFactory.company().is_company
        assert not TestBranchFactory.tokyo().is_company

    def test_empty_code_is_rejected(self):
        with pytest.raises(ValidationError):
            Branch(id="B9", code="", name="Nowhere")


class TestSite:
    """Test site parsing rules."""

    def test_empty_csv_cells_become_none(self):
        site = Site(
            id="S9",
            code="SITE009",
            name="Depot",
            branch_id="B001",
            start_date="",
            end_date="",
            construction_amount="",
        )

        assert site.start_date is None
        assert site.end_date is None
        assert site.construction_amount is None

    def test_parses_dates_and_amount_from_strings(self):
        site = Site(
            id="S9",
            code="SITE009",
            name="Depot",
            branch_id="B001",
            start_date="2024-01-15",
            construction_amount="120.5",
        )

        assert site.start_date == date(2024, 1, 15)
        assert site.construction_amount == 120.5

    def test_status_is_case_insensitive(self):
        site = Site(
            id="S9",
            code="SITE009",
            name="Depot",
            branch_id="B001",
            status=" Completed ",
        )

        assert site.status == SiteStatus.COMPLETED
        assert not site.is_active

    def test_positive_construction_amount(self):
        assert TestSiteFactory.harbor_tower().positive_construction_amount == 100.0
        assert TestSiteFactory.riverside().positive_construction_amount is None
        assert TestSiteFactory.school_annex().positive_construction_amount is None

    def test_company_site_is_flagged(self):
        assert TestSiteFactory.company_site().is_company
        assert not TestSiteFactory.harbor_tower().is_company


class TestHierarchyLevel:
    def test_only_company_needs_no_target(self):
        assert HierarchyLevel.SITE.requires_target_id()
        assert HierarchyLevel.BRANCH.requires_target_id()
        assert not HierarchyLevel.COMPANY.requires_target_id()


class TestSiteNotFoundError:
    def test_carries_code_and_identifier(self):
        error = SiteNotFoundError(site_code="SITE404")

        assert error.code == ErrorCode.SITE_NOT_FOUND
        assert "SITE404" in error.message
