"""FastAPI dependency injection for the Waste KPI API.

Provides dependencies for:
- Application settings (per app instance)
- The source factory handing out record sources to queries
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from wastekpi.application.factories import SourceFactory
from wastekpi.infrastructure.persistence import CsvSourceFactory
from wastekpi_config import Settings, get_settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_source_factory(settings: AppSettings) -> SourceFactory:
    """
    Get the source factory for the current request.

    Each request gets a fresh factory; CSV files are re-read per query.
    """
    return CsvSourceFactory(settings)


SourceFactoryDep = Annotated[SourceFactory, Depends(get_source_factory)]


# -----------------------------------------------------------------------------
# Application Queries
# -----------------------------------------------------------------------------
# Application queries have from_factory() classmethods that encapsulate their
# dependency knowledge. Use them directly in routers:
#
#   def get_company_kpi(factory: SourceFactoryDep, ...):
#       query = CompanyKPIQuery.from_factory(factory)  # NOQA: ERA001
