"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from functools import lru_cache

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wastekpi import __version__
from wastekpi.presentation.api.exception_handlers import setup_exception_handlers
from wastekpi.presentation.api.routers import (
    kpi_router,
    organization_router,
    waste_flow_router,
)
from wastekpi_config import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the wastekpi application with:
    - Console output with timestamps and module names
    - Configurable log level for wastekpi modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("wastekpi").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "KPI",
        "description": """Waste KPIs per site, branch and company.

**KPIs:**
- `sorting_rate` - (total - mixed) / total, in %
- `real_recycling_rate` - (recycled + thermal recycled) / total, in %
- `final_disposal_rate` - final disposal / total, in %
- `waste_intensity` - tons per 100M JPY of construction (only with amount)

**Targets:** sorting 90 %, real recycling 85 %, final disposal 3 %,
waste intensity 50 t per 100M JPY.
""",
    },
    {
        "name": "Waste Flow",
        "description": """Sankey diagram data for waste treatment.

Nodes are addressed by index: total first, one node per waste type,
then `Recycled` and `Final disposal`.
""",
    },
    {
        "name": "Organization",
        "description": "Branches, sites and periods available for selection.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(kpi_router, prefix="/kpi", tags=["KPI"])
    v1_router.include_router(
        waste_flow_router,
        prefix="/waste-flow",
        tags=["Waste Flow"],
    )
    v1_router.include_router(
        organization_router,
        prefix="/organization",
        tags=["Organization"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "**Construction waste KPIs** (sorting, recycling, final disposal, "
            "intensity) per site, branch and company, with trends and "
            "waste flow diagrams."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status and version info.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "kpi": f"{API_V1_PREFIX}/kpi",
                "waste_flow": f"{API_V1_PREFIX}/waste-flow",
                "organization": f"{API_V1_PREFIX}/organization",
            },
        }

    logger.info(
        "Created %s API v%s (data: %s)",
        app_name,
        API_VERSION,
        settings.data_path,
    )
    return app


# Application instance for uvicorn
app = create_app()
