from wastekpi.presentation.api.routers.kpi import router as kpi_router
from wastekpi.presentation.api.routers.organization import (
    router as organization_router,
)
from wastekpi.presentation.api.routers.waste_flow import router as waste_flow_router

__all__ = [
    "kpi_router",
    "organization_router",
    "waste_flow_router",
]
