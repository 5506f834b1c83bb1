"""Admin API mock routers package."""

from services.admin_api_service.routers.admin import router as admin_router
from services.admin_api_service.routers.graphql import router as graphql_router
from services.admin_api_service.routers.simulation import router as simulation_router

__all__ = [
    "admin_router",
    "graphql_router",
    "simulation_router",
]
