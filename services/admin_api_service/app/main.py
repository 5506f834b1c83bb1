"""FastAPI application for the Shop Admin API mock."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from libs.common.config import get_settings
from libs.common.logging import get_logger
from libs.common.middleware import add_observability_middleware
from libs.db.config import engine
from libs.db.session import create_all_tables
from services.admin_api_service import models  # noqa: F401  (register tables)
from services.admin_api_service.routers import (
    admin_router,
    graphql_router,
    simulation_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.DB_AUTO_CREATE:
        await create_all_tables(engine)
        logger.info("Database tables ensured")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the Shop Admin API mock FastAPI app."""
    settings = get_settings()
    app = FastAPI(
        title="Shop Admin API Mock",
        version="0.1.0",
        description=(
            "Stand-in for the platform's Admin GraphQL API: orders, order, "
            "productVariants, fulfillmentCreate and inventorySetQuantities."
        ),
        lifespan=lifespan,
    )

    # Add observability (structured logging + request tracing)
    add_observability_middleware(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": settings.SERVICE_NAME}

    app.include_router(graphql_router)
    app.include_router(admin_router)
    app.include_router(simulation_router)

    return app


app = create_app()
