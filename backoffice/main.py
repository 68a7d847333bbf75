"""Al Aksha back office — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.adapters.persistence.database import create_schema, engine
from backoffice.config import settings
from backoffice.infrastructure.api.routes_billing import router as billing_router
from backoffice.infrastructure.api.routes_dashboard import router as dashboard_router
from backoffice.infrastructure.api.routes_exec import router as exec_router
from backoffice.infrastructure.api.routes_health import router as health_router
from backoffice.infrastructure.api.routes_records import router as records_router
from backoffice.infrastructure.api.routes_vessel_orders import router as vessel_orders_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        await create_schema()
        logger.info("Local store ready (%s)", settings.database_url)
    except Exception as e:
        logger.warning("Local store not available on startup: %s", e)
    logger.info("Storage mode: %s", settings.storage_mode)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Employees, guard duty, vessel orders, day labor, salary and invoicing",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fixed paths first; the generic /{entity} routes would shadow them
    app.include_router(health_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    app.include_router(exec_router, prefix="/api")
    app.include_router(vessel_orders_router, prefix="/api")
    app.include_router(billing_router, prefix="/api")
    app.include_router(records_router, prefix="/api")

    return app


app = create_app()
