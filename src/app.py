from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from api.handlers.exceptions import register_exception_handlers
from api.middleware.cors import register_cors_middleware
from api.routes import api_router, legacy_router
from api.routes.system import router as system_router
from core.config import settings
from core.logging import setup_logging
from db.database import close_engine, create_engine_from_config

# Initialize global logging configuration early
setup_logging(settings.logging, settings.database)
logger = logging.getLogger(__name__)


def _make_lifespan(engine: AsyncEngine | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting up %s", settings.api_title)

        # A supplied engine belongs to the caller; only a pool built here is disposed here
        owned = engine is None
        if owned:
            if not settings.database:
                raise RuntimeError("Database configuration not initialized")
            app.state.engine = create_engine_from_config(settings.database)
        else:
            app.state.engine = engine

        logger.info("Application startup completed")

        yield

        logger.info("Shutting down %s", settings.api_title)
        if owned:
            await close_engine(app.state.engine)
        logger.info("Application shutdown completed")

    return lifespan


def create_app(engine: AsyncEngine | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        debug=settings.debug,
        lifespan=_make_lifespan(engine),
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        openapi_url="/openapi.json" if settings.environment != "production" else None,
    )
    # Usable without running the lifespan (unit tests drive the app directly)
    app.state.engine = engine

    # Routers
    app.include_router(api_router)
    app.include_router(legacy_router)
    app.include_router(system_router)

    # Middlewares
    register_cors_middleware(app)

    # Exception handlers
    register_exception_handlers(app)

    return app
