"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import include_api_routes
from src.config import settings
from src.services.produce_registry import ProduceRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    logger.info("Starting %s", settings.APP_NAME)
    yield
    logger.info(
        "Stopping %s with %d produce entries in memory",
        settings.APP_NAME,
        len(app.state.registry),
    )


def create_app(registry: ProduceRegistry | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        registry: Registry shared by every request. A fresh, empty one is
            created when omitted.
    """

    app = FastAPI(
        title=settings.APP_NAME,
        description="Concurrent in-memory produce registry",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.registry = registry if registry is not None else ProduceRegistry()

    _configure_cors(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow broad access in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
