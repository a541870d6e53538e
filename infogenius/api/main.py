"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, infogenius.api.routers, infogenius.observability, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infogenius.api.deps.dependencies import get_service_cache
from infogenius.configs import get_settings
from infogenius.observability.logger import configure_logging
from infogenius.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    context_router,
    credentials_router,
    health_router,
    history_router,
    infographics_router,
    storage_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    # Startup: load persisted history once
    logger.info("Loading infographic controller...")
    cache = get_service_cache()
    service = cache.infographic_service
    logger.info(f"Controller ready with {len(service.state.history)} archived images")

    yield

    # Shutdown
    await cache.aclose()
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="InfoGenius API",
        description="Search-grounded infographic generation with Gemini and optional GCS backup",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (correlation outermost so request logs carry the ID)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(infographics_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")
    app.include_router(context_router, prefix="/api/v1")
    app.include_router(storage_router, prefix="/api/v1")
    app.include_router(credentials_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "infogenius.api.main:app",
        host=settings.host,
        port=settings.port,
    )
