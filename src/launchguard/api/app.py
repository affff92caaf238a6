"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from launchguard.api.routes import detection, health, protection, security
from launchguard.config.logging import configure_logging
from launchguard.config.settings import get_settings
from launchguard.core.dependencies import LaunchGuard, build_launch_guard

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    log.info("application_starting")
    configure_logging(app.state.launch_guard.settings)
    log.info("application_started")

    yield

    # Shutdown
    log.info("application_stopping")
    await app.state.launch_guard.close()
    log.info("application_stopped")


def create_app(guard: LaunchGuard | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        guard: Engine instance to serve (built from settings when omitted)
    """
    settings = guard.settings if guard is not None else get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Launch protection and token risk scoring for Solana tokens",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.launch_guard = guard or build_launch_guard(settings)

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(health.router)
    app.include_router(protection.router, prefix="/api")
    app.include_router(detection.router, prefix="/api")
    app.include_router(security.router, prefix="/api")

    return app
