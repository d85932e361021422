"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer, bootstrap_services, shutdown_services
from .logging_config import configure_logging
from .settings import Settings, get_settings
from mvnlocal.modules.artifactfinder import artifactfinder_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    services = ServiceContainer(settings)

    @asynccontextmanager
    async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
        await bootstrap_services(services)
        try:
            yield
        finally:
            await shutdown_services(services)

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=_lifespan)
    app.include_router(health_router)
    app.include_router(artifactfinder_router)
    app.state.container = services

    return app
