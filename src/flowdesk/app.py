"""Flowdesk FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from flowdesk.config import Settings
from flowdesk.editor import SettingsExporter
from flowdesk.routes import settings_router
from flowdesk.runtime import create_runtime

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings()

    runtime, theme = create_runtime(settings)
    settings_exporter = SettingsExporter(runtime, theme)

    if runtime.storage.projects is not None:
        logger.info("Projects enabled")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Flowdesk {settings.version} starting up")
        yield
        logger.info("Flowdesk shutting down")

    flowdesk_app = FastAPI(
        title="Flowdesk",
        description="Runtime settings service for the flow editor",
        version=settings.version,
        lifespan=lifespan,
    )

    # Store services in app.state for dependency injection
    flowdesk_app.state.settings = settings
    flowdesk_app.state.runtime = runtime
    flowdesk_app.state.settings_exporter = settings_exporter

    flowdesk_app.include_router(settings_router)

    return flowdesk_app
