"""
app.py

Responsibility: Builds the FastAPI application, wires the shared resources
in its lifespan, and runs it under uvicorn.
Does NOT: contain probe logic, cache internals, or route handlers.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from config import Settings, load_settings
from logger import setup_logging
from routes.ip_routes import router as ip_router
from scheduler import create_scheduler
from services.address_cache import AddressCache
from services.ip_service import IpService
from services.refresh_service import RefreshService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Creates the cache, HTTP client and refresh scheduler on startup and
    tears them down on shutdown.

    The scheduler is started before uvicorn binds its socket, so the first
    probe is already in flight while the listener comes up.

    Args:
        app: The FastAPI application being started.

    Yields:
        None while the application is serving requests.
    """
    settings: Settings = app.state.settings

    app.state.address_cache = AddressCache()
    app.state.http_client = httpx.AsyncClient(timeout=settings.probe_timeout)

    ip_service = IpService(
        app.state.http_client,
        provider_url=settings.ip_provider_url,
        timeout=settings.probe_timeout,
    )
    refresh_service = RefreshService(ip_service, app.state.address_cache)
    app.state.scheduler = create_scheduler(refresh_service, settings.refresh_interval)
    app.state.scheduler.start()
    logger.info("Refreshing public IP from %s.", settings.ip_provider_url)

    try:
        yield
    finally:
        app.state.scheduler.shutdown(wait=False)
        await app.state.http_client.aclose()
        logger.info("Public IP service stopped.")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds a FastAPI application bound to the given settings.

    Also the uvicorn factory target: `uvicorn --factory app:create_app`.
    Settings are read when the app is built, not when this module is imported.

    Args:
        settings: Runtime settings; read from the environment when omitted.

    Returns:
        A FastAPI instance whose lifespan owns the refresh job.
    """
    application = FastAPI(title="Public IP", lifespan=lifespan)
    application.state.settings = settings or load_settings()
    application.include_router(ip_router)
    return application


def main(settings: Settings | None = None) -> None:
    """
    Entry point: configures logging and serves the app until the process exits.

    A failure to bind the listening socket makes uvicorn log the error and
    exit with a non-zero status.

    Args:
        settings: Runtime settings; read from the environment when omitted.

    Returns:
        None
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    logger.info("Server is running on port %d...", settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
