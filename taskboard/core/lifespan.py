"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: shared HTTP client for the
completion service, telemetry, SQL engine dispose. No business logic here.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from taskboard.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, telemetry (if enabled).
    Shutdown order: HTTP client close, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for completion calls (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.completion_timeout_seconds)

    if settings.telemetry_enabled:
        from taskboard.infrastructure.persistence.database import get_engine
        from taskboard.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig.from_settings(settings)
        if telemetry.start() is not None:
            set_telemetry(telemetry)
            telemetry.instrument(app, get_engine())
            logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Shared HTTP client closed")

    from taskboard.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        logger.info("Telemetry shutdown complete")

    from taskboard.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
    logger.info("Database engine disposed")
