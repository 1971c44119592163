"""Application lifespan management.

Startup: logging first, then the build server finder.
Shutdown: reverse order; the logging queue listener is flushed last.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from buildserver_service.core.settings import get_app_settings
from buildserver_service.features.buildserver.registry import get_registry
from buildserver_service.infra.logging import setup_logging, shutdown

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_app_settings()
    setup_logging()

    logger.info(
        "Starting application",
        extra={
            "service": settings.service_name,
            "version": settings.version,
            "environment": settings.environment,
        },
    )
    registry = get_registry()
    logger.info("Build server finder ready", extra={"agent_pools": len(registry.all_agent_pools())})

    yield

    logger.info("Shutting down application", extra={"service": settings.service_name})
    shutdown()


__all__ = ["lifespan"]
