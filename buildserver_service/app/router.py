"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from buildserver_service.core.settings import get_app_settings, get_graphql_settings
from buildserver_service.features.agent_pools.router import agents_router
from buildserver_service.features.agent_pools.router import router as agent_pools_router
from buildserver_service.features.builds.router import router as builds_router
from buildserver_service.features.graphql.router import create_graphql_router
from buildserver_service.features.projects.router import router as projects_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from buildserver_service.core.settings import AppSettings, GraphQLSettings

logger = logging.getLogger(__name__)


def setup_routers(
    app: FastAPI,
    app_settings: AppSettings | None = None,
    graphql_settings: GraphQLSettings | None = None,
) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        app_settings: Optional override for the REST prefix.
        graphql_settings: Optional override controlling GraphQL availability.
    """
    app_settings = app_settings or get_app_settings()
    graphql_settings = graphql_settings or get_graphql_settings()

    api_prefix = app_settings.api_prefix

    app.include_router(agent_pools_router, prefix=api_prefix)
    app.include_router(agents_router, prefix=api_prefix)
    app.include_router(projects_router, prefix=api_prefix)
    app.include_router(builds_router, prefix=api_prefix)

    if graphql_settings.enabled:
        app.include_router(create_graphql_router(), prefix=graphql_settings.path, tags=["graphql"])
        logger.info("GraphQL endpoint enabled at %s", graphql_settings.path)

    logger.info(
        "Router setup complete",
        extra={"api_prefix": api_prefix, "graphql_enabled": graphql_settings.enabled},
    )


__all__ = ["setup_routers"]
