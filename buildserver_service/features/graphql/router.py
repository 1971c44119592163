"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint (mounted at the configured path by app/router.py)
- Optional GraphQL IDE on GET
- Request context with the finder, the caller's ACL and the request id
"""

from __future__ import annotations

import logging
from typing import Any, cast

from fastapi import BackgroundTasks, Request, Response
from strawberry.fastapi import GraphQLRouter

from buildserver_service.core.dependencies import ACL
from buildserver_service.core.settings import get_graphql_settings
from buildserver_service.features.buildserver.dependencies import Registry
from buildserver_service.features.graphql.context import GraphQLContext
from buildserver_service.features.graphql.schema import schema

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    registry: Registry,
    acl: ACL,
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Args:
        request: FastAPI request
        response: FastAPI response
        background_tasks: FastAPI background tasks
        registry: Build server finder
        acl: Caller's ACL checker

    Returns:
        GraphQLContext for use in resolvers
    """
    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        registry=registry,
        acl=acl,
        request_id=getattr(request.state, "request_id", None),
    )


def create_graphql_router() -> GraphQLRouter:
    """Create GraphQL router with settings-based configuration.

    The router serves its own root; app/router.py mounts it under the
    configured path.
    """
    settings = get_graphql_settings()
    router: GraphQLRouter = GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
    )
    logger.debug("GraphQL router created", extra={"graphql_ide": settings.graphql_ide})
    return router


__all__ = ["create_graphql_router", "get_graphql_context"]
