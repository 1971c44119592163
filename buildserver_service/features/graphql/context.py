"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and carries:
- the build server finder
- the caller's ACL checker
- the per-edge errors collected while connections are resolved
- the request id (for log correlation)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from buildserver_service.core.acl import ACLChecker
from buildserver_service.features.buildserver.registry import BuildServerRegistry

if TYPE_CHECKING:
    from graphql import GraphQLError
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Example usage in resolver:
        @strawberry.field
        def agent_pool(self, info: Info[GraphQLContext, None], id: int) -> AgentPoolType | None:
            service = AgentPoolService(info.context.registry, info.context.acl)
            ...
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    registry: BuildServerRegistry = field(default_factory=BuildServerRegistry)
    acl: ACLChecker = field(default_factory=lambda: ACLChecker(()))
    request_id: str | None = None
    # Filled by connection resolvers, drained by PartialResultsExtension
    edge_errors: list[GraphQLError] = field(default_factory=list)


__all__ = ["GraphQLContext"]
