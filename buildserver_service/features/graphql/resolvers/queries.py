"""Query resolvers for the GraphQL API.

Provides read operations for the build server:
- agentPool(id): Get a single agent pool
- agentPools(first, after, ...): List agent pools with cursor pagination
- agents(filter, first, after, ...): List agents
- projects(filter, first, after, ...): List projects
- buildType(id): Get a build type
"""

from __future__ import annotations

import logging

import strawberry
from strawberry.types import Info

from buildserver_service.features.agent_pools.schemas import AgentPoolResponse
from buildserver_service.features.agent_pools.service import AgentPoolService
from buildserver_service.features.graphql.context import GraphQLContext
from buildserver_service.features.graphql.types.buildserver import (
    AgentConnectionType,
    AgentEdgeType,
    AgentPoolConnectionType,
    AgentPoolEdgeType,
    AgentPoolType,
    BuildTypeType,
    ProjectConnectionType,
    ProjectEdgeType,
    agent_node,
    agent_pool_node,
    project_node,
)
from buildserver_service.features.graphql.types.filters import AgentsFilter, ProjectsFilter
from buildserver_service.features.graphql.utils import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    build_connection,
    cursor_pagination,
)
from buildserver_service.features.projects.service import ProjectService

logger = logging.getLogger(__name__)


@strawberry.type(description="Root query type")
class Query:
    """GraphQL Query resolvers."""

    @strawberry.field(description="Get a single agent pool by id")
    def agent_pool(self, info: Info[GraphQLContext, None], id: int) -> AgentPoolType | None:
        """Get a single agent pool.

        Returns:
            AgentPoolType if found, None otherwise. The domain pool is kept
            as local context for the nested connections.
        """
        pool = info.context.registry.find_agent_pool(id)
        if pool is None:
            logger.debug("Agent pool not found", extra={"pool_id": id})
            return None
        return AgentPoolType.from_response(AgentPoolResponse.from_domain(pool), local_context=pool)

    @strawberry.field(description="List agent pools with cursor pagination")
    def agent_pools(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> AgentPoolConnectionType:
        connection = AgentPoolService(info.context.registry).list_pools(
            cursor_pagination(first, after, last, before)
        )
        return build_connection(
            AgentPoolConnectionType,
            AgentPoolEdgeType,
            connection.get_edges(),
            agent_pool_node,
            info,
        )

    @strawberry.field(description="List agents with cursor pagination")
    def agents(
        self,
        info: Info[GraphQLContext, None],
        filter: AgentsFilter | None = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> AgentConnectionType:
        connection = AgentPoolService(info.context.registry).list_agents(
            authorized=filter.authorized if filter else None,
            pagination=cursor_pagination(first, after, last, before),
        )
        return build_connection(
            AgentConnectionType, AgentEdgeType, connection.get_edges(), agent_node, info
        )

    @strawberry.field(description="List projects with cursor pagination")
    def projects(
        self,
        info: Info[GraphQLContext, None],
        filter: ProjectsFilter | None = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> ProjectConnectionType:
        connection = ProjectService(info.context.registry).list_projects(
            cursor_pagination(first, after, last, before),
            archived=filter.archived if filter else None,
        )
        return build_connection(
            ProjectConnectionType, ProjectEdgeType, connection.get_edges(), project_node, info
        )

    @strawberry.field(description="Get a build type by id")
    def build_type(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> BuildTypeType | None:
        build_type = info.context.registry.find_build_type(str(id))
        if build_type is None:
            return None
        return BuildTypeType.from_domain(build_type)


__all__ = ["Query"]
