"""GraphQL types for the build server graph.

Node types are built from the REST response schemas. Types that nest
connections keep the domain object their edge was resolved from in a
private ``local_context`` field, so nested resolvers do not look the same
object up again.
"""

from __future__ import annotations

import strawberry
from strawberry.types import Info

from buildserver_service.core.pagination import LazyEdge
from buildserver_service.features.agent_pools.schemas import (
    AgentPoolPermissionsResponse,
    AgentPoolResponse,
    AgentResponse,
    CloudImageResponse,
)
from buildserver_service.features.agent_pools.service import AgentPoolService
from buildserver_service.features.buildserver.models import AgentPool, BuildType, CloudImage
from buildserver_service.features.graphql.context import GraphQLContext
from buildserver_service.features.graphql.types.base import PageInfoType
from buildserver_service.features.graphql.types.filters import AgentsFilter, ProjectsFilter
from buildserver_service.features.graphql.utils import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    build_connection,
    cursor_pagination,
)
from buildserver_service.features.projects.schemas import ProjectResponse
from buildserver_service.features.projects.service import ProjectService

# ============================================================================
# Projects
# ============================================================================


@strawberry.type(name="Project", description="A project of the build server")
class ProjectType:
    id: strawberry.ID
    name: str
    parent_id: strawberry.ID | None = None
    archived: bool = False

    @classmethod
    def from_response(cls, project: ProjectResponse) -> ProjectType:
        return cls(
            id=strawberry.ID(project.id),
            name=project.name,
            parent_id=strawberry.ID(project.parent_id) if project.parent_id else None,
            archived=project.archived,
        )


@strawberry.type(name="ProjectEdge")
class ProjectEdgeType:
    node: ProjectType
    cursor: str


@strawberry.type(name="ProjectConnection", description="Paginated projects")
class ProjectConnectionType:
    edges: list[ProjectEdgeType]
    page_info: PageInfoType
    total_count: int


def project_node(edge: LazyEdge[object, ProjectResponse]) -> ProjectType:
    return ProjectType.from_response(edge.get_node())


# ============================================================================
# Agents
# ============================================================================


@strawberry.type(name="AgentEnvironment")
class AgentEnvironmentType:
    os_name: str
    os_type: str


@strawberry.type(name="Agent", description="A build agent")
class AgentType:
    id: int
    name: str
    pool_id: int
    authorized: bool
    enabled: bool
    environment: AgentEnvironmentType

    @classmethod
    def from_response(cls, agent: AgentResponse) -> AgentType:
        return cls(
            id=agent.id,
            name=agent.name,
            pool_id=agent.pool_id,
            authorized=agent.authorized,
            enabled=agent.enabled,
            environment=AgentEnvironmentType(
                os_name=agent.environment.os_name,
                os_type=agent.environment.os_type,
            ),
        )


@strawberry.type(name="AgentEdge")
class AgentEdgeType:
    node: AgentType
    cursor: str


@strawberry.type(name="AgentConnection", description="Paginated agents")
class AgentConnectionType:
    edges: list[AgentEdgeType]
    page_info: PageInfoType
    total_count: int


def agent_node(edge: LazyEdge[object, AgentResponse]) -> AgentType:
    return AgentType.from_response(edge.get_node())


# ============================================================================
# Cloud images
# ============================================================================


@strawberry.type(name="CloudProfile")
class CloudProfileType:
    id: strawberry.ID
    name: str


@strawberry.type(name="CloudImage", description="A cloud image starting build agents")
class CloudImageType:
    id: strawberry.ID
    name: str
    running_instances: int
    profile: CloudProfileType
    agent_pool_id: strawberry.Private[int | None] = None
    local_context: strawberry.Private[CloudImage | None] = None

    @classmethod
    def from_response(
        cls,
        image: CloudImageResponse,
        local_context: CloudImage | None = None,
    ) -> CloudImageType:
        return cls(
            id=strawberry.ID(image.id),
            name=image.name,
            running_instances=image.running_instances,
            profile=CloudProfileType(id=strawberry.ID(image.profile_id), name=image.profile_name),
            agent_pool_id=image.agent_pool_id,
            local_context=local_context,
        )

    @strawberry.field(description="Pool of the agents started from this image")
    def agent_pool(self, info: Info[GraphQLContext, None]) -> AgentPoolType | None:
        pool_id = self.local_context.agent_pool_id if self.local_context else self.agent_pool_id
        if pool_id is None:
            return None
        pool = info.context.registry.find_agent_pool(pool_id)
        if pool is None:
            return None
        return AgentPoolType.from_response(AgentPoolResponse.from_domain(pool), local_context=pool)


@strawberry.type(name="CloudImageEdge")
class CloudImageEdgeType:
    node: CloudImageType
    cursor: str


@strawberry.type(name="CloudImageConnection", description="Paginated cloud images")
class CloudImageConnectionType:
    edges: list[CloudImageEdgeType]
    page_info: PageInfoType
    total_count: int


def cloud_image_node(edge: LazyEdge[object, CloudImageResponse]) -> CloudImageType:
    return CloudImageType.from_response(edge.get_node(), local_context=edge.get_local_context())


# ============================================================================
# Agent pools
# ============================================================================


@strawberry.type(name="AgentPoolPermissions", description="Caller's permissions on an agent pool")
class AgentPoolPermissionsType:
    authorize_agents: bool
    manage_projects: bool
    enable_agents: bool
    remove_agents: bool

    @classmethod
    def from_response(cls, permissions: AgentPoolPermissionsResponse) -> AgentPoolPermissionsType:
        return cls(
            authorize_agents=permissions.authorize_agents,
            manage_projects=permissions.manage_projects,
            enable_agents=permissions.enable_agents,
            remove_agents=permissions.remove_agents,
        )


@strawberry.type(name="AgentPool", description="A pool of build agents")
class AgentPoolType:
    id: int
    name: str
    agent_count: int
    project_count: int
    local_context: strawberry.Private[AgentPool | None] = None

    @classmethod
    def from_response(
        cls,
        pool: AgentPoolResponse,
        local_context: AgentPool | None = None,
    ) -> AgentPoolType:
        return cls(
            id=pool.id,
            name=pool.name,
            agent_count=pool.agent_count,
            project_count=pool.project_count,
            local_context=local_context,
        )

    @strawberry.field(description="Agents assigned to the pool")
    def agents(
        self,
        info: Info[GraphQLContext, None],
        filter: AgentsFilter | None = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> AgentConnectionType:
        service = AgentPoolService(info.context.registry, info.context.acl)
        connection = service.agents(
            self.id,
            authorized=filter.authorized if filter else None,
            pagination=cursor_pagination(first, after, last, before),
            local_context=self.local_context,
        )
        return build_connection(
            AgentConnectionType, AgentEdgeType, connection.get_edges(), agent_node, info
        )

    @strawberry.field(description="Projects associated with the pool")
    def projects(
        self,
        info: Info[GraphQLContext, None],
        filter: ProjectsFilter | None = None,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> ProjectConnectionType:
        service = AgentPoolService(info.context.registry, info.context.acl)
        connection = service.projects(
            self.id,
            archived=filter.archived if filter else None,
            pagination=cursor_pagination(first, after, last, before),
            local_context=self.local_context,
        )
        return build_connection(
            ProjectConnectionType, ProjectEdgeType, connection.get_edges(), project_node, info
        )

    @strawberry.field(description="Cloud images starting agents in the pool")
    def cloud_images(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> CloudImageConnectionType:
        service = AgentPoolService(info.context.registry, info.context.acl)
        connection = service.cloud_images(self.id, cursor_pagination(first, after, last, before))
        return build_connection(
            CloudImageConnectionType,
            CloudImageEdgeType,
            connection.get_edges(),
            cloud_image_node,
            info,
        )

    @strawberry.field(description="Actions the caller may perform on the pool")
    def permissions(self, info: Info[GraphQLContext, None]) -> AgentPoolPermissionsType:
        service = AgentPoolService(info.context.registry, info.context.acl)
        return AgentPoolPermissionsType.from_response(
            service.permissions(self.id, local_context=self.local_context)
        )


@strawberry.type(name="AgentPoolEdge")
class AgentPoolEdgeType:
    node: AgentPoolType
    cursor: str


@strawberry.type(name="AgentPoolConnection", description="Paginated agent pools")
class AgentPoolConnectionType:
    edges: list[AgentPoolEdgeType]
    page_info: PageInfoType
    total_count: int


def agent_pool_node(edge: LazyEdge[AgentPool, AgentPoolResponse]) -> AgentPoolType:
    return AgentPoolType.from_response(edge.get_node(), local_context=edge.get_local_context())


# ============================================================================
# Build types
# ============================================================================


@strawberry.type(name="BuildType", description="A build configuration")
class BuildTypeType:
    id: strawberry.ID
    name: str
    project_id: strawberry.ID

    @classmethod
    def from_domain(cls, build_type: BuildType) -> BuildTypeType:
        return cls(
            id=strawberry.ID(build_type.id),
            name=build_type.name,
            project_id=strawberry.ID(build_type.project_id),
        )

    @strawberry.field(description="Projects from the root down to the build type's project")
    def ancestor_projects(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> ProjectConnectionType:
        connection = ProjectService(info.context.registry).ancestor_projects(
            str(self.id), cursor_pagination(first, after, last, before)
        )
        return build_connection(
            ProjectConnectionType, ProjectEdgeType, connection.get_edges(), project_node, info
        )


__all__ = [
    "AgentConnectionType",
    "AgentEdgeType",
    "AgentEnvironmentType",
    "AgentPoolConnectionType",
    "AgentPoolEdgeType",
    "AgentPoolPermissionsType",
    "AgentPoolType",
    "AgentType",
    "BuildTypeType",
    "CloudImageConnectionType",
    "CloudImageEdgeType",
    "CloudImageType",
    "CloudProfileType",
    "ProjectConnectionType",
    "ProjectEdgeType",
    "ProjectType",
    "agent_node",
    "agent_pool_node",
    "cloud_image_node",
    "project_node",
]
