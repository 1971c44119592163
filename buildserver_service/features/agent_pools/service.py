"""Service layer for the agent pools feature.

Builds the connections nested under an agent pool. Each method receives
the pool id plus, optionally, the local context of the edge the pool was
resolved from; when that context already holds the domain pool it is
reused instead of being looked up again.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from buildserver_service.core.acl import ACLChecker
from buildserver_service.core.exceptions import NotFoundException
from buildserver_service.core.pagination import DelegatingConnection, PaginationArguments
from buildserver_service.features.agent_pools import permissions
from buildserver_service.features.agent_pools.connections import (
    AgentPoolAgentsConnection,
    AgentPoolCloudImagesConnection,
    AgentPoolsConnection,
    AgentsConnection,
)
from buildserver_service.features.agent_pools.schemas import AgentPoolPermissionsResponse
from buildserver_service.features.buildserver.models import AgentPool
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.projects.connections import AgentPoolProjectsConnection
from buildserver_service.infra.logging import get_lazy_logger

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

C = TypeVar("C", bound=DelegatingConnection)


class AgentPoolService:
    """Agent pool lookups and the connections nested under a pool.

    Args:
        registry: Finder producing the candidate collections.
        acl: Caller's ACL, consulted by ``permissions`` only.
    """

    def __init__(self, registry: BuildServerRegistry, acl: ACLChecker | None = None) -> None:
        self._registry = registry
        self._acl = acl or ACLChecker(())

    def get_pool(self, pool_id: int) -> AgentPool:
        pool = self._registry.find_agent_pool(pool_id)
        if pool is None:
            raise NotFoundException(
                detail=f"Agent pool {pool_id} not found",
                type="agent-pool-not-found",
                extra={"pool_id": pool_id},
            )
        return pool

    def get_real_pool_safe(self, pool_id: int, local_context: Any = None) -> AgentPool:
        """Return the domain pool, preferring the one in ``local_context``.

        Raises:
            NotFoundException: If the context holds no pool and the finder
                does not know ``pool_id``.
        """
        if isinstance(local_context, AgentPool):
            return local_context
        lazy_logger.debug(lambda: f"agent pool {pool_id} not in local context, looking it up")
        return self.get_pool(pool_id)

    def list_pools(self, pagination: PaginationArguments | None = None) -> AgentPoolsConnection:
        return AgentPoolsConnection(self._registry.all_agent_pools(), pagination)

    def list_agents(
        self,
        *,
        authorized: bool | None = None,
        pagination: PaginationArguments | None = None,
    ) -> AgentsConnection:
        return _by_authorized(AgentsConnection(self._registry.all_agents(), pagination), authorized)

    def agents(
        self,
        pool_id: int,
        *,
        authorized: bool | None = None,
        pagination: PaginationArguments | None = None,
        local_context: Any = None,
    ) -> AgentPoolAgentsConnection:
        """Agents of the pool, skipping ids the finder does not know."""
        pool = self.get_real_pool_safe(pool_id, local_context)
        agents = [
            agent
            for agent in (self._registry.find_agent(agent_id) for agent_id in pool.agent_ids)
            if agent is not None
        ]
        if len(agents) < len(pool.agent_ids):
            logger.info(
                "Agent pool references unknown agents",
                extra={"pool_id": pool.id, "missing": len(pool.agent_ids) - len(agents)},
            )
        return _by_authorized(AgentPoolAgentsConnection(agents, pagination), authorized)

    def projects(
        self,
        pool_id: int,
        *,
        archived: bool | None = None,
        pagination: PaginationArguments | None = None,
        local_context: Any = None,
    ) -> AgentPoolProjectsConnection:
        pool = self.get_real_pool_safe(pool_id, local_context)
        connection = AgentPoolProjectsConnection(self._registry.find_projects(pool.project_ids), pagination)
        if archived is None:
            return connection
        return connection.narrowed(lambda project: project.archived == archived)

    def cloud_images(
        self,
        pool_id: int,
        pagination: PaginationArguments | None = None,
    ) -> AgentPoolCloudImagesConnection:
        """Images of all cloud profiles that start agents in the pool.

        Only the candidate pairs are collected here; provider queries run
        when the page's edges are resolved.
        """
        pairs = [
            (profile, image)
            for profile in self._registry.list_cloud_profiles()
            for image in self._registry.get_images(profile)
            if image.agent_pool_id == pool_id
        ]
        lazy_logger.debug(lambda: f"agent pool {pool_id}: {len(pairs)} cloud image candidates")
        return AgentPoolCloudImagesConnection(pairs, pagination)

    def permissions(self, pool_id: int, local_context: Any = None) -> AgentPoolPermissionsResponse:
        pool = self.get_real_pool_safe(pool_id, local_context)
        return AgentPoolPermissionsResponse(
            authorize_agents=self._acl.has_acl(permissions.authorize_agents(pool.id)),
            manage_projects=self._acl.has_acl(permissions.manage_projects(pool.id)),
            enable_agents=self._acl.has_acl(permissions.enable_agents(pool.id)),
            remove_agents=self._acl.has_acl(permissions.manage_agents(pool.id)),
        )


def _by_authorized(connection: C, authorized: bool | None) -> C:
    if authorized is None:
        return connection
    return connection.narrowed(lambda agent: agent.authorized == authorized)


__all__ = ["AgentPoolService"]
