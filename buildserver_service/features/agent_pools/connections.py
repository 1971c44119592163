"""Agent pool connections and edges."""

from __future__ import annotations

from buildserver_service.core.pagination import DelegatingConnection, LazyEdge
from buildserver_service.features.agent_pools.schemas import (
    AgentPoolResponse,
    AgentResponse,
    CloudImageResponse,
)
from buildserver_service.features.buildserver.models import Agent, AgentPool, CloudImage, CloudProfile

CloudImagePair = tuple[CloudProfile, CloudImage]


class AgentPoolEdge(LazyEdge[AgentPool, AgentPoolResponse]):
    """Edge over an agent pool.

    The local context is the domain pool, so nested fields (agents,
    projects, permissions) skip the second lookup by id.
    """

    def __init__(self, pool: AgentPool) -> None:
        super().__init__(pool, AgentPoolResponse.from_domain)


class AgentEdge(LazyEdge[Agent, AgentResponse]):
    def __init__(self, agent: Agent) -> None:
        super().__init__(agent, AgentResponse.from_domain)


class CloudImageEdge(LazyEdge[CloudImagePair, CloudImageResponse]):
    """Edge over a (profile, image) pair.

    Building the node queries the cloud provider; the local context is
    the image alone.
    """

    def __init__(self, pair: CloudImagePair) -> None:
        super().__init__(pair, _cloud_image_node, _cloud_image_context)


def _cloud_image_node(pair: CloudImagePair) -> CloudImageResponse:
    profile, image = pair
    return CloudImageResponse.from_domain(profile, image)


def _cloud_image_context(pair: CloudImagePair) -> CloudImage:
    return pair[1]


class AgentPoolsConnection(DelegatingConnection[AgentPoolResponse, AgentPoolEdge]):
    edge_type = AgentPoolEdge


class AgentsConnection(DelegatingConnection[AgentResponse, AgentEdge]):
    edge_type = AgentEdge


class AgentPoolAgentsConnection(DelegatingConnection[AgentResponse, AgentEdge]):
    """Agents assigned to an agent pool."""

    edge_type = AgentEdge


class AgentPoolCloudImagesConnection(DelegatingConnection[CloudImageResponse, CloudImageEdge]):
    """Cloud images starting agents in an agent pool."""

    edge_type = CloudImageEdge


__all__ = [
    "AgentEdge",
    "AgentPoolAgentsConnection",
    "AgentPoolCloudImagesConnection",
    "AgentPoolEdge",
    "AgentPoolsConnection",
    "AgentsConnection",
    "CloudImageEdge",
    "CloudImagePair",
]
