"""Agent pools feature: pools, their agents, projects, cloud images and permissions."""

from __future__ import annotations

from .connections import (
    AgentEdge,
    AgentPoolAgentsConnection,
    AgentPoolCloudImagesConnection,
    AgentPoolEdge,
    AgentPoolsConnection,
    AgentsConnection,
    CloudImageEdge,
)
from .schemas import (
    AgentPoolPermissionsResponse,
    AgentPoolResponse,
    AgentResponse,
    CloudImageResponse,
    CloudProfileResponse,
)
from .service import AgentPoolService

__all__ = [
    "AgentEdge",
    "AgentPoolAgentsConnection",
    "AgentPoolCloudImagesConnection",
    "AgentPoolEdge",
    "AgentPoolPermissionsResponse",
    "AgentPoolResponse",
    "AgentPoolService",
    "AgentPoolsConnection",
    "AgentResponse",
    "AgentsConnection",
    "CloudImageEdge",
    "CloudImageResponse",
    "CloudProfileResponse",
]
