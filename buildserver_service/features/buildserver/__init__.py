"""Build server domain model and finder."""

from __future__ import annotations

from .models import (
    Agent,
    AgentEnvironment,
    AgentPool,
    Build,
    BuildStatus,
    BuildType,
    CloudImage,
    CloudProfile,
    CloudProviderError,
    Project,
)
from .registry import BuildServerRegistry, get_registry

__all__ = [
    "Agent",
    "AgentEnvironment",
    "AgentPool",
    "Build",
    "BuildServerRegistry",
    "BuildStatus",
    "BuildType",
    "CloudImage",
    "CloudProfile",
    "CloudProviderError",
    "Project",
    "get_registry",
]
