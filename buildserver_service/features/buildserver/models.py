"""Domain model of the build server.

Plain immutable records as handed out by the server's finders. They are
hashable, so they can be deduplicated by their own equality as well as
by a derived key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class CloudProviderError(Exception):
    """A cloud provider failed to answer a live query."""


class BuildStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    parent_id: str | None = None
    archived: bool = False


@dataclass(frozen=True)
class BuildType:
    id: str
    name: str
    project_id: str


@dataclass(frozen=True)
class AgentPool:
    """Agent pool with the ids of its agents and associated projects."""

    id: int
    name: str
    agent_ids: tuple[int, ...] = ()
    project_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class AgentEnvironment:
    """Operating system an agent runs on."""

    os_name: str
    os_type: str

    UNKNOWN: ClassVar[AgentEnvironment]


AgentEnvironment.UNKNOWN = AgentEnvironment(os_name="<unknown>", os_type="Unknown")


@dataclass(frozen=True)
class Agent:
    id: int
    name: str
    pool_id: int
    authorized: bool = True
    enabled: bool = True
    environment: AgentEnvironment = AgentEnvironment.UNKNOWN


@dataclass(frozen=True)
class CloudProfile:
    id: str
    name: str


@dataclass(frozen=True)
class CloudImage:
    """Image of a cloud profile that starts agents in ``agent_pool_id``.

    ``error`` is the provider failure of the last live query, if any.
    """

    id: str
    name: str
    profile_id: str
    agent_pool_id: int | None = None
    running_instances: int = 0
    error: str | None = field(default=None, compare=False)

    def query_running_instances(self) -> int:
        """Ask the cloud provider for the number of running instances.

        Raises:
            CloudProviderError: If the provider reports an error for the image.
        """
        if self.error is not None:
            msg = f"Cloud provider failed for image {self.id}: {self.error}"
            raise CloudProviderError(msg)
        return self.running_instances


@dataclass(frozen=True)
class Build:
    id: int
    build_type_id: str
    number: str
    branch: str = "<default>"
    status: BuildStatus = BuildStatus.SUCCESS


__all__ = [
    "Agent",
    "AgentEnvironment",
    "AgentPool",
    "Build",
    "BuildStatus",
    "BuildType",
    "CloudImage",
    "CloudProfile",
    "CloudProviderError",
    "Project",
]
