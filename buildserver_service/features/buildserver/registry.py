"""In-memory finder over the build server's domain objects.

The registry is the candidate-producing collaborator of the API layer.
It answers lookups by id, materialized ordered collections (for
connections) and driveable item holders (for streaming finders). It
makes no pagination or authorization decisions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from buildserver_service.core.items import DuplicateChecker, ItemHolder, KeyDuplicateChecker
from buildserver_service.features.buildserver.models import (
    Agent,
    AgentPool,
    Build,
    BuildType,
    CloudImage,
    CloudProfile,
    Project,
)
from buildserver_service.infra.logging import get_lazy_logger

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class BuildServerRegistry:
    """Ordered, in-memory store of projects, agents, pools, clouds and builds.

    Collections are returned in insertion order, which is the stable
    order pagination relies on.

    Example:
        registry = BuildServerRegistry()
        registry.add_project(Project("_Root", "<Root project>"))
        registry.add_agent_pool(AgentPool(1, "Linux", agent_ids=(1, 2)))
        registry.find_agent_pool(1).name  # "Linux"
    """

    def __init__(self) -> None:
        self._projects: dict[str, Project] = {}
        self._build_types: dict[str, BuildType] = {}
        self._agent_pools: dict[int, AgentPool] = {}
        self._agents: dict[int, Agent] = {}
        self._cloud_profiles: dict[str, CloudProfile] = {}
        self._cloud_images: dict[str, list[CloudImage]] = {}
        self._builds: list[Build] = []

    # Registration

    def add_project(self, project: Project) -> Project:
        self._projects[project.id] = project
        return project

    def add_build_type(self, build_type: BuildType) -> BuildType:
        self._build_types[build_type.id] = build_type
        return build_type

    def add_agent_pool(self, pool: AgentPool) -> AgentPool:
        self._agent_pools[pool.id] = pool
        return pool

    def add_agent(self, agent: Agent) -> Agent:
        self._agents[agent.id] = agent
        return agent

    def add_cloud_profile(self, profile: CloudProfile, images: Iterable[CloudImage] = ()) -> CloudProfile:
        self._cloud_profiles[profile.id] = profile
        self._cloud_images[profile.id] = list(images)
        return profile

    def add_build(self, build: Build) -> Build:
        self._builds.append(build)
        return build

    # Lookups

    def find_project(self, project_id: str) -> Project | None:
        return self._projects.get(project_id)

    def find_projects(self, project_ids: Iterable[str]) -> list[Project]:
        """Projects for ``project_ids`` in the given order; unknown ids are skipped."""
        return [self._projects[pid] for pid in project_ids if pid in self._projects]

    def all_projects(self) -> list[Project]:
        return list(self._projects.values())

    def find_build_type(self, build_type_id: str) -> BuildType | None:
        return self._build_types.get(build_type_id)

    def find_agent_pool(self, pool_id: int) -> AgentPool | None:
        return self._agent_pools.get(pool_id)

    def all_agent_pools(self) -> list[AgentPool]:
        return list(self._agent_pools.values())

    def find_agent(self, agent_id: int) -> Agent | None:
        return self._agents.get(agent_id)

    def all_agents(self) -> list[Agent]:
        return list(self._agents.values())

    def find_cloud_profile(self, profile_id: str) -> CloudProfile | None:
        return self._cloud_profiles.get(profile_id)

    def list_cloud_profiles(self) -> list[CloudProfile]:
        return list(self._cloud_profiles.values())

    def get_images(self, profile: CloudProfile) -> list[CloudImage]:
        return list(self._cloud_images.get(profile.id, ()))

    def project_path(self, project_id: str) -> list[Project]:
        """Project chain from the root project down to ``project_id``.

        Returns an empty list for an unknown project. A parent reference
        pointing back into the chain ends the walk.
        """
        chain: list[Project] = []
        seen: set[str] = set()
        current = self._projects.get(project_id)
        while current is not None and current.id not in seen:
            seen.add(current.id)
            chain.append(current)
            current = self._projects.get(current.parent_id) if current.parent_id else None
        chain.reverse()
        return chain

    # Streaming

    def builds(self, build_type_id: str, branch: str | None = None) -> ItemHolder[Build]:
        """Builds of one build type, newest first, optionally of one branch.

        The holder scans lazily; a processor that stops early leaves the
        rest of the history unread.
        """

        def scan() -> Iterator[Build]:
            scanned = 0
            for build in reversed(self._builds):
                scanned += 1
                if build.build_type_id != build_type_id:
                    continue
                if branch is not None and build.branch != branch:
                    continue
                yield build
            lazy_logger.debug(lambda: f"build scan of {build_type_id} finished after {scanned} records")

        return ItemHolder.of(scan())

    def create_duplicate_checker(self) -> DuplicateChecker[Build]:
        """Fresh checker treating builds with the same id as duplicates."""
        return KeyDuplicateChecker(lambda build: build.id)


@lru_cache(maxsize=1)
def get_registry() -> BuildServerRegistry:
    """Process-wide registry, seeded with demo data on first use."""
    from buildserver_service.features.buildserver.demo import seed_demo_data

    registry = BuildServerRegistry()
    seed_demo_data(registry)
    logger.info(
        "Build server registry initialized",
        extra={
            "projects": len(registry.all_projects()),
            "agent_pools": len(registry.all_agent_pools()),
            "agents": len(registry.all_agents()),
        },
    )
    return registry


__all__ = ["BuildServerRegistry", "get_registry"]
