"""Demo content for a freshly started server."""

from __future__ import annotations

from buildserver_service.features.buildserver.models import (
    Agent,
    AgentEnvironment,
    AgentPool,
    Build,
    BuildStatus,
    BuildType,
    CloudImage,
    CloudProfile,
    Project,
)
from buildserver_service.features.buildserver.registry import BuildServerRegistry

LINUX = AgentEnvironment(os_name="Ubuntu 24.04", os_type="Linux")
WINDOWS = AgentEnvironment(os_name="Windows Server 2022", os_type="Windows")


def seed_demo_data(registry: BuildServerRegistry) -> BuildServerRegistry:
    """Populate ``registry`` with a small but complete server layout."""
    registry.add_project(Project("_Root", "<Root project>"))
    registry.add_project(Project("Backend", "Backend", parent_id="_Root"))
    registry.add_project(Project("Backend_Api", "API", parent_id="Backend"))
    registry.add_project(Project("Frontend", "Frontend", parent_id="_Root"))
    registry.add_project(Project("Legacy", "Legacy", parent_id="_Root", archived=True))

    registry.add_build_type(BuildType("Backend_Api_Build", "Build", "Backend_Api"))
    registry.add_build_type(BuildType("Backend_Api_Test", "Test", "Backend_Api"))
    registry.add_build_type(BuildType("Frontend_Build", "Build", "Frontend"))

    registry.add_agent_pool(AgentPool(0, "Default", agent_ids=(1, 2), project_ids=("_Root",)))
    registry.add_agent_pool(
        AgentPool(1, "Linux", agent_ids=(3, 4, 5), project_ids=("Backend", "Backend_Api", "Legacy"))
    )
    registry.add_agent_pool(AgentPool(2, "Windows", agent_ids=(6,), project_ids=("Frontend",)))

    registry.add_agent(Agent(1, "default-1", pool_id=0, environment=LINUX))
    registry.add_agent(Agent(2, "default-2", pool_id=0, authorized=False))
    registry.add_agent(Agent(3, "linux-1", pool_id=1, environment=LINUX))
    registry.add_agent(Agent(4, "linux-2", pool_id=1, environment=LINUX, enabled=False))
    registry.add_agent(Agent(5, "linux-3", pool_id=1, authorized=False, environment=LINUX))
    registry.add_agent(Agent(6, "windows-1", pool_id=2, environment=WINDOWS))

    registry.add_cloud_profile(
        CloudProfile("aws-1", "AWS EC2"),
        [
            CloudImage("ami-linux", "Linux builder", "aws-1", agent_pool_id=1, running_instances=2),
            CloudImage("ami-windows", "Windows builder", "aws-1", agent_pool_id=2),
        ],
    )
    registry.add_cloud_profile(
        CloudProfile("gcp-1", "Google Compute"),
        [
            CloudImage("gce-linux", "Linux spot", "gcp-1", agent_pool_id=1, error="quota exceeded"),
        ],
    )

    build_id = 0
    for build_type_id in ("Backend_Api_Build", "Backend_Api_Test", "Frontend_Build"):
        for number in range(1, 6):
            build_id += 1
            registry.add_build(
                Build(
                    build_id,
                    build_type_id,
                    str(number),
                    branch="main" if number % 2 else "feature",
                    status=BuildStatus.FAILURE if number == 3 else BuildStatus.SUCCESS,
                )
            )
    return registry


__all__ = ["seed_demo_data"]
