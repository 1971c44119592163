"""Pydantic schemas for the agent pools feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from buildserver_service.features.buildserver.models import (
    Agent,
    AgentEnvironment,
    AgentPool,
    CloudImage,
    CloudProfile,
)


class AgentPoolResponse(BaseModel):
    """Representation of an agent pool returned from the API."""

    id: int = Field(description="Agent pool id")
    name: str = Field(description="Agent pool name")
    agent_count: int = Field(description="Number of agents assigned to the pool")
    project_count: int = Field(description="Number of projects associated with the pool")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, pool: AgentPool) -> AgentPoolResponse:
        return cls(
            id=pool.id,
            name=pool.name,
            agent_count=len(pool.agent_ids),
            project_count=len(pool.project_ids),
        )


class AgentEnvironmentResponse(BaseModel):
    os_name: str = Field(description="Operating system name")
    os_type: str = Field(description="Operating system family")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, environment: AgentEnvironment) -> AgentEnvironmentResponse:
        return cls(os_name=environment.os_name, os_type=environment.os_type)


class AgentResponse(BaseModel):
    """Representation of a build agent returned from the API."""

    id: int = Field(description="Agent id")
    name: str = Field(description="Agent name")
    pool_id: int = Field(description="Id of the pool the agent belongs to")
    authorized: bool = Field(description="Whether the agent is authorized")
    enabled: bool = Field(description="Whether the agent is enabled")
    environment: AgentEnvironmentResponse = Field(description="Operating system of the agent")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, agent: Agent) -> AgentResponse:
        return cls(
            id=agent.id,
            name=agent.name,
            pool_id=agent.pool_id,
            authorized=agent.authorized,
            enabled=agent.enabled,
            environment=AgentEnvironmentResponse.from_domain(agent.environment),
        )


class CloudProfileResponse(BaseModel):
    id: str = Field(description="Cloud profile id")
    name: str = Field(description="Cloud profile name")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, profile: CloudProfile) -> CloudProfileResponse:
        return cls(id=profile.id, name=profile.name)


class CloudImageResponse(BaseModel):
    """Cloud image as seen through its provider."""

    id: str = Field(description="Cloud image id")
    name: str = Field(description="Cloud image name")
    profile_id: str = Field(description="Id of the owning cloud profile")
    profile_name: str = Field(description="Name of the owning cloud profile")
    agent_pool_id: int | None = Field(default=None, description="Pool of the agents the image starts")
    running_instances: int = Field(description="Instances currently running, as reported by the provider")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, profile: CloudProfile, image: CloudImage) -> CloudImageResponse:
        """Build the response, querying the provider for live state.

        Raises:
            CloudProviderError: If the provider fails for this image.
        """
        return cls(
            id=image.id,
            name=image.name,
            profile_id=profile.id,
            profile_name=profile.name,
            agent_pool_id=image.agent_pool_id,
            running_instances=image.query_running_instances(),
        )


class AgentPoolPermissionsResponse(BaseModel):
    """Actions the caller may perform on an agent pool."""

    authorize_agents: bool = Field(description="May authorize and unauthorize agents of the pool")
    manage_projects: bool = Field(description="May change project associations of the pool")
    enable_agents: bool = Field(description="May enable and disable agents of the pool")
    remove_agents: bool = Field(description="May move agents out of the pool")

    model_config = ConfigDict(frozen=True)
