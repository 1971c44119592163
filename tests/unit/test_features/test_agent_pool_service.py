"""Tests for the agent pool service and its connections."""

from __future__ import annotations

import pytest

from buildserver_service.core.acl import ACLChecker
from buildserver_service.core.exceptions import NotFoundException
from buildserver_service.core.pagination import PaginationArguments
from buildserver_service.features.agent_pools import (
    AgentPoolAgentsConnection,
    AgentPoolService,
    AgentsConnection,
    CloudImageEdge,
)
from buildserver_service.features.agent_pools.schemas import CloudImageResponse
from buildserver_service.features.buildserver.models import AgentPool, CloudProviderError
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.projects import AgentPoolProjectsConnection


@pytest.fixture
def service(registry: BuildServerRegistry) -> AgentPoolService:
    return AgentPoolService(registry)


class TestPools:
    def test_get_pool(self, service: AgentPoolService):
        assert service.get_pool(1).name == "Linux"

    def test_get_unknown_pool_raises(self, service: AgentPoolService):
        with pytest.raises(NotFoundException) as exc_info:
            service.get_pool(99)

        assert exc_info.value.type == "agent-pool-not-found"

    def test_list_pools(self, service: AgentPoolService):
        result = service.list_pools(PaginationArguments.offset_based(1, 5)).get_edges()

        assert [node.name for node in result.nodes] == ["Linux", "Windows"]
        assert result.total_count == 3

    def test_pool_edge_local_context_is_domain_pool(self, service: AgentPoolService):
        edge = service.list_pools().get_edges().edges[0]

        assert isinstance(edge.get_local_context(), AgentPool)
        assert edge.get_local_context().id == 0


class TestGetRealPoolSafe:
    def test_reuses_pool_from_local_context(self, empty_registry: BuildServerRegistry):
        pool = AgentPool(5, "Detached", agent_ids=(), project_ids=())

        # The registry does not know pool 5; the context pool is used as is
        assert AgentPoolService(empty_registry).get_real_pool_safe(5, pool) is pool

    def test_falls_back_to_finder(self, service: AgentPoolService):
        assert service.get_real_pool_safe(2, local_context="not a pool").name == "Windows"

    def test_unknown_pool_without_context_raises(self, service: AgentPoolService):
        with pytest.raises(NotFoundException):
            service.get_real_pool_safe(42)


class TestAgents:
    def test_pool_agents(self, service: AgentPoolService):
        result = service.agents(1).get_edges()

        assert [node.name for node in result.nodes] == ["linux-1", "linux-2", "linux-3"]

    @pytest.mark.parametrize(("authorized", "expected"), [(True, [3, 4]), (False, [5])])
    def test_authorized_filter(self, service: AgentPoolService, authorized, expected):
        result = service.agents(1, authorized=authorized).get_edges()

        assert [node.id for node in result.nodes] == expected

    def test_unknown_agent_ids_are_skipped(self, registry: BuildServerRegistry):
        pool = AgentPool(7, "Sparse", agent_ids=(1, 404, 6), project_ids=())

        result = AgentPoolService(registry).agents(7, local_context=pool).get_edges()

        assert [node.id for node in result.nodes] == [1, 6]
        assert result.errors == []

    def test_list_agents(self, service: AgentPoolService):
        result = service.list_agents(authorized=False).get_edges()

        assert [node.id for node in result.nodes] == [2, 5]

    @pytest.mark.parametrize("authorized", [None, True, False])
    def test_filtered_agents_keep_connection_type(self, service: AgentPoolService, authorized):
        assert type(service.agents(1, authorized=authorized)) is AgentPoolAgentsConnection
        assert type(service.list_agents(authorized=authorized)) is AgentsConnection


class TestProjects:
    def test_pool_projects(self, service: AgentPoolService):
        result = service.projects(1).get_edges()

        assert [node.id for node in result.nodes] == ["Backend", "Backend_Api", "Legacy"]

    def test_archived_filter(self, service: AgentPoolService):
        assert [node.id for node in service.projects(1, archived=True).get_edges().nodes] == ["Legacy"]
        assert [node.id for node in service.projects(1, archived=False).get_edges().nodes] == [
            "Backend",
            "Backend_Api",
        ]

    @pytest.mark.parametrize("archived", [None, True, False])
    def test_filtered_projects_keep_connection_type(self, service: AgentPoolService, archived):
        assert type(service.projects(1, archived=archived)) is AgentPoolProjectsConnection


class TestCloudImages:
    def test_failing_provider_fails_only_its_edge(self, service: AgentPoolService):
        result = service.cloud_images(1).get_edges()

        assert [node.id for node in result.nodes] == ["ami-linux"]
        assert result.nodes[0].running_instances == 2
        assert result.nodes[0].profile_name == "AWS EC2"
        assert len(result.errors) == 1
        assert result.errors[0].position == 1
        assert isinstance(result.errors[0].exception, CloudProviderError)
        assert result.total_count == 2

    def test_window_outside_failing_image_has_no_errors(self, service: AgentPoolService):
        result = service.cloud_images(1, PaginationArguments.offset_based(0, 1)).get_edges()

        assert len(result.edges) == 1
        assert result.errors == []

    def test_edge_local_context_is_image(self, registry: BuildServerRegistry):
        profile = registry.find_cloud_profile("gcp-1")
        image = registry.get_images(profile)[0]
        edge = CloudImageEdge((profile, image))

        assert edge.get_local_context() is image
        assert edge.get_node() is None
        # Local context stays available after the node failed
        assert edge.get_local_context() is image

    def test_node_reflects_provider_state(self, registry: BuildServerRegistry):
        profile = registry.find_cloud_profile("aws-1")
        image = registry.get_images(profile)[0]

        assert CloudImageResponse.from_domain(profile, image).agent_pool_id == 1

    def test_pool_without_images(self, service: AgentPoolService):
        assert service.cloud_images(0).get_edges().edges == []


class TestPermissions:
    def test_full_access(self, registry: BuildServerRegistry):
        permissions = AgentPoolService(registry, ACLChecker(["#"])).permissions(1)

        assert permissions.authorize_agents
        assert permissions.manage_projects
        assert permissions.enable_agents
        assert permissions.remove_agents

    def test_partial_access(self, registry: BuildServerRegistry):
        acl = ACLChecker(["agent_pools.1.#", "!agent_pools.1.manage_agents"])

        permissions = AgentPoolService(registry, acl).permissions(1)

        assert permissions.authorize_agents
        assert permissions.enable_agents
        assert permissions.manage_projects
        assert not permissions.remove_agents

    def test_no_acl_denies_everything(self, service: AgentPoolService):
        permissions = service.permissions(2)

        assert not any(permissions.model_dump().values())
