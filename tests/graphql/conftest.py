"""GraphQL test fixtures.

Provides:
- GraphQL context over the demo registry
- Shared query documents
"""

from __future__ import annotations

import pytest

from buildserver_service.core.acl import ACLChecker
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.graphql.context import GraphQLContext


@pytest.fixture
def graphql_context(registry: BuildServerRegistry) -> GraphQLContext:
    """Context with full access to the demo registry."""
    return GraphQLContext(registry=registry, acl=ACLChecker(["#"]), request_id="test-request")


AGENT_POOLS_QUERY = """
    query AgentPools($first: Int, $after: String, $last: Int, $before: String) {
        agentPools(first: $first, after: $after, last: $last, before: $before) {
            edges {
                cursor
                node { id name agentCount projectCount }
            }
            pageInfo { hasPreviousPage hasNextPage startCursor endCursor totalCount }
            totalCount
        }
    }
"""

AGENT_POOL_QUERY = """
    query AgentPool($id: Int!, $authorized: Boolean, $archived: Boolean) {
        agentPool(id: $id) {
            id
            name
            agents(filter: {authorized: $authorized}) {
                edges { node { id name authorized enabled environment { osType } } }
                totalCount
            }
            projects(filter: {archived: $archived}) {
                edges { node { id name archived } }
            }
            permissions { authorizeAgents manageProjects enableAgents removeAgents }
        }
    }
"""

CLOUD_IMAGES_QUERY = """
    query CloudImages($id: Int!) {
        agentPool(id: $id) {
            name
            cloudImages {
                edges {
                    cursor
                    node {
                        id
                        name
                        runningInstances
                        profile { id name }
                        agentPool { id name }
                    }
                }
                pageInfo { hasNextPage totalCount }
                totalCount
            }
        }
    }
"""

BUILD_TYPE_QUERY = """
    query BuildType($id: ID!, $last: Int) {
        buildType(id: $id) {
            id
            name
            ancestorProjects(last: $last) {
                edges { node { id name parentId } }
                pageInfo { hasPreviousPage hasNextPage }
            }
        }
    }
"""
