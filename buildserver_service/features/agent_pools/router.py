"""API router for the agent pools feature.

Endpoints:
    GET /agent-pools                          - List agent pools
    GET /agent-pools/{pool_id}                - Get an agent pool
    GET /agent-pools/{pool_id}/agents         - Agents of a pool
    GET /agent-pools/{pool_id}/projects       - Projects associated with a pool
    GET /agent-pools/{pool_id}/cloud-images   - Cloud images starting agents in a pool
    GET /agent-pools/{pool_id}/permissions    - Caller's permissions on a pool
    GET /agents                               - List agents

Cloud images are resolved through their provider; an image whose
provider fails is reported in ``errors`` while the rest of the page is
returned.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from buildserver_service.core.dependencies import ACL, OffsetPagination
from buildserver_service.core.pagination import PagedResponse, to_paged_response
from buildserver_service.features.agent_pools.schemas import (
    AgentPoolPermissionsResponse,
    AgentPoolResponse,
    AgentResponse,
    CloudImageResponse,
)
from buildserver_service.features.agent_pools.service import AgentPoolService
from buildserver_service.features.buildserver.dependencies import Registry
from buildserver_service.features.projects.schemas import ProjectResponse

router = APIRouter(prefix="/agent-pools", tags=["agent-pools"])
agents_router = APIRouter(prefix="/agents", tags=["agents"])
logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"description": "Agent pool not found"}}


@router.get(
    "",
    response_model=PagedResponse[AgentPoolResponse],
    summary="List agent pools",
)
async def list_agent_pools(
    registry: Registry,
    pagination: OffsetPagination,
) -> PagedResponse[AgentPoolResponse]:
    connection = AgentPoolService(registry).list_pools(pagination)
    return to_paged_response(connection.get_edges())


@router.get(
    "/{pool_id}",
    response_model=AgentPoolResponse,
    summary="Get an agent pool",
    responses=_NOT_FOUND,
)
async def get_agent_pool(pool_id: int, registry: Registry) -> AgentPoolResponse:
    return AgentPoolResponse.from_domain(AgentPoolService(registry).get_pool(pool_id))


@router.get(
    "/{pool_id}/agents",
    response_model=PagedResponse[AgentResponse],
    summary="List agents of an agent pool",
    responses=_NOT_FOUND,
)
async def list_pool_agents(
    pool_id: int,
    registry: Registry,
    pagination: OffsetPagination,
    authorized: bool | None = None,
) -> PagedResponse[AgentResponse]:
    connection = AgentPoolService(registry).agents(
        pool_id, authorized=authorized, pagination=pagination
    )
    return to_paged_response(connection.get_edges())


@router.get(
    "/{pool_id}/projects",
    response_model=PagedResponse[ProjectResponse],
    summary="List projects associated with an agent pool",
    responses=_NOT_FOUND,
)
async def list_pool_projects(
    pool_id: int,
    registry: Registry,
    pagination: OffsetPagination,
    archived: bool | None = None,
) -> PagedResponse[ProjectResponse]:
    connection = AgentPoolService(registry).projects(
        pool_id, archived=archived, pagination=pagination
    )
    return to_paged_response(connection.get_edges())


@router.get(
    "/{pool_id}/cloud-images",
    response_model=PagedResponse[CloudImageResponse],
    summary="List cloud images of an agent pool",
    responses=_NOT_FOUND,
)
async def list_pool_cloud_images(
    pool_id: int,
    registry: Registry,
    pagination: OffsetPagination,
) -> PagedResponse[CloudImageResponse]:
    service = AgentPoolService(registry)
    pool = service.get_pool(pool_id)
    result = service.cloud_images(pool.id, pagination).get_edges()
    if result.has_errors:
        logger.warning(
            "Cloud images page returned with unresolved images",
            extra={"pool_id": pool.id, "error_count": len(result.errors)},
        )
    return to_paged_response(result)


@router.get(
    "/{pool_id}/permissions",
    response_model=AgentPoolPermissionsResponse,
    summary="Get the caller's permissions on an agent pool",
    responses=_NOT_FOUND,
)
async def get_pool_permissions(
    pool_id: int,
    registry: Registry,
    acl: ACL,
) -> AgentPoolPermissionsResponse:
    return AgentPoolService(registry, acl).permissions(pool_id)


@agents_router.get(
    "",
    response_model=PagedResponse[AgentResponse],
    summary="List agents",
)
async def list_agents(
    registry: Registry,
    pagination: OffsetPagination,
    authorized: bool | None = None,
) -> PagedResponse[AgentResponse]:
    connection = AgentPoolService(registry).list_agents(authorized=authorized, pagination=pagination)
    return to_paged_response(connection.get_edges())
