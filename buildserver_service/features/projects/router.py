"""API router for the projects feature.

Endpoints:
    GET /projects                                 - List projects
    GET /build-types/{build_type_id}/ancestor-projects - Project chain of a build type
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from buildserver_service.core.dependencies import OffsetPagination
from buildserver_service.core.pagination import PagedResponse, to_paged_response
from buildserver_service.features.buildserver.dependencies import Registry
from buildserver_service.features.projects.schemas import ProjectResponse
from buildserver_service.features.projects.service import ProjectService

router = APIRouter(tags=["projects"])
logger = logging.getLogger(__name__)


@router.get(
    "/projects",
    response_model=PagedResponse[ProjectResponse],
    summary="List projects",
    description="Return projects in server order, paged with offset/count.",
)
async def list_projects(
    registry: Registry,
    pagination: OffsetPagination,
    archived: bool | None = None,
) -> PagedResponse[ProjectResponse]:
    connection = ProjectService(registry).list_projects(pagination, archived=archived)
    return to_paged_response(connection.get_edges())


@router.get(
    "/build-types/{build_type_id}/ancestor-projects",
    response_model=PagedResponse[ProjectResponse],
    summary="List ancestor projects of a build type",
    description=(
        "Return the project chain from the root project down to the build type's project. "
        "An unknown build type yields an empty page."
    ),
)
async def list_ancestor_projects(
    build_type_id: str,
    registry: Registry,
    pagination: OffsetPagination,
) -> PagedResponse[ProjectResponse]:
    connection = ProjectService(registry).ancestor_projects(build_type_id, pagination)
    return to_paged_response(connection.get_edges())
