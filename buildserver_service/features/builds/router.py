"""API router for the builds feature.

Endpoints:
    GET /builds - Search builds of one or more build types
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from buildserver_service.core.dependencies import LookupLimit
from buildserver_service.core.settings import get_pagination_settings
from buildserver_service.features.buildserver.dependencies import Registry
from buildserver_service.features.buildserver.models import BuildStatus
from buildserver_service.features.builds.schemas import BuildsPage
from buildserver_service.features.builds.service import BuildService

router = APIRouter(prefix="/builds", tags=["builds"])

ANY_BRANCH = "*"


@router.get(
    "",
    response_model=BuildsPage,
    summary="Search builds",
    description=(
        "Return builds of the given build types (and branches), newest first, "
        "each build at most once."
    ),
)
async def search_builds(
    registry: Registry,
    lookup_limit: LookupLimit,
    build_type: Annotated[list[str], Query(min_length=1, description="Build type ids")],
    branch: Annotated[list[str] | None, Query(description="Branch names, \"*\" for any branch")] = None,
    status: BuildStatus | None = None,
    start: Annotated[int, Query(ge=0, description="Matches to skip")] = 0,
    count: Annotated[int | None, Query(ge=0, description="Maximum builds to return")] = None,
) -> BuildsPage:
    return BuildService(registry).find_builds_page(
        build_type,
        branches=[None if name == ANY_BRANCH else name for name in branch] if branch else None,
        status=status,
        start=start,
        count=get_pagination_settings().clamp(count),
        lookup_limit=lookup_limit,
    )
