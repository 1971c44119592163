"""Pagination dependencies for REST routes.

Offset/count query parameters are turned into a ``PaginationArguments``
once per request. Counts are bounded by the pagination settings; other
out-of-range values are left to the window math, which clamps them.

Usage:
    @router.get("/projects")
    def list_projects(pagination: OffsetPagination) -> PagedResponse[ProjectResponse]:
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from buildserver_service.core.pagination import PaginationArguments
from buildserver_service.core.settings import get_pagination_settings


def get_offset_pagination(
    offset: Annotated[
        int,
        Query(description="Number of items to skip"),
    ] = 0,
    count: Annotated[
        int | None,
        Query(description="Maximum number of items to return"),
    ] = None,
) -> PaginationArguments:
    """Build offset/count pagination arguments.

    A missing ``count`` uses the configured default page size and larger
    counts are clamped to the configured maximum.
    """
    settings = get_pagination_settings()
    return PaginationArguments.offset_based(offset=offset, count=settings.clamp(count))


def get_lookup_limit(
    lookup_limit: Annotated[
        int | None,
        Query(ge=1, description="Maximum number of items to inspect"),
    ] = None,
) -> int:
    """Lookup limit of streaming finders, defaulted from settings."""
    if lookup_limit is None:
        return get_pagination_settings().default_lookup_limit
    return lookup_limit


OffsetPagination = Annotated[PaginationArguments, Depends(get_offset_pagination)]
LookupLimit = Annotated[int, Depends(get_lookup_limit)]
