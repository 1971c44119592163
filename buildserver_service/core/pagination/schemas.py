"""Pagination response schemas.

This module provides the serializable shapes of a computed page:

1. Relay page metadata (``PageInfo``):
   - Shared by GraphQL connection types
   - Cursors of the first and last returned edge

2. Simple REST style (``PagedResponse``):
   - Items of the window plus offset/count bookkeeping
   - Per-item resolution errors next to the items, so one broken
     item never turns the whole page into an error response
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
        total_count: Total number of candidate items
    """

    has_previous_page: bool = Field(description="Whether previous items exist")
    has_next_page: bool = Field(description="Whether more items exist")
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )
    total_count: int | None = Field(
        default=None,
        description="Total number of candidate items",
    )


class EdgeErrorSchema(BaseModel):
    """A single item of the page that could not be resolved."""

    position: int = Field(description="Position of the item in the candidate sequence")
    cursor: str = Field(description="Cursor of the failed item")
    message: str = Field(description="Human-readable failure description")
    type: str = Field(description="Failure type identifier")


class PagedResponse(BaseModel, Generic[T]):
    """REST-style offset pagination response.

    Usage:
        @router.get("/projects", response_model=PagedResponse[ProjectResponse])
        def list_projects(pagination: OffsetPagination) -> PagedResponse[ProjectResponse]:
            result = ProjectsConnection(projects, pagination).get_edges()
            return to_paged_response(result, ProjectResponse.from_node)

    Attributes:
        items: Resolved items of the window, in candidate order
        count: Number of items returned
        offset: Position of the first item of the window
        total: Number of candidate items
        next_offset: Offset of the following window (None if at the end)
        errors: Items of the window that failed to resolve
    """

    items: list[T] = Field(default_factory=list, description="List of items")
    count: int = Field(default=0, description="Number of items returned")
    offset: int = Field(default=0, description="Position of the first item")
    total: int = Field(default=0, description="Number of candidate items")
    next_offset: int | None = Field(
        default=None,
        description="Offset of the next page (None if no more)",
    )
    errors: list[EdgeErrorSchema] = Field(
        default_factory=list,
        description="Items that could not be resolved",
    )


__all__ = [
    "EdgeErrorSchema",
    "PageInfo",
    "PagedResponse",
]
