"""Conversion of computed pages into REST responses."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from buildserver_service.core.pagination.connection import ConnectionResult, EdgeError
from buildserver_service.core.pagination.schemas import EdgeErrorSchema, PagedResponse

T = TypeVar("T")


def edge_error_schema(error: EdgeError) -> EdgeErrorSchema:
    return EdgeErrorSchema(
        position=error.position,
        cursor=error.cursor,
        message=error.message,
        type=error.type,
    )


def to_paged_response(
    result: ConnectionResult[Any],
    convert: Callable[[Any], T] | None = None,
) -> PagedResponse[T]:
    """Build a ``PagedResponse`` from a computed page.

    Args:
        result: Page returned by ``get_edges()``.
        convert: Maps a resolved node to its response schema; nodes are
            returned unchanged when omitted.

    Returns:
        Response whose ``next_offset`` points just past the window, or
        None when the window reaches the end of the candidates.
    """
    nodes = result.nodes
    items = nodes if convert is None else [convert(node) for node in nodes]
    return PagedResponse(
        items=items,
        count=len(items),
        offset=result.start,
        total=result.total_count,
        next_offset=result.end if result.end < result.total_count else None,
        errors=[edge_error_schema(error) for error in result.errors],
    )


__all__ = ["edge_error_schema", "to_paged_response"]
