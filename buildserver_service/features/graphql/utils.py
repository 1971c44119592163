"""Helpers shared by connection resolvers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, TypeVar

import strawberry
from strawberry.types import Info

from buildserver_service.core.pagination import ConnectionResult, LazyEdge, PaginationArguments
from buildserver_service.core.settings import get_graphql_settings
from buildserver_service.features.graphql.error_handler import edge_error_to_graphql
from buildserver_service.features.graphql.types.base import PageInfoType

C = TypeVar("C")

# Relay connection arguments
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)"),
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)"),
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)"),
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start before (backward pagination)"),
]


def cursor_pagination(
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> PaginationArguments:
    """Relay window from connection arguments, page sizes clamped."""
    settings = get_graphql_settings()
    return PaginationArguments.cursor_based(
        after=after,
        before=before,
        first=settings.clamp(first),
        last=settings.clamp(last),
    )


def record_edge_errors(info: Info[Any, Any], result: ConnectionResult[Any]) -> None:
    """Queue the page's edge failures for the response ``errors``."""
    if not result.errors:
        return
    path = info.path.as_list()
    info.context.edge_errors.extend(edge_error_to_graphql(error, path) for error in result.errors)


def build_connection(
    connection_type: Callable[..., C],
    edge_type: Callable[..., Any],
    result: ConnectionResult[Any],
    convert: Callable[[LazyEdge[Any, Any]], Any],
    info: Info[Any, Any],
) -> C:
    """Build a GraphQL connection from a computed page.

    Args:
        connection_type: Strawberry connection class.
        edge_type: Strawberry edge class taking ``node`` and ``cursor``.
        result: Page returned by ``get_edges()``.
        convert: Maps a resolved edge to its GraphQL node; receives the
            edge so it can pass the local context along.
        info: Resolver info, used for the error path.
    """
    record_edge_errors(info, result)
    return connection_type(
        edges=[edge_type(node=convert(edge), cursor=edge.cursor) for edge in result.edges],
        page_info=PageInfoType.from_page_info(result.page_info),
        total_count=result.total_count,
    )


__all__ = [
    "AfterArg",
    "BeforeArg",
    "FirstArg",
    "LastArg",
    "build_connection",
    "cursor_pagination",
    "record_edge_errors",
]
