"""Connection pagination shared by the GraphQL and REST APIs.

This package turns an arbitrarily large candidate sequence into a
correctly windowed, lazily computed, error tolerant page of edges:

    connection = AgentPoolCloudImagesConnection(pairs, PaginationArguments.everything())
    result = connection.get_edges()
    result.edges     # edges whose node resolved, in candidate order
    result.errors    # one EdgeError per edge of the window that failed
    result.page_info # Relay page metadata

Windows come in three styles, built once per request:

    PaginationArguments.everything()
    PaginationArguments.offset_based(offset=40, count=20)
    PaginationArguments.cursor_based(after=cursor, first=20)

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from buildserver_service.core.pagination.arguments import PaginationArguments, PaginationStyle
from buildserver_service.core.pagination.connection import (
    ConnectionResult,
    DelegatingConnection,
    EdgeError,
    EdgeResolutionCycleError,
    EdgeState,
    ExtensibleConnection,
    LazyEdge,
    PaginatingConnection,
)
from buildserver_service.core.pagination.cursor import CursorCodec, CursorData
from buildserver_service.core.pagination.responses import edge_error_schema, to_paged_response
from buildserver_service.core.pagination.schemas import (
    EdgeErrorSchema,
    PagedResponse,
    PageInfo,
)

__all__ = [
    # Window descriptors
    "PaginationArguments",
    "PaginationStyle",
    # Connections
    "ConnectionResult",
    "DelegatingConnection",
    "EdgeError",
    "EdgeResolutionCycleError",
    "EdgeState",
    "ExtensibleConnection",
    "LazyEdge",
    "PaginatingConnection",
    # Cursor utilities
    "CursorCodec",
    "CursorData",
    # Schemas
    "EdgeErrorSchema",
    "PageInfo",
    "PagedResponse",
    # Response helpers
    "edge_error_schema",
    "to_paged_response",
]
