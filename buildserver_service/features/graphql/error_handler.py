"""GraphQL error classification, logging and masking.

Every error of a response carries a ``code`` extension:

    ACCESS_DENIED     the caller's ACL does not allow the operation
    NOT_FOUND         a referenced entity does not exist
    VALIDATION_ERROR  arguments were rejected
    OPERATION_FAILED  one edge of a connection could not be resolved
    SERVER_ERROR      anything else; masked in production
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from graphql import GraphQLError
from pydantic import ValidationError

from buildserver_service.core.exceptions import (
    ForbiddenException,
    NotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

    from buildserver_service.core.pagination import EdgeError

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "classify_error",
    "edge_error_to_graphql",
    "is_user_facing_error",
    "log_graphql_errors",
    "should_mask_error",
]


class ErrorCategory(str, Enum):
    ACCESS_DENIED = "ACCESS_DENIED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    OPERATION_FAILED = "OPERATION_FAILED"
    SERVER_ERROR = "SERVER_ERROR"


_USER_FACING = frozenset(
    {
        ErrorCategory.ACCESS_DENIED,
        ErrorCategory.NOT_FOUND,
        ErrorCategory.VALIDATION_ERROR,
        ErrorCategory.OPERATION_FAILED,
    }
)


def classify_error(error: GraphQLError) -> ErrorCategory:
    """Return the category of ``error``.

    An explicit ``code`` extension wins. Otherwise the category follows
    the original exception; errors without one come from parsing or
    validation of the document.
    """
    code = (error.extensions or {}).get("code")
    if code is not None:
        try:
            return ErrorCategory(code)
        except ValueError:
            return ErrorCategory.SERVER_ERROR

    original = error.original_error
    if original is None:
        return ErrorCategory.VALIDATION_ERROR
    if isinstance(original, ForbiddenException | PermissionError):
        return ErrorCategory.ACCESS_DENIED
    if isinstance(original, NotFoundException):
        return ErrorCategory.NOT_FOUND
    if isinstance(original, ValidationException | ValidationError | ValueError):
        return ErrorCategory.VALIDATION_ERROR
    return ErrorCategory.SERVER_ERROR


def is_user_facing_error(error: GraphQLError) -> bool:
    return classify_error(error) in _USER_FACING


def should_mask_error(error: GraphQLError) -> bool:
    """Used by the production masking extension."""
    return not is_user_facing_error(error)


def edge_error_to_graphql(edge_error: EdgeError, path: list[str | int]) -> GraphQLError:
    """GraphQL error reporting one unresolved edge of the connection at ``path``."""
    return GraphQLError(
        f"Failed to resolve edge at position {edge_error.position}: {edge_error.message}",
        path=path,
        extensions={
            "code": ErrorCategory.OPERATION_FAILED.value,
            "position": edge_error.position,
            "cursor": edge_error.cursor,
            "type": edge_error.type,
        },
    )


def log_graphql_errors(
    errors: list[GraphQLError],
    execution_context: ExecutionContext | None = None,
) -> None:
    """Log every error; user-facing ones at INFO, the rest with traceback."""
    operation_name = execution_context.operation_name if execution_context else None
    for error in errors:
        category = classify_error(error)
        extra = {
            "error_message": error.message,
            "error_path": error.path,
            "error_code": category.value,
            "operation_name": operation_name,
        }
        if category in _USER_FACING:
            logger.info("GraphQL user-facing error", extra=extra)
            continue

        original = error.original_error
        logger.error(
            "GraphQL internal error",
            extra={**extra, "exception_type": type(original).__name__ if original else None},
            exc_info=(type(original), original, original.__traceback__) if original else None,
        )
