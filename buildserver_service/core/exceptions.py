"""Application exception hierarchy.

Services and routers raise these; the exception handlers registered by
``configure_exception_handlers`` turn them into RFC 7807 responses. The
pagination core never raises them: window problems degrade to empty
pages and per-edge failures are reported next to the page.
"""

from __future__ import annotations

from typing import Any

_DEFAULT_TITLES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def default_title(status_code: int) -> str:
    """Human-readable title for an HTTP status code."""
    return _DEFAULT_TITLES.get(status_code, "Error")


class AppException(Exception):
    """Base application exception following RFC 7807 Problem Details.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier.
        title: Short summary of the problem type.
        instance: URI reference of this occurrence.
        extra: Additional context merged into the response body.

    Example:
        raise AppException(
            status_code=404,
            detail="Agent pool 42 not found",
            type="agent-pool-not-found",
            extra={"pool_id": 42},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)


class NotFoundException(AppException):
    """A requested entity does not exist."""

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ForbiddenException(AppException):
    """The caller's ACL does not grant the requested access."""

    def __init__(
        self,
        detail: str,
        type: str = "forbidden",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=403,
            detail=detail,
            type=type,
            title="Forbidden",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """A request value is well-formed but not acceptable."""

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


class BadRequestException(AppException):
    """The request cannot be processed as sent."""

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            instance=instance,
            extra=extra,
        )


__all__ = [
    "AppException",
    "BadRequestException",
    "ForbiddenException",
    "NotFoundException",
    "ValidationException",
    "default_title",
]
