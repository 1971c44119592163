"""Per-request logging context.

Fields stored here (request id, client, path) are copied into every log
record emitted from the same request by ``ContextInjectingFilter``.
The storage is a ``ContextVar``, so concurrent requests served by the
same worker never see each other's fields.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context of the current request.

    Example:
        set_log_context(request_id="abc-123", path="/api/v1/agent-pools")
        logger.info("Listing agent pools")  # carries request_id and path
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    _log_context.set({})


def remove_from_log_context(*keys: str) -> None:
    """Drop ``keys`` from the current logging context."""
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


class ContextInjectingFilter(logging.Filter):
    """Copy the current logging context onto each record.

    Attributes already present on the record (for example fields passed
    through ``extra=``) win over context fields of the same name.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


__all__ = [
    "ContextInjectingFilter",
    "clear_log_context",
    "get_log_context",
    "remove_from_log_context",
    "set_log_context",
]
