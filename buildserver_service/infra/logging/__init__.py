"""Logging infrastructure.

Structured JSON Lines output with per-request context injection and
lazily evaluated debug messages:

    import logging
    from buildserver_service.infra.logging import get_lazy_logger, set_log_context

    logger = logging.getLogger(__name__)
    lazy_logger = get_lazy_logger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Resolving agent pool", extra={"pool_id": pool_id})
    lazy_logger.debug(lambda: f"candidates: {len(images)}")
"""

from buildserver_service.infra.logging.config import configure_logging, setup_logging, shutdown
from buildserver_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    remove_from_log_context,
    set_log_context,
)
from buildserver_service.infra.logging.formatters import JSONFormatter
from buildserver_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
