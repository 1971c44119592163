"""Logging setup.

Configuration is applied with ``logging.config.dictConfig``. The root
logger gets a single ``QueueHandler``; the console and file handlers
run behind a ``QueueListener`` thread so request handling never blocks
on log I/O. Application loggers carry no handlers of their own and
propagate to the root.
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING, Any

from buildserver_service.infra.logging.context import ContextInjectingFilter
from buildserver_service.infra.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from buildserver_service.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)

_TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **overrides: Any,
) -> None:
    """Configure logging once per process.

    Args:
        log_settings: Settings to apply; loaded with
            ``get_logging_settings()`` when omitted.
        force: Reconfigure even if logging was already set up.
        **overrides: Explicit ``configure_logging`` keyword overrides.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from buildserver_service.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    configure_logging(**{**log_settings.to_logging_kwargs(), **overrides})
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    *,
    service_name: str = "buildserver-service",
    console_level: str | None = None,
    file_level: str | None = None,
    file_path: str | Path | None = None,
    json_logs: bool = True,
    console_enabled: bool = True,
    include_context: bool = True,
    capture_warnings: bool = True,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    **kwargs: Any,
) -> None:
    """Apply a logging configuration.

    Args:
        log_level: Root logger level.
        service_name: Static ``service`` field of JSON records.
        console_level: Console handler level, ``log_level`` if None.
        file_level: File handler level, ``log_level`` if None.
        file_path: Rotating log file; None disables file logging.
        json_logs: Emit JSON Lines instead of human readable text.
        console_enabled: Log to stderr.
        include_context: Copy the request logging context onto every record.
        capture_warnings: Route ``warnings`` through logging.
        file_max_bytes: Log file size that triggers rotation.
        file_backup_count: Rotated files to keep.

    Example:
        configure_logging("DEBUG", json_logs=False, file_path=None)
    """
    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))

    if capture_warnings:
        logging.captureWarnings(True)

    path = Path(file_path) if file_path else None
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(_build_config(log_level=log_level))

    handlers: list[logging.Handler] = []
    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setLevel((console_level or log_level).upper())
        console_handler.setFormatter(_make_formatter(json_logs, service_name))
        handlers.append(console_handler)

    if path is not None:
        file_handler = RotatingFileHandler(
            path,
            maxBytes=file_max_bytes,
            backupCount=file_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel((file_level or log_level).upper())
        file_handler.setFormatter(_make_formatter(json_logs, service_name))
        handlers.append(file_handler)

    _start_queue_listener(handlers, include_context=include_context)


def shutdown() -> None:
    """Stop the queue listener, flushing pending records."""
    global _listener, _queue_handler

    if _listener is not None:
        _listener.stop()
        _listener = None
    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None


def _build_config(*, log_level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "root": {
            "level": log_level.upper(),
            "handlers": [],
        },
        "loggers": {
            "uvicorn.access": {"level": "WARNING"},
        },
    }


def _make_formatter(json_logs: bool, service_name: str) -> logging.Formatter:
    if json_logs:
        return JSONFormatter(static={"service": service_name})
    return logging.Formatter(fmt=_TEXT_FORMAT, datefmt=_TEXT_DATEFMT)


def _start_queue_listener(handlers: list[logging.Handler], *, include_context: bool) -> None:
    global _listener, _queue_handler

    shutdown()
    if not handlers:
        return

    queue: Queue[logging.LogRecord] = Queue()
    _listener = QueueListener(queue, *handlers, respect_handler_level=True)
    _listener.start()
    atexit.register(shutdown)

    _queue_handler = QueueHandler(queue)
    if include_context:
        # Handler filters run in the calling thread, where the request context is set
        _queue_handler.addFilter(ContextInjectingFilter())
    logging.getLogger().addHandler(_queue_handler)


__all__ = ["configure_logging", "setup_logging", "shutdown"]
