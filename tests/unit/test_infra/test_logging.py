"""Unit tests for the logging infrastructure."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import QueueHandler

import pytest

from buildserver_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    configure_logging,
    get_lazy_logger,
    get_log_context,
    remove_from_log_context,
    set_log_context,
    shutdown,
)


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("test.logger", logging.INFO, __file__, 10, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


class TestLogContext:
    def test_set_get_remove(self):
        set_log_context(request_id="abc", path="/x")
        set_log_context(method="GET")

        assert get_log_context() == {"request_id": "abc", "path": "/x", "method": "GET"}

        remove_from_log_context("path", "missing")
        assert get_log_context() == {"request_id": "abc", "method": "GET"}

        clear_log_context()
        assert get_log_context() == {}

    def test_filter_injects_context_without_overriding_extras(self):
        set_log_context(request_id="abc", pool_id=1)
        record = make_record(pool_id=2)

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc"
        assert record.pool_id == 2


class TestJSONFormatter:
    def test_formats_single_json_line(self):
        formatter = JSONFormatter(static={"service": "buildserver-service"})

        line = formatter.format(make_record("edge failed", position=4))
        data = json.loads(line)

        assert "\n" not in line
        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "edge failed"
        assert data["service"] == "buildserver-service"
        assert data["position"] == 4
        assert data["timestamp"].endswith("Z")
        # No active span outside of a trace
        assert "trace_id" not in data

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "test.logger", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]

    def test_non_serializable_extras_use_str(self):
        data = json.loads(JSONFormatter().format(make_record(payload=object())))

        assert data["payload"].startswith("<object object")


class TestLazyLogger:
    def test_callable_not_evaluated_when_disabled(self, caplog: pytest.LogCaptureFixture):
        calls = []
        lazy_logger = get_lazy_logger("test.lazy.disabled")

        with caplog.at_level(logging.INFO, logger="test.lazy.disabled"):
            lazy_logger.debug(lambda: calls.append("called") or "message")

        assert calls == []
        assert caplog.records == []

    def test_callable_message_and_args_are_evaluated(self, caplog: pytest.LogCaptureFixture):
        lazy_logger = get_lazy_logger("test.lazy.enabled", component="pagination")

        with caplog.at_level(logging.DEBUG, logger="test.lazy.enabled"):
            lazy_logger.debug(lambda: "window %s")
            lazy_logger.info("edges: %s", lambda: 3)

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["window %s", "edges: 3"]
        assert caplog.records[1].component == "pagination"


class TestConfigureLogging:
    def test_installs_single_queue_handler_with_context_filter(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            configure_logging("DEBUG", json_logs=True, capture_warnings=False)
            configure_logging("DEBUG", json_logs=False, capture_warnings=False)

            queue_handlers = [h for h in root.handlers if isinstance(h, QueueHandler)]
            assert len(queue_handlers) == 1
            assert any(isinstance(f, ContextInjectingFilter) for f in queue_handlers[0].filters)
            assert root.level == logging.DEBUG
        finally:
            shutdown()
            root.setLevel(saved_level)
            for handler in saved_handlers:
                if handler not in root.handlers:
                    root.addHandler(handler)

    def test_without_handlers_nothing_is_installed(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            configure_logging("INFO", console_enabled=False, capture_warnings=False)

            assert not any(isinstance(h, QueueHandler) for h in root.handlers)
        finally:
            shutdown()
            root.setLevel(saved_level)
            for handler in saved_handlers:
                if handler not in root.handlers:
                    root.addHandler(handler)
