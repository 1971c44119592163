"""Tests for GraphQL error classification."""

from __future__ import annotations

import logging

import pytest
from graphql import GraphQLError

from buildserver_service.core.exceptions import (
    ForbiddenException,
    NotFoundException,
    ValidationException,
)
from buildserver_service.core.pagination import EdgeError
from buildserver_service.features.graphql.error_handler import (
    ErrorCategory,
    classify_error,
    edge_error_to_graphql,
    is_user_facing_error,
    log_graphql_errors,
    should_mask_error,
)


def graphql_error(original: Exception | None = None, **extensions) -> GraphQLError:
    return GraphQLError("failed", original_error=original, extensions=extensions or None)


@pytest.mark.parametrize(
    ("original", "expected"),
    [
        (None, ErrorCategory.VALIDATION_ERROR),
        (ForbiddenException(detail="no"), ErrorCategory.ACCESS_DENIED),
        (PermissionError("no"), ErrorCategory.ACCESS_DENIED),
        (NotFoundException(detail="gone"), ErrorCategory.NOT_FOUND),
        (ValidationException(detail="bad"), ErrorCategory.VALIDATION_ERROR),
        (ValueError("bad"), ErrorCategory.VALIDATION_ERROR),
        (RuntimeError("boom"), ErrorCategory.SERVER_ERROR),
    ],
)
def test_classify_by_original_error(original, expected):
    assert classify_error(graphql_error(original)) is expected


def test_explicit_code_wins():
    error = graphql_error(RuntimeError("boom"), code="OPERATION_FAILED")

    assert classify_error(error) is ErrorCategory.OPERATION_FAILED


def test_unknown_code_is_server_error():
    assert classify_error(graphql_error(code="TEAPOT")) is ErrorCategory.SERVER_ERROR


def test_masking_follows_category():
    assert should_mask_error(graphql_error(RuntimeError("boom")))
    assert not should_mask_error(graphql_error(NotFoundException(detail="gone")))
    assert is_user_facing_error(graphql_error(code="OPERATION_FAILED"))


def test_edge_error_to_graphql():
    error = edge_error_to_graphql(EdgeError(position=3, exception=TimeoutError("slow")), ["agentPools"])

    assert error.message == "Failed to resolve edge at position 3: slow"
    assert error.path == ["agentPools"]
    assert error.extensions["code"] == "OPERATION_FAILED"
    assert error.extensions["position"] == 3
    assert error.extensions["type"] == "TimeoutError"
    assert error.extensions["cursor"]


def test_log_levels_by_category(caplog: pytest.LogCaptureFixture):
    errors = [graphql_error(NotFoundException(detail="gone")), graphql_error(RuntimeError("boom"))]

    with caplog.at_level(logging.INFO, logger="buildserver_service.features.graphql.error_handler"):
        log_graphql_errors(errors)

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.ERROR]
    assert caplog.records[1].error_code == "SERVER_ERROR"
