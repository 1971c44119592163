"""Unit tests for settings loaders."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildserver_service.core.settings import (
    PaginationSettings,
    get_auth_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)


def test_pagination_clamp():
    settings = PaginationSettings(default_limit=20, max_limit=50)

    assert settings.clamp(None) == 20
    assert settings.clamp(10) == 10
    assert settings.clamp(500) == 50


def test_pagination_default_cannot_exceed_max():
    with pytest.raises(ValidationError):
        PaginationSettings(default_limit=200, max_limit=100)


def test_pagination_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PAGINATION_MAX_LIMIT", "7")
    monkeypatch.setenv("PAGINATION_DEFAULT_LIMIT", "5")

    assert get_pagination_settings().clamp(100) == 7


def test_graphql_clamp(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHQL_MAX_PAGE_SIZE", "3")

    settings = get_graphql_settings()
    assert settings.clamp(10) == 3
    assert settings.clamp(None) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("agent_pools.#, !agent_pools.*.manage_agents", ["agent_pools.#", "!agent_pools.*.manage_agents"]),
        ('["agent_pools.1.#"]', ["agent_pools.1.#"]),
    ],
)
def test_default_acl_from_env(monkeypatch: pytest.MonkeyPatch, value, expected):
    monkeypatch.setenv("AUTH_DEFAULT_ACL", value)

    assert get_auth_settings().default_acl == expected


def test_logging_level_is_normalized(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON_LOGS", "false")

    settings = get_logging_settings()
    assert settings.level == "DEBUG"
    assert settings.to_logging_kwargs()["json_logs"] is False
