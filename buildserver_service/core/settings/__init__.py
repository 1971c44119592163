"""Pydantic Settings v2 configuration.

Settings are split by concern and read from environment variables
(optionally a ``.env`` file). Import them through the cached loaders:

    from buildserver_service.core.settings import get_pagination_settings

    limit = get_pagination_settings().clamp(requested_count)
"""

from __future__ import annotations

from .app import AppSettings
from .auth import AuthSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_settings_cache,
    get_app_settings,
    get_auth_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "AppSettings",
    "AuthSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_settings_cache",
    "get_app_settings",
    "get_auth_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
