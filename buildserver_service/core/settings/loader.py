"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of
the process. Tests clear a cache to force a reload:

    get_pagination_settings.cache_clear()
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .auth import AuthSettings
from .graphql import GraphQLSettings
from .logs import LoggingSettings
from .pagination import PaginationSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings."""
    return PaginationSettings()


@lru_cache(maxsize=1)
def get_graphql_settings() -> GraphQLSettings:
    """Get cached GraphQL settings."""
    return GraphQLSettings()


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Get cached authorization settings."""
    return AuthSettings()


def clear_settings_cache() -> None:
    """Drop every cached settings instance."""
    for loader in (
        get_app_settings,
        get_logging_settings,
        get_pagination_settings,
        get_graphql_settings,
        get_auth_settings,
    ):
        loader.cache_clear()
