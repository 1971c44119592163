"""Pagination settings for REST responses.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=50, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Page size limits of offset/count endpoints.

    Attributes:
        default_limit: Page size when a request carries no ``count``.
        max_limit: Largest page size served; larger counts are clamped.
        default_lookup_limit: Items a streaming finder inspects at most
            when a request carries no ``lookup_limit``.
    """

    default_limit: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Default page size when count is not specified",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )
    default_lookup_limit: int = Field(
        default=5000,
        ge=1,
        description="Default number of items a streaming finder inspects",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = "default_limit cannot exceed max_limit"
            raise ValueError(msg)
        return self

    def clamp(self, count: int | None) -> int:
        """Return the effective page size for a requested ``count``."""
        if count is None:
            return self.default_limit
        return min(count, self.max_limit)

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
