"""GraphQL endpoint settings.

Environment variables use GRAPHQL_ prefix.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GraphQLIDE = Literal["graphiql", "apollo-sandbox", "pathfinder", False]


class GraphQLSettings(BaseSettings):
    """GraphQL endpoint configuration.

    Example: GRAPHQL_ENABLED=false, GRAPHQL_MAX_PAGE_SIZE=200
    """

    enabled: bool = Field(default=True, description="Mount the GraphQL endpoint")
    path: str = Field(
        default="/graphql",
        min_length=1,
        max_length=255,
        pattern=r"^/.*$",
        description="GraphQL endpoint path",
    )
    graphql_ide: GraphQLIDE = Field(
        default="graphiql",
        description="GraphQL IDE served on GET, or false to disable",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Upper bound for first/last connection arguments",
    )

    def clamp(self, size: int | None) -> int | None:
        """Clamp a ``first``/``last`` argument to ``max_page_size``."""
        if size is None:
            return None
        return min(size, self.max_page_size)

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
