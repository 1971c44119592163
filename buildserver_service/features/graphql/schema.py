"""GraphQL schema assembly.

Builds the read-only build server schema with the configured extensions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry

from buildserver_service.features.graphql.error_handler import log_graphql_errors
from buildserver_service.features.graphql.extensions import get_extensions
from buildserver_service.features.graphql.resolvers import Query

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


class BuildServerSchema(strawberry.Schema):
    """Schema logging errors by category instead of dumping every traceback."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        log_graphql_errors(errors, execution_context)


def create_schema() -> BuildServerSchema:
    """Build the schema; extensions follow the current settings."""
    return BuildServerSchema(query=Query, extensions=get_extensions())


schema = create_schema()

logger.info("GraphQL schema created successfully")

__all__ = ["BuildServerSchema", "create_schema", "schema"]
