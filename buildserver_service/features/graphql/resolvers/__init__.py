"""GraphQL resolvers."""

from __future__ import annotations

from buildserver_service.features.graphql.resolvers.queries import Query

__all__ = ["Query"]
