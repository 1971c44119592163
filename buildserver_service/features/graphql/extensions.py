"""Strawberry schema extensions.

Extensions are applied in list order:
- QueryDepthLimiter: rejects documents nested deeper than ``max_depth``
- MaskErrors (production only): hides internal error messages
- PartialResultsExtension: reports unresolved connection edges
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from strawberry.extensions import MaskErrors, QueryDepthLimiter, SchemaExtension

from buildserver_service.core.settings import get_app_settings
from buildserver_service.features.graphql.error_handler import classify_error, should_mask_error

logger = logging.getLogger(__name__)


class PartialResultsExtension(SchemaExtension):
    """Attach per-edge failures to the response.

    Connection resolvers return the edges that resolved and record the
    failed ones on the context. Once the operation finishes they are
    appended to ``errors`` next to the partial ``data``, and every error
    of the response is given a ``code`` extension.
    """

    def on_operation(self) -> Iterator[None]:
        yield

        result = self.execution_context.result
        if result is None:
            return

        edge_errors = getattr(self.execution_context.context, "edge_errors", None) or []
        errors = list(getattr(result, "errors", None) or [])
        if edge_errors:
            logger.info(
                "GraphQL response carries unresolved edges",
                extra={
                    "operation_name": self.execution_context.operation_name,
                    "edge_error_count": len(edge_errors),
                },
            )
            errors.extend(edge_errors)

        for error in errors:
            extensions: dict[str, Any] = dict(error.extensions or {})
            extensions.setdefault("code", classify_error(error).value)
            error.extensions = extensions

        if errors:
            result.errors = errors


def get_extensions() -> list[Any]:
    extensions: list[Any] = [QueryDepthLimiter(max_depth=10)]
    if get_app_settings().is_production:
        extensions.append(MaskErrors(should_mask_error=should_mask_error))
    extensions.append(PartialResultsExtension)
    return extensions


__all__ = ["PartialResultsExtension", "get_extensions"]
