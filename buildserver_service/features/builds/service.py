"""Service layer for the builds feature.

Build searches span several build types and branches. Each (build type,
branch) pair is a separate lazily scanned holder; the holders are
chained, deduplicated by build id (requested build types and branches
may overlap, e.g. "any branch" next to an explicit one) and consumed by
a quota-enforcing filter processor, so the scan stops as soon as the
page is full.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from buildserver_service.core.items import (
    DeduplicatingItemHolder,
    FilteredItems,
    FilterItemProcessor,
    ItemHolder,
)
from buildserver_service.features.buildserver.models import Build, BuildStatus
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.builds.schemas import BuildResponse, BuildsPage

logger = logging.getLogger(__name__)


class BuildStatusFilter:
    """``ItemFilter`` accepting builds with the given status."""

    def __init__(self, status: BuildStatus | None) -> None:
        self._status = status

    def is_included(self, item: Build) -> bool:
        return self._status is None or item.status == self._status


class BuildService:
    def __init__(self, registry: BuildServerRegistry) -> None:
        self._registry = registry

    def holder(
        self,
        build_type_ids: Sequence[str],
        branches: Sequence[str | None] = (None,),
    ) -> ItemHolder[Build]:
        """Deduplicated holder over builds of every build type and branch."""
        holders = [
            self._registry.builds(build_type_id, branch)
            for build_type_id in build_type_ids
            for branch in branches
        ]
        return DeduplicatingItemHolder(
            ItemHolder.concat(holders),
            self._registry.create_duplicate_checker(),
        )

    def find_builds(
        self,
        build_type_ids: Sequence[str],
        *,
        branches: Sequence[str | None] | None = None,
        status: BuildStatus | None = None,
        start: int = 0,
        count: int | None = None,
        lookup_limit: int | None = None,
    ) -> FilteredItems[Build]:
        unknown = [bt for bt in build_type_ids if self._registry.find_build_type(bt) is None]
        if unknown:
            logger.info("Build search includes unknown build types", extra={"build_type_ids": unknown})

        processor: FilterItemProcessor[Build] = FilterItemProcessor(
            BuildStatusFilter(status),
            start=start,
            count=count,
            lookup_limit=lookup_limit,
        )
        self.holder(build_type_ids, branches or (None,)).process(processor)
        result = processor.result
        if result.lookup_limit_reached:
            logger.info(
                "Build search stopped at lookup limit",
                extra={"lookup_limit": lookup_limit, "found": len(result.items)},
            )
        return result

    def find_builds_page(
        self,
        build_type_ids: Sequence[str],
        *,
        branches: Sequence[str | None] | None = None,
        status: BuildStatus | None = None,
        start: int = 0,
        count: int | None = None,
        lookup_limit: int | None = None,
    ) -> BuildsPage:
        result = self.find_builds(
            build_type_ids,
            branches=branches,
            status=status,
            start=start,
            count=count,
            lookup_limit=lookup_limit,
        )
        items = [BuildResponse.from_domain(build) for build in result.items]
        return BuildsPage(
            items=items,
            count=len(items),
            start=start,
            next_start=start + len(items) if result.has_more else None,
            has_more=result.has_more,
            processed=result.processed,
            lookup_limit_reached=result.lookup_limit_reached,
        )


__all__ = ["BuildService", "BuildStatusFilter"]
