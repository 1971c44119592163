"""Streaming item sources, deduplication and quota-enforcing consumers.

Usage:
    holder = DeduplicatingItemHolder(
        ItemHolder.concat([ItemHolder.of(main_builds), ItemHolder.of(branch_builds)]),
        KeyDuplicateChecker(lambda build: build.id),
    )
    page = collect(holder, lambda build: build.status == "SUCCESS", count=20)
"""

from buildserver_service.core.items.dedup import (
    DeduplicatingItemHolder,
    DuplicateChecker,
    KeyDuplicateChecker,
    SetDuplicateChecker,
)
from buildserver_service.core.items.filtering import (
    FilteredItems,
    FilterItemProcessor,
    ItemFilter,
    PredicateFilter,
    collect,
)
from buildserver_service.core.items.holder import (
    ConcatItemHolder,
    ItemHolder,
    ItemProcessor,
    IterableItemHolder,
)

__all__ = [
    "ConcatItemHolder",
    "DeduplicatingItemHolder",
    "DuplicateChecker",
    "FilterItemProcessor",
    "FilteredItems",
    "ItemFilter",
    "ItemHolder",
    "ItemProcessor",
    "IterableItemHolder",
    "KeyDuplicateChecker",
    "PredicateFilter",
    "SetDuplicateChecker",
    "collect",
]
