"""Quota-enforcing processor for streaming finders.

``FilterItemProcessor`` is the consumer side of an ``ItemHolder``: it
keeps the items accepted by a filter, skips the first ``start`` of them,
and stops the holder once ``count`` items are collected. A
``lookup_limit`` bounds the number of items inspected at all, so a
selective filter over a huge source cannot scan it to the end.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from buildserver_service.core.items.holder import ItemHolder

P = TypeVar("P")
P_contra = TypeVar("P_contra", contravariant=True)


class ItemFilter(Protocol[P_contra]):
    """Decides whether an item belongs to the result."""

    def is_included(self, item: P_contra) -> bool: ...


class PredicateFilter(Generic[P]):
    """``ItemFilter`` backed by a plain predicate."""

    def __init__(self, predicate: Callable[[P], bool]) -> None:
        self._predicate = predicate

    def is_included(self, item: P) -> bool:
        return self._predicate(item)


class _IncludeAll:
    def is_included(self, item: object) -> bool:
        return True


@dataclass
class FilteredItems(Generic[P]):
    """Outcome of a filtered traversal.

    Attributes:
        items: Accepted items after ``start``, at most ``count`` of them
        processed: Number of items the processor inspected
        has_more: An accepted item beyond ``count`` was seen
        lookup_limit_reached: Traversal stopped on the lookup limit
    """

    items: list[P] = field(default_factory=list)
    processed: int = 0
    has_more: bool = False
    lookup_limit_reached: bool = False


class FilterItemProcessor(Generic[P]):
    """Item processor applying a filter and a start/count window.

    Instances are callables usable wherever an ``ItemProcessor`` is
    expected. Use one instance per traversal.

    Example:
        processor = FilterItemProcessor(lambda b: b.status == "SUCCESS", start=10, count=5)
        holder.process(processor)
        processor.result.items
    """

    def __init__(
        self,
        item_filter: ItemFilter[P] | Callable[[P], bool] | None = None,
        *,
        start: int = 0,
        count: int | None = None,
        lookup_limit: int | None = None,
    ) -> None:
        if item_filter is None:
            item_filter = _IncludeAll()
        elif not hasattr(item_filter, "is_included"):
            item_filter = PredicateFilter(item_filter)
        self._filter: ItemFilter[P] = item_filter
        self._start = max(start, 0)
        self._count = count if count is None else max(count, 0)
        self._lookup_limit = lookup_limit
        self._accepted = 0
        self._result: FilteredItems[P] = FilteredItems()

    @property
    def result(self) -> FilteredItems[P]:
        return self._result

    def __call__(self, item: P) -> bool:
        self._result.processed += 1
        keep_going = self._accept(item)
        if (
            keep_going
            and self._lookup_limit is not None
            and self._result.processed >= self._lookup_limit
        ):
            self._result.lookup_limit_reached = True
            return False
        return keep_going

    def _accept(self, item: P) -> bool:
        if not self._filter.is_included(item):
            return True

        self._accepted += 1
        if self._accepted <= self._start:
            return True

        if self._count is not None and len(self._result.items) >= self._count:
            self._result.has_more = True
            return False

        self._result.items.append(item)
        return True


def collect(
    holder: ItemHolder[P],
    item_filter: ItemFilter[P] | Callable[[P], bool] | None = None,
    *,
    start: int = 0,
    count: int | None = None,
    lookup_limit: int | None = None,
) -> FilteredItems[P]:
    """Drive ``holder`` through a fresh ``FilterItemProcessor``."""
    processor = FilterItemProcessor(item_filter, start=start, count=count, lookup_limit=lookup_limit)
    holder.process(processor)
    return processor.result


__all__ = [
    "FilterItemProcessor",
    "FilteredItems",
    "ItemFilter",
    "PredicateFilter",
    "collect",
]
