"""On-the-fly deduplication of streamed items.

Finders that merge several sources (several build types, several
branches) may produce the same item more than once. Wrapping their
holder in a ``DeduplicatingItemHolder`` lets only the first occurrence
of each item reach the processor.

Precondition: items (or the keys derived from them) must have
consistent ``__eq__``/``__hash__``. This is not checked at runtime.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from buildserver_service.core.items.holder import ItemHolder, ItemProcessor, P
from buildserver_service.infra.logging import get_lazy_logger

lazy_logger = get_lazy_logger(__name__)

K = TypeVar("K", bound=Hashable)


class DuplicateChecker(ABC, Generic[P]):
    """Remembers items and reports repeats.

    One checker is scoped to one traversal; create a fresh instance per
    request rather than sharing one.
    """

    @abstractmethod
    def check_duplicate_and_remember(self, item: P) -> bool:
        """Return True if ``item`` was seen before; remember it either way."""


class SetDuplicateChecker(DuplicateChecker[P]):
    """Checker using the items' own equality."""

    def __init__(self) -> None:
        self._seen: set[P] = set()

    def check_duplicate_and_remember(self, item: P) -> bool:
        if item in self._seen:
            return True
        self._seen.add(item)
        return False

    def __len__(self) -> int:
        return len(self._seen)


class KeyDuplicateChecker(DuplicateChecker[P], Generic[P, K]):
    """Checker comparing a key derived from each item.

    Example:
        checker = KeyDuplicateChecker(lambda build: build.id)
    """

    def __init__(self, key_fn: Callable[[P], K]) -> None:
        self._key_fn = key_fn
        self._seen: set[K] = set()

    def check_duplicate_and_remember(self, item: P) -> bool:
        key = self._key_fn(item)
        if key in self._seen:
            return True
        self._seen.add(key)
        return False

    def __len__(self) -> int:
        return len(self._seen)


class DeduplicatingItemHolder(ItemHolder[P]):
    """Holder passing only unique items to the processor.

    Duplicates are consumed from the wrapped holder and skipped; the
    wrapped holder is told to keep producing, so skipped items never count
    against a quota the processor enforces. The processor's own stop
    decision is passed through unchanged.
    """

    def __init__(self, holder: ItemHolder[P], duplicate_checker: DuplicateChecker[P]) -> None:
        self._holder = holder
        self._duplicate_checker = duplicate_checker

    def process(self, processor: ItemProcessor[P]) -> None:
        def deduplicating(item: P) -> bool:
            if self._duplicate_checker.check_duplicate_and_remember(item):
                lazy_logger.debug(lambda: f"skipping duplicate item {item!r}")
                return True
            return processor(item)

        self._holder.process(deduplicating)


__all__ = [
    "DeduplicatingItemHolder",
    "DuplicateChecker",
    "KeyDuplicateChecker",
    "SetDuplicateChecker",
]
