"""Push-style item sources.

An ``ItemHolder`` drives a caller-supplied processor over its items. The
processor returns ``True`` to ask for the next item and ``False`` to stop;
that return value is the only cancellation mechanism. Holders stop pulling
from their underlying source as soon as the processor says stop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

P = TypeVar("P")

ItemProcessor = Callable[[P], bool]
"""Receives one item, returns whether the holder should keep producing."""


class ItemHolder(ABC, Generic[P]):
    """Source of items driven by a processor.

    Example:
        seen = []

        def take_three(item):
            seen.append(item)
            return len(seen) < 3

        ItemHolder.of(range(100)).process(take_three)
        seen  # [0, 1, 2]
    """

    @abstractmethod
    def process(self, processor: ItemProcessor[P]) -> None:
        """Feed items to ``processor`` until exhausted or told to stop."""

    @staticmethod
    def of(items: Iterable[P]) -> ItemHolder[P]:
        """Holder over any iterable, consumed lazily."""
        return IterableItemHolder(items)

    @staticmethod
    def concat(holders: Iterable[ItemHolder[P]]) -> ItemHolder[P]:
        """Holder draining ``holders`` one after another."""
        return ConcatItemHolder(holders)

    @staticmethod
    def empty() -> ItemHolder[P]:
        return IterableItemHolder(())


class IterableItemHolder(ItemHolder[P]):
    """Holder over an iterable.

    A one-shot iterable (a generator, a finder's cursor) can be driven
    once; re-iterable collections can be driven repeatedly.
    """

    def __init__(self, items: Iterable[P]) -> None:
        self._items = items

    def process(self, processor: ItemProcessor[P]) -> None:
        for item in self._items:
            if not processor(item):
                return


class ConcatItemHolder(ItemHolder[P]):
    """Holder chaining several holders.

    When the processor stops inside one holder, the remaining holders are
    never started.
    """

    def __init__(self, holders: Iterable[ItemHolder[P]]) -> None:
        self._holders = list(holders)

    def process(self, processor: ItemProcessor[P]) -> None:
        stopped = False

        def tracking(item: P) -> bool:
            nonlocal stopped
            if processor(item):
                return True
            stopped = True
            return False

        for holder in self._holders:
            holder.process(tracking)
            if stopped:
                return


__all__ = ["ConcatItemHolder", "ItemHolder", "ItemProcessor", "IterableItemHolder"]
