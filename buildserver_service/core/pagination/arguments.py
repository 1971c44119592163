"""Pagination window descriptors.

A ``PaginationArguments`` instance is built once per request from the
transport layer's query parameters and resolved against a candidate
sequence of known length into a concrete ``[start, end)`` range.

Three styles are supported and never mixed:
    - everything: no limit, offset 0
    - offset/count: REST style windows
    - after/before/first/last: Relay cursor windows

Window math never raises. Out-of-range numbers are clamped into
``[0, N]``, and cursors that fail to decode produce an empty range.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from buildserver_service.core.pagination.cursor import CursorCodec

logger = logging.getLogger(__name__)


class PaginationStyle(str, Enum):
    """Which family of arguments a window was built from."""

    EVERYTHING = "everything"
    OFFSET = "offset"
    CURSOR = "cursor"


class PaginationArguments(BaseModel):
    """Immutable window descriptor.

    Attributes:
        offset: Number of leading items to skip (offset style).
        count: Maximum number of items to return (offset style).
        after: Cursor of the edge the window starts after.
        before: Cursor of the edge the window ends before.
        first: Maximum number of items counted from the window start.
        last: Maximum number of items counted back from the window end.

    Example:
        args = PaginationArguments.offset_based(offset=3, count=4)
        args.resolve(10)  # (3, 7)
    """

    offset: int | None = Field(default=None, description="Items to skip")
    count: int | None = Field(default=None, description="Maximum items to return")
    after: str | None = Field(default=None, description="Start after this cursor")
    before: str | None = Field(default=None, description="End before this cursor")
    first: int | None = Field(default=None, description="Items from the window start")
    last: int | None = Field(default=None, description="Items from the window end")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _single_style(self) -> PaginationArguments:
        has_offset = self.offset is not None or self.count is not None
        has_cursor = any(
            value is not None for value in (self.after, self.before, self.first, self.last)
        )
        if has_offset and has_cursor:
            msg = "offset/count and cursor pagination arguments cannot be combined"
            raise ValueError(msg)
        return self

    @classmethod
    def everything(cls) -> PaginationArguments:
        """Window covering the whole candidate sequence."""
        return _EVERYTHING

    @classmethod
    def offset_based(cls, offset: int | None = None, count: int | None = None) -> PaginationArguments:
        """Build an offset/count window (REST style)."""
        if offset is None and count is None:
            return _EVERYTHING
        return cls(offset=offset if offset is not None else 0, count=count)

    @classmethod
    def cursor_based(
        cls,
        *,
        after: str | None = None,
        before: str | None = None,
        first: int | None = None,
        last: int | None = None,
    ) -> PaginationArguments:
        """Build a Relay cursor window."""
        return cls(after=after, before=before, first=first, last=last)

    @property
    def style(self) -> PaginationStyle:
        """Pagination style these arguments were built with."""
        if self.offset is not None or self.count is not None:
            return PaginationStyle.OFFSET
        if any(value is not None for value in (self.after, self.before, self.first, self.last)):
            return PaginationStyle.CURSOR
        return PaginationStyle.EVERYTHING

    def resolve(self, size: int) -> tuple[int, int]:
        """Resolve the window against a sequence of ``size`` items.

        Args:
            size: Length of the candidate sequence.

        Returns:
            ``(start, end)`` with ``0 <= start <= end <= size``.
        """
        size = max(size, 0)
        style = self.style
        if style is PaginationStyle.OFFSET:
            return self._resolve_offset(size)
        if style is PaginationStyle.CURSOR:
            return self._resolve_cursor(size)
        return 0, size

    def _resolve_offset(self, size: int) -> tuple[int, int]:
        offset = self.offset or 0
        if offset < 0 or (self.count is not None and self.count < 0):
            return 0, 0

        start = min(offset, size)
        if self.count is None:
            return start, size
        return start, min(start + self.count, size)

    def _resolve_cursor(self, size: int) -> tuple[int, int]:
        start, end = 0, size

        if self.after is not None:
            index = _decode_in_range(self.after, size)
            if index is None:
                return 0, 0
            start = index + 1

        if self.before is not None:
            index = _decode_in_range(self.before, size)
            if index is None:
                return 0, 0
            end = min(end, index)

        end = max(end, start)

        if self.first is not None:
            end = min(end, start + max(self.first, 0))
        if self.last is not None:
            start = max(start, end - max(self.last, 0))

        return start, end


def _decode_in_range(cursor: str, size: int) -> int | None:
    index = CursorCodec.decode_index(cursor)
    if index is None or index >= size:
        logger.debug("Pagination cursor outside candidate range", extra={"cursor": cursor, "size": size})
        return None
    return index


_EVERYTHING = PaginationArguments()


__all__ = ["PaginationArguments", "PaginationStyle"]
