"""Unit tests for pagination window resolution."""

from __future__ import annotations

import base64

import pytest
from pydantic import ValidationError

from buildserver_service.core.pagination import CursorCodec, PaginationArguments, PaginationStyle


def cursor(position: int) -> str:
    return CursorCodec.encode_index(position)


def deeply_nested_cursor(depth: int = 100_000) -> str:
    return base64.urlsafe_b64encode(("[" * depth + "]" * depth).encode()).decode()


# ──────────────────────────────────────────────────────────────
# Everything / offset style
# ──────────────────────────────────────────────────────────────


class TestEverything:
    def test_covers_whole_sequence(self):
        assert PaginationArguments.everything().resolve(10) == (0, 10)

    def test_empty_sequence(self):
        assert PaginationArguments.everything().resolve(0) == (0, 0)

    def test_offset_based_without_values_is_everything(self):
        args = PaginationArguments.offset_based(None, None)

        assert args.style is PaginationStyle.EVERYTHING
        assert args.resolve(7) == (0, 7)


class TestOffsetWindow:
    @pytest.mark.parametrize(
        ("offset", "count", "size", "expected"),
        [
            (3, 4, 10, (3, 7)),
            (0, 5, 3, (0, 3)),
            (8, 5, 10, (8, 10)),
            (10, 5, 10, (10, 10)),
            (25, 5, 10, (10, 10)),
            (2, 0, 10, (2, 2)),
            (4, None, 10, (4, 10)),
        ],
    )
    def test_window(self, offset, count, size, expected):
        args = PaginationArguments.offset_based(offset=offset, count=count)

        assert args.style is PaginationStyle.OFFSET
        assert args.resolve(size) == expected

    @pytest.mark.parametrize(("offset", "count"), [(-1, 5), (0, -3), (-2, -2)])
    def test_negative_values_give_empty_window(self, offset, count):
        assert PaginationArguments.offset_based(offset=offset, count=count).resolve(10) == (0, 0)

    def test_window_never_exceeds_bounds(self):
        for size in range(0, 6):
            for offset in range(0, 8):
                for count in range(0, 8):
                    start, end = PaginationArguments.offset_based(offset, count).resolve(size)
                    assert 0 <= start <= end <= size
                    assert end - start <= count


# ──────────────────────────────────────────────────────────────
# Cursor style
# ──────────────────────────────────────────────────────────────


class TestCursorWindow:
    def test_first(self):
        assert PaginationArguments.cursor_based(first=3).resolve(10) == (0, 3)

    def test_after_and_first(self):
        args = PaginationArguments.cursor_based(after=cursor(2), first=3)

        assert args.style is PaginationStyle.CURSOR
        assert args.resolve(10) == (3, 6)

    def test_before_and_last(self):
        assert PaginationArguments.cursor_based(before=cursor(8), last=2).resolve(10) == (6, 8)

    def test_last_alone_counts_from_end(self):
        assert PaginationArguments.cursor_based(last=4).resolve(10) == (6, 10)

    def test_after_and_before(self):
        assert PaginationArguments.cursor_based(after=cursor(1), before=cursor(5)).resolve(10) == (2, 5)

    def test_after_last_item_is_empty(self):
        assert PaginationArguments.cursor_based(after=cursor(9)).resolve(10) == (10, 10)

    def test_before_not_after_after_is_empty(self):
        start, end = PaginationArguments.cursor_based(after=cursor(5), before=cursor(3)).resolve(10)

        assert start == end

    def test_first_and_last_combined(self):
        # first narrows from the start, last then takes the tail of that
        assert PaginationArguments.cursor_based(first=6, last=2).resolve(10) == (4, 6)

    @pytest.mark.parametrize("bad_cursor", ["garbage", "", "eyJ4IjoxfQ=="])
    def test_invalid_cursor_gives_empty_window(self, bad_cursor):
        assert PaginationArguments.cursor_based(after=bad_cursor, first=3).resolve(10) == (0, 0)

    @pytest.mark.parametrize("bad_cursor", ["garbage", "", "eyJ4IjoxfQ=="])
    def test_invalid_before_cursor_gives_empty_window(self, bad_cursor):
        assert PaginationArguments.cursor_based(before=bad_cursor, last=3).resolve(10) == (0, 0)

    @pytest.mark.parametrize("bound", ["after", "before"])
    def test_out_of_range_cursor_gives_empty_window(self, bound):
        assert PaginationArguments.cursor_based(**{bound: cursor(10)}).resolve(10) == (0, 0)

    @pytest.mark.parametrize("bound", ["after", "before"])
    def test_deeply_nested_cursor_payload_gives_empty_window(self, bound):
        args = PaginationArguments.cursor_based(**{bound: deeply_nested_cursor()}, first=3)

        assert args.resolve(10) == (0, 0)

    def test_negative_first_gives_empty_window(self):
        start, end = PaginationArguments.cursor_based(first=-1).resolve(10)

        assert start == end


# ──────────────────────────────────────────────────────────────
# Style mixing
# ──────────────────────────────────────────────────────────────


def test_mixing_offset_and_cursor_arguments_is_rejected():
    with pytest.raises(ValidationError):
        PaginationArguments(offset=2, first=3)


def test_arguments_are_immutable():
    args = PaginationArguments.offset_based(1, 2)

    with pytest.raises(ValidationError):
        args.offset = 5
