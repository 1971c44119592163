"""Unit tests for the quota-enforcing filter processor."""

from __future__ import annotations

from buildserver_service.core.items import (
    FilterItemProcessor,
    ItemHolder,
    PredicateFilter,
    collect,
)


def is_even(item: int) -> bool:
    return item % 2 == 0


class TestFilterItemProcessor:
    def test_collects_accepted_items(self):
        result = collect(ItemHolder.of(range(10)), is_even)

        assert result.items == [0, 2, 4, 6, 8]
        assert result.processed == 10
        assert result.has_more is False

    def test_without_filter_accepts_everything(self):
        assert collect(ItemHolder.of([3, 1, 2])).items == [3, 1, 2]

    def test_accepts_item_filter_objects(self):
        result = collect(ItemHolder.of(range(6)), PredicateFilter(lambda item: item > 3))

        assert result.items == [4, 5]

    def test_start_skips_accepted_items(self):
        result = collect(ItemHolder.of(range(10)), is_even, start=2)

        assert result.items == [4, 6, 8]

    def test_count_stops_traversal_and_reports_more(self):
        pulled: list[int] = []

        def source():
            for item in range(100):
                pulled.append(item)
                yield item

        result = collect(ItemHolder.of(source()), is_even, count=3)

        assert result.items == [0, 2, 4]
        assert result.has_more is True
        # Stops on the first accepted item beyond the quota
        assert pulled[-1] == 6

    def test_exact_count_does_not_report_more(self):
        result = collect(ItemHolder.of([0, 2, 4]), is_even, count=3)

        assert result.items == [0, 2, 4]
        assert result.has_more is False

    def test_lookup_limit_bounds_inspected_items(self):
        result = collect(ItemHolder.of(range(100)), lambda item: item > 50, lookup_limit=10)

        assert result.items == []
        assert result.processed == 10
        assert result.lookup_limit_reached is True

    def test_lookup_limit_not_reported_when_source_ends(self):
        result = collect(ItemHolder.of(range(5)), lookup_limit=10)

        assert result.processed == 5
        assert result.lookup_limit_reached is False

    def test_negative_start_and_count_are_clamped(self):
        result = collect(ItemHolder.of(range(3)), start=-5, count=-1)

        assert result.items == []
        assert result.has_more is True

    def test_processor_is_callable(self):
        processor = FilterItemProcessor(is_even, count=1)

        assert processor(1) is True
        assert processor(2) is True
        assert processor(4) is False
        assert processor.result.items == [2]
