"""Unit tests for slice_range arithmetic and comparator helpers."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from filteroption.application.filtering import (
    compare_from_less,
    slice_range,
    sort_in_place,
    sorted_items,
)


class TestSliceRange:
    def test_unpaginated(self) -> None:
        assert slice_range(3, 0, 42) == (0, 42)

    def test_worked_example(self) -> None:
        assert slice_range(1, 10, 20) == (10, 20)

    def test_overshoot_wraps_to_first_page(self) -> None:
        # from = 20 > 15, so from = 15 - 20 = -5, clamped to 0; to = 0 + 10
        assert slice_range(2, 10, 15) == (0, 10)

    def test_empty_set(self) -> None:
        assert slice_range(0, 10, 0) == (0, 0)

    @given(
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=1, max_value=100),
        st.integers(min_value=0, max_value=10_000),
    )
    def test_window_within_bounds(self, page_number: int, page_size: int, full: int) -> None:
        start, end = slice_range(page_number, page_size, full)
        assert 0 <= start <= end <= full
        assert end - start <= page_size


class TestComparators:
    def test_compare_from_less(self) -> None:
        cmp = compare_from_less(lambda a, b: a < b)
        assert cmp(1, 2) == -1
        assert cmp(2, 1) == 1
        assert cmp(2, 2) == 0

    def test_sorted_items_returns_new_list(self) -> None:
        items = ["b", "c", "a"]
        result = sorted_items(items, compare_from_less(lambda a, b: a < b), desc=True)
        assert result == ["c", "b", "a"]
        assert items == ["b", "c", "a"]

    def test_sort_in_place(self) -> None:
        items = [3, 1, 2]
        sort_in_place(items, compare_from_less(lambda a, b: a < b))
        assert items == [1, 2, 3]
