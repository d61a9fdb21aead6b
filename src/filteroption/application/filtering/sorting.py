"""Application filtering – direction-aware sorting with three-way comparators."""
from __future__ import annotations

import functools
from typing import Callable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

Compare = Callable[[T, T], int]
Less = Callable[[T, T], bool]


def compare_from_less(less: Less[T]) -> Compare[T]:
    """Adapt a strict ``less(a, b)`` predicate to a three-way comparator."""

    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return compare


def directed(compare: Compare[T], desc: bool) -> Compare[T]:
    """Return *compare*, or *compare* with its sign swapped when *desc*."""
    if not desc:
        return compare
    return lambda a, b: -compare(a, b)


def sorted_items(items: Sequence[T], compare: Compare[T], *, desc: bool = False) -> list[T]:
    """Return a new list of *items* ordered by *compare*.

    The sort is stable: equal items keep their input order in both directions.
    """
    return sorted(items, key=functools.cmp_to_key(directed(compare, desc)))


def sort_in_place(items: MutableSequence[T], compare: Compare[T], *, desc: bool = False) -> None:
    """Sort *items* in place; see :func:`sorted_items`."""
    items[:] = sorted_items(items, compare, desc=desc)


__all__ = ["Compare", "Less", "compare_from_less", "directed", "sort_in_place", "sorted_items"]
