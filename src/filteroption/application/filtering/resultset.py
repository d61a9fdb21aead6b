"""Application filtering – PreResultSet, candidate IDs gathered before paging."""
from __future__ import annotations

from typing import Iterable, Iterator

from filteroption.application.filtering.filter_option import FilterOption


class PreResultSet:
    """Ordered candidate IDs collected for one :class:`FilterOption`.

    Callers scan their rows, :meth:`add` the IDs that pass their filters
    (typically after :meth:`FilterOption.is_ignored_row`), then cut the page
    with :meth:`page_range` or :meth:`page_ids`.  IDs are never removed and
    duplicates are kept.
    """

    def __init__(self, option: FilterOption) -> None:
        self._option = option
        self._ids: list[int] = []

    @property
    def option(self) -> FilterOption:
        return self._option

    def add(self, id_: int) -> None:
        self._ids.append(id_)

    def extend(self, ids: Iterable[int]) -> None:
        for id_ in ids:
            self.add(id_)

    def ids(self) -> list[int]:
        """Return the accumulated IDs in insertion order (a copy)."""
        return list(self._ids)

    @property
    def count(self) -> int:
        return len(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def page_range(self) -> tuple[int, int]:
        """Return the ``[from, to)`` window of the current page over the IDs."""
        return self._option.calc_range(len(self._ids))

    def page_ids(self) -> list[int]:
        """Return the IDs inside :meth:`page_range`."""
        start, end = self.page_range()
        return self._ids[start:end]

    def __repr__(self) -> str:
        return f"PreResultSet(option={self._option!r}, count={len(self._ids)})"


__all__ = ["PreResultSet"]
