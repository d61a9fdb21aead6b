"""Application filtering – page slice arithmetic."""
from __future__ import annotations


def slice_range(page_number: int, page_size: int, full: int) -> tuple[int, int]:
    """Return the ``[from, to)`` window of page *page_number* over *full* rows.

    A non-positive *page_size* selects every row.  When the page starts past
    the end, ``from`` becomes ``full - from`` before the negative clamp, so an
    overshooting page yields the first page rather than an empty window::

        >>> slice_range(1, 10, 20)
        (10, 20)
        >>> slice_range(2, 10, 15)
        (0, 10)
    """
    if page_size <= 0:
        return 0, full

    start = page_number * page_size
    if start > full:
        start = full - start
    if start < 0:
        start = 0

    end = start + page_size
    if end > full:
        end = full
    return start, end


__all__ = ["slice_range"]
