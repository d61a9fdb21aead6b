"""Application filtering – FilterOption value object.

Captures the list-query parameters of one request, e.g.
``/customers?sortBy=-name&pageSize=20&show=all``:

* ``pageNumber`` – zero-based page index
* ``pageSize`` – rows per page, ``0`` means "every row"
* ``sortBy`` – ``"name"`` or ``"-name"`` for descending order
* ``show`` – ``""`` live rows only, ``"deleted"`` deleted only, ``"all"`` both
* ``lang`` – requested locale (``"en"``, ``"fr"`` …)
* ``download`` – export mode, disables pagination
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Mapping, MutableSequence, TypeVar

from filteroption.application.filtering.ranges import slice_range
from filteroption.application.filtering.rule import ShowDeletedRule
from filteroption.application.filtering.sorting import Compare, sort_in_place
from filteroption.config.settings import FilterSettings
from filteroption.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FilterOption:
    """Parsed list-query parameters.

    Build one with :meth:`from_query` (or directly), then call
    :meth:`apply_defaults` once to obtain the normalized value the range,
    sort and visibility helpers are meant to read.
    """

    page_number: int = 0
    page_size: int = 0
    sort_by: str = ""
    show: ShowDeletedRule | str = ShowDeletedRule.HIDE_DELETED
    download: bool = False
    lang: str = ""
    _sort_attr: str = dataclasses.field(default="", init=False, repr=False)
    _desc: bool = dataclasses.field(default=False, init=False, repr=False)
    _normalized: bool = dataclasses.field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "FilterOption":
        """Decode raw query parameters; see :func:`decode_query`."""
        from filteroption.application.filtering.decoding import decode_query

        return decode_query(params)

    def to_query(self) -> dict[str, str]:
        """Encode back to query parameters; see :func:`encode_query`."""
        from filteroption.application.filtering.decoding import encode_query

        return encode_query(self)

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def apply_defaults(self, settings: FilterSettings | None = None) -> "FilterOption":
        """Return the normalized copy of this option.

        Download mode forces ``page_number`` and ``page_size`` to 0; otherwise
        an unset ``page_size`` takes ``settings.default_page_size``.  A leading
        ``-`` on ``sort_by`` selects descending order and is stripped.
        Normalizing an already normalized option returns it unchanged.
        """
        if self._normalized:
            return self
        settings = settings or FilterSettings()

        page_number, page_size = self.page_number, self.page_size
        if self.download:
            page_number, page_size = 0, 0
        elif page_size == 0:
            page_size = settings.default_page_size

        sort_attr, desc = self.sort_by, False
        if sort_attr.startswith("-"):
            sort_attr, desc = sort_attr[1:], True

        option = dataclasses.replace(
            self,
            page_number=page_number,
            page_size=page_size,
            sort_by=sort_attr,
        )
        option._set_state(sort_attr, desc, normalized=True)
        _log.debug(
            "filter_option.normalized",
            page_number=page_number,
            page_size=page_size,
            sort_attr=sort_attr,
            desc=desc,
            show=str(getattr(self.show, "value", self.show)),
            download=self.download,
        )
        return option

    def with_lang(self, lang: str) -> "FilterOption":
        """Return a copy with ``lang`` replaced."""
        option = dataclasses.replace(self, lang=lang)
        option._set_state(self._sort_attr, self._desc, normalized=self._normalized)
        return option

    def _set_state(self, sort_attr: str, desc: bool, *, normalized: bool) -> None:
        # derived fields are init=False; replace() resets them to defaults
        object.__setattr__(self, "_sort_attr", sort_attr)
        object.__setattr__(self, "_desc", desc)
        object.__setattr__(self, "_normalized", normalized)

    @property
    def normalized(self) -> bool:
        """``True`` once :meth:`apply_defaults` produced this value."""
        return self._normalized

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def calc_range(self, length: int) -> tuple[int, int]:
        """Return the ``[from, to)`` page window over *length* rows."""
        return slice_range(self.page_number, self.page_size, length)

    def paginate(self, rows: list[T]) -> list[T]:
        """Return the slice of *rows* selected by :meth:`calc_range`."""
        start, end = self.calc_range(len(rows))
        return rows[start:end]

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    @property
    def is_sort_required(self) -> bool:
        """``True`` when the request named a sort attribute."""
        return self._sort_attr != ""

    @property
    def sort_attr(self) -> str:
        """Attribute to sort by, without the descending prefix."""
        return self._sort_attr

    @property
    def is_sort_desc(self) -> bool:
        """``True`` when ``sortBy`` carried a leading ``-``."""
        return self._desc

    def sort_slice(self, items: MutableSequence[T], compare: Compare[T]) -> None:
        """Sort *items* in place by *compare*, reversed when descending."""
        sort_in_place(items, compare, desc=self._desc)

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def is_ignored_row(self, row_deleted: bool) -> bool:
        """``True`` when a row with the given deleted flag must be skipped."""
        if row_deleted and self.show == ShowDeletedRule.HIDE_DELETED:
            return True
        if not row_deleted and self.show == ShowDeletedRule.SHOW_DELETED_ONLY:
            return True
        return False

    def visible_rows(self, rows: Iterable[T], is_deleted: Callable[[T], bool]) -> list[T]:
        """Return the *rows* not excluded by :meth:`is_ignored_row`."""
        return [row for row in rows if not self.is_ignored_row(is_deleted(row))]


__all__ = ["FilterOption"]
