"""Application filtering – query-parameter decoding.

Turns a mapping of query parameters (as produced by ``request.args``,
``request.query_params`` or ``urllib.parse.parse_qs``) into a raw
:class:`FilterOption`.  Multi-valued entries contribute their first value.
"""
from __future__ import annotations

from typing import Any, Mapping

from filteroption.application.filtering.filter_option import FilterOption
from filteroption.application.filtering.rule import ShowDeletedRule
from filteroption.kernel.errors import InvalidQueryParamError
from filteroption.observability.logging import get_logger

_log = get_logger(__name__)

PAGE_NUMBER = "pageNumber"
PAGE_SIZE = "pageSize"
SORT_BY = "sortBy"
SHOW = "show"
DOWNLOAD = "download"
LANG = "lang"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"", "0", "false", "no", "off"})


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else ""
    return value


def _reject(param: str, value: Any, reason: str) -> InvalidQueryParamError:
    _log.warning("filter_option.invalid_param", param=param, value=value, reason=reason)
    return InvalidQueryParamError(param, value, reason)


def _int_param(params: Mapping[str, Any], name: str) -> int:
    raw = _first(params.get(name, ""))
    if isinstance(raw, bool):
        raise _reject(name, raw, "expected an integer")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if text == "":
        return 0
    try:
        return int(text)
    except ValueError:
        raise _reject(name, raw, "expected an integer") from None


def _bool_param(params: Mapping[str, Any], name: str) -> bool:
    raw = _first(params.get(name, ""))
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise _reject(name, raw, "expected a boolean")


def _str_param(params: Mapping[str, Any], name: str) -> str:
    return str(_first(params.get(name, "")))


def decode_query(params: Mapping[str, Any]) -> FilterOption:
    """Build a raw (not yet normalized) :class:`FilterOption` from *params*.

    Missing parameters keep their zero value.

    Raises:
        InvalidQueryParamError: ``pageNumber``/``pageSize`` is not an integer
            or ``download`` is not a recognised boolean.
    """
    return FilterOption(
        page_number=_int_param(params, PAGE_NUMBER),
        page_size=_int_param(params, PAGE_SIZE),
        sort_by=_str_param(params, SORT_BY),
        show=ShowDeletedRule.parse(_str_param(params, SHOW)),
        download=_bool_param(params, DOWNLOAD),
        lang=_str_param(params, LANG),
    )


def encode_query(option: FilterOption) -> dict[str, str]:
    """Return the query parameters that decode back to *option*.

    Zero-valued fields are omitted; a descending sort is written with its
    ``-`` prefix.
    """
    params: dict[str, str] = {}
    if option.page_number:
        params[PAGE_NUMBER] = str(option.page_number)
    if option.page_size:
        params[PAGE_SIZE] = str(option.page_size)
    sort_by = f"-{option.sort_by}" if option.is_sort_desc else option.sort_by
    if sort_by:
        params[SORT_BY] = sort_by
    show = getattr(option.show, "value", option.show)
    if show:
        params[SHOW] = show
    if option.download:
        params[DOWNLOAD] = "true"
    if option.lang:
        params[LANG] = option.lang
    return params


__all__ = [
    "DOWNLOAD",
    "LANG",
    "PAGE_NUMBER",
    "PAGE_SIZE",
    "SHOW",
    "SORT_BY",
    "decode_query",
    "encode_query",
]
