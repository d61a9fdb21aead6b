"""Application filtering – list-query normalization, paging, sorting, visibility."""
from filteroption.application.filtering.decoding import decode_query, encode_query
from filteroption.application.filtering.filter_option import FilterOption
from filteroption.application.filtering.ranges import slice_range
from filteroption.application.filtering.resultset import PreResultSet
from filteroption.application.filtering.rule import ShowDeletedRule
from filteroption.application.filtering.sorting import (
    compare_from_less,
    sort_in_place,
    sorted_items,
)

__all__ = [
    "FilterOption",
    "PreResultSet",
    "ShowDeletedRule",
    "compare_from_less",
    "decode_query",
    "encode_query",
    "slice_range",
    "sort_in_place",
    "sorted_items",
]
