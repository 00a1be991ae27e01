"""Functional primitives for misctools.

Stateless helpers for JSON-like data: merging and probing nested records,
intersecting sequences, and small string encoders. Only
:func:`~misctools.functional.records.delete_keys` mutates its argument.
"""

from misctools.functional.records import (
    deep_merge,
    delete_keys,
    get_attribute,
    has_attribute,
)
from misctools.functional.sequences import loose_equal, multi_intersect, strict_equal
from misctools.functional.strings import abbreviate_name, encode_query_value, is_numeric

__all__ = [
    "deep_merge",
    "delete_keys",
    "get_attribute",
    "has_attribute",
    "multi_intersect",
    "strict_equal",
    "loose_equal",
    "encode_query_value",
    "abbreviate_name",
    "is_numeric",
]
