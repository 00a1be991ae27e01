"""Reusable type definitions for misctools.

Type Aliases:
    Record: A string-keyed mapping whose values may be anything.
    Container: Either a Record or a non-string sequence.
    SequenceList: A list of at least two sequences, validated by pydantic.

The ``is_record`` / ``is_sequence`` predicates are the single place where the
package decides what counts as a Record or a Sequence. Strings and bytes are
sequences to Python but scalars here.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Annotated, Any, List, Union

import annotated_types as at
from pydantic import TypeAdapter

__all__ = [
    "Record",
    "Container",
    "SequenceList",
    "SEQUENCE_LIST_ADAPTER",
    "is_record",
    "is_sequence",
    "is_container",
    "is_mutable_container",
    "as_index",
]

Record = Mapping[str, Any]

Container = Union[Mapping[str, Any], Sequence[Any]]

# A list of sequences with at least two members
SequenceList = Annotated[List[List[Any]], at.MinLen(2)]

SEQUENCE_LIST_ADAPTER = TypeAdapter(SequenceList)

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def is_container(value: Any) -> bool:
    return is_record(value) or is_sequence(value)


def is_mutable_container(value: Any) -> bool:
    """True for containers that support in-place key removal."""
    if isinstance(value, MutableMapping):
        return True
    return isinstance(value, MutableSequence) and not isinstance(value, bytearray)


def as_index(key: Any) -> int | None:
    """Interpret ``key`` as a sequence index.

    Accepts non-negative ints and strings made only of decimal digits, so path
    segments such as ``"0"`` address list elements. Booleans and everything
    else return ``None``.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    return None
