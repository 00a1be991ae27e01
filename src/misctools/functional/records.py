"""Helpers for records (string-keyed mappings) and index-addressable sequences.

This module groups the functions that look into, combine, or prune nested
containers of the kind produced by JSON decoding:

    - **deep_merge**: Recursively merge two records, the right side wins.
    - **delete_keys**: Remove keys or indices from a container in place.
    - **get_attribute**: Look up a key, optionally following a ``a->b->c`` path.
    - **has_attribute**: Check that a key is present *and* not ``None``.

Except for :func:`delete_keys`, nothing here mutates its arguments, and nested
containers placed in a result are deep copies.

Example:
    >>> config = deep_merge({"db": {"host": "a", "port": 1}}, {"db": {"port": 2}})
    >>> config
    {'db': {'host': 'a', 'port': 2}}
    >>> get_attribute(config, "db->port", recursive=True)
    2
"""

import copy
from typing import Any, Dict, Iterable, Optional

from misctools.core import config
from misctools.core.types import (
    Container,
    Record,
    as_index,
    is_container,
    is_mutable_container,
    is_record,
)
from misctools.logger.logger import get_logger

__all__ = [
    "deep_merge",
    "delete_keys",
    "get_attribute",
    "has_attribute",
]

logger = get_logger(__name__)

_MISSING = object()


def deep_merge(a: Record, b: Record) -> Dict[str, Any]:
    """Recursively merge two records, values in ``b`` override those in ``a``.

    For a key present in both records, a nested record in ``a`` is merged with
    the record under the same key in ``b``; any other value in ``a`` is
    replaced by ``b``'s value, ``None`` included. Keys present on only one side
    are deep-copied verbatim.

    Args:
        a: Base record.
        b: Overriding record.

    Returns:
        A new ``dict``. Neither input is mutated and the result shares no
        mutable object with them.

    Raises:
        TypeError: If ``a`` or ``b`` is not a record, or if a key holds a
            record in ``a`` but something else in ``b``.
    """
    if not is_record(a):
        raise TypeError(f"deep_merge expects a record as 'a', got {type(a).__name__}.")
    if not is_record(b):
        raise TypeError(f"deep_merge expects a record as 'b', got {type(b).__name__}.")

    return _merge(a, b, path="")


def _merge(a: Record, b: Record, path: str) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}

    for key, a_value in a.items():
        if key not in b:
            merged[key] = copy.deepcopy(a_value)
            continue

        b_value = b[key]
        if is_record(a_value):
            key_path = f"{path}.{key}" if path else str(key)
            if not is_record(b_value):
                raise TypeError(
                    f"Cannot merge key '{key_path}': record on the left, "
                    f"{type(b_value).__name__} on the right."
                )
            logger.debug(f"Merging nested record at '{key_path}'")
            merged[key] = _merge(a_value, b_value, key_path)
        else:
            merged[key] = copy.deepcopy(b_value)

    for key, b_value in b.items():
        if key not in a:
            merged[key] = copy.deepcopy(b_value)

    return merged


def delete_keys(x: Container, keys: Iterable[Any]) -> None:
    """Delete every key in ``keys`` from ``x`` in place.

    Records lose the named keys. For sequences the keys are indices into the
    sequence as it was passed in; they are removed from the highest down, and
    the remaining elements close up (a Python list has no holes). Keys that are
    absent, out of range, or not valid indices are ignored.

    Args:
        x: Mutable record or mutable sequence to prune.
        keys: Keys (or indices) to remove.

    Raises:
        TypeError: If ``x`` is neither a mutable record nor a mutable sequence.
    """
    if not is_mutable_container(x):
        raise TypeError(
            f"Must be either a mutable record or sequence, got {type(x).__name__}."
        )

    if is_record(x):
        removed = [key for key in keys if x.pop(key, _MISSING) is not _MISSING]
        logger.debug(f"Deleted {len(removed)} key(s) from record: {removed}")
        return

    size = len(x)
    targets = {as_index(key) for key in keys}
    indices = sorted((i for i in targets if i is not None and i < size), reverse=True)
    for index in indices:
        del x[index]
    logger.debug(f"Deleted {len(indices)} index(es) from sequence of {size}")


def _lookup(obj: Container, key: Any) -> Any:
    """Return the value under ``key`` or ``_MISSING``."""
    if is_record(obj):
        return obj.get(key, _MISSING)
    index = as_index(key)
    if index is None or index >= len(obj):
        return _MISSING
    return obj[index]


def get_attribute(
    obj: Container,
    path: Any,
    recursive: bool = False,
    separator: Optional[str] = None,
) -> Any:
    """Get the value stored under ``path`` in a record or sequence.

    Without ``recursive`` the whole of ``path`` is one key. With it, ``path``
    is split on ``separator`` (``settings.PATH_SEPARATOR``, ``"->"`` by
    default) and each segment descends one level. Descent stops at the first
    value that is not a container, and that value is returned even if
    segments remain: ``get_attribute({"a": 5}, "a->b", True)`` is ``5``.

    Sequences are indexed with ints or digit strings (``"items->0->id"``).

    Args:
        obj: Record or sequence to search.
        path: Key, index, or separator-joined path.
        recursive: Follow nested segments of ``path``.
        separator: Override for the path separator.

    Returns:
        The value found (a deep copy when it is a record or sequence), or
        ``None`` if the (first) key is absent.

    Raises:
        TypeError: If ``obj`` is not a record or sequence. ``None`` is rejected
            too; use :func:`has_attribute` to probe optional containers.
    """
    if not is_container(obj):
        raise TypeError(f"Must be either a record or sequence, got {type(obj).__name__}.")

    rest = ""
    if recursive and isinstance(path, str):
        separator = separator or config.settings.PATH_SEPARATOR
        path, _, rest = path.partition(separator)

    value = _lookup(obj, path)
    if value is _MISSING or value is None:
        return None

    if rest and is_container(value):
        return get_attribute(value, rest, recursive=True, separator=separator)
    if is_container(value):
        return copy.deepcopy(value)
    return value


def has_attribute(obj: Optional[Container], key: Any) -> bool:
    """Check that ``key`` is set in ``obj`` and its value is not ``None``.

    This is *not* a containment test: ``has_attribute({"a": None}, "a")`` is
    ``False``. A ``None`` container yields ``False`` as well.

    Raises:
        TypeError: If ``obj`` is neither ``None``, a record nor a sequence.
    """
    if obj is None:
        return False
    if not is_container(obj):
        raise TypeError(f"Must be either a record or sequence, got {type(obj).__name__}.")

    value = _lookup(obj, key)
    return value is not _MISSING and value is not None
