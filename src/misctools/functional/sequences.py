"""Set operations over ordered sequences.

Elements are compared through an explicit equality function rather than
hashing, so unhashable values (records, nested lists) can be intersected too.
Two policies ship with the package, see :class:`misctools.core.enums.EqualityPolicy`.
"""

import copy
import math
import numbers
from collections.abc import Mapping
from typing import Any, Callable, List, Sequence, Union

from pydantic import ValidationError

from misctools.core import config
from misctools.core.enums import EqualityPolicy
from misctools.core.types import SEQUENCE_LIST_ADAPTER, is_sequence
from misctools.logger.logger import get_logger

__all__ = [
    "multi_intersect",
    "strict_equal",
    "loose_equal",
]

logger = get_logger(__name__)

EqualityFunc = Callable[[Any, Any], bool]


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "record"
    if is_sequence(value):
        return "sequence"
    return type(value).__qualname__


def strict_equal(x: Any, y: Any) -> bool:
    """``x == y``, restricted to values of the same kind.

    Numbers compare across int/float (``1 == 1.0``) but never with booleans or
    strings. The rule applies at every nesting level, so ``[1]`` and ``[True]``
    differ.
    """
    kind = _kind(x)
    if kind != _kind(y) or x != y:
        return False
    if kind == "record":
        return all(strict_equal(value, y[key]) for key, value in x.items())
    if kind == "sequence":
        return all(strict_equal(a, b) for a, b in zip(x, y))
    return True


def _legacy_string(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def loose_equal(x: Any, y: Any) -> bool:
    """Compare scalars by their legacy string rendering.

    ``1``, ``1.0``, ``"1"`` and ``True`` are equal; so are ``None``, ``False``
    and ``""``. Records and sequences fall back to :func:`strict_equal`.
    """
    if _kind(x) in ("record", "sequence") or _kind(y) in ("record", "sequence"):
        return strict_equal(x, y)
    return _legacy_string(x) == _legacy_string(y)


_POLICIES = {
    EqualityPolicy.STRICT: strict_equal,
    EqualityPolicy.LOOSE: loose_equal,
}


def _resolve_equality(
    equality: Union[EqualityPolicy, EqualityFunc, None],
) -> EqualityFunc:
    if equality is None:
        equality = config.settings.INTERSECTION_EQUALITY
    if isinstance(equality, EqualityPolicy):
        return _POLICIES[equality]
    if callable(equality):
        return equality
    raise TypeError(
        f"equality must be an EqualityPolicy or a callable, got {type(equality).__name__}."
    )


def _contains(values: Sequence[Any], item: Any, equal: EqualityFunc) -> bool:
    return any(equal(item, other) for other in values)


def _intersect(
    left: Sequence[Any], right: Sequence[Any], equal: EqualityFunc
) -> List[Any]:
    result: List[Any] = []
    for item in left:
        if _contains(right, item, equal) and not _contains(result, item, equal):
            result.append(item)
    return result


def multi_intersect(
    sequences: Sequence[Sequence[Any]],
    equality: Union[EqualityPolicy, EqualityFunc, None] = None,
) -> List[Any]:
    """Intersect two or more sequences.

    The first two sequences are intersected, then the running result is
    intersected with each remaining one. The result keeps the order in which
    values first appear in ``sequences[0]``, holds each value once, and is a
    fresh dense list (nested values are deep copies).

    Args:
        sequences: At least two sequences.
        equality: ``EqualityPolicy`` member or a ``(x, y) -> bool`` callable.
            Defaults to ``settings.INTERSECTION_EQUALITY`` (strict).

    Returns:
        Values present in every sequence.

    Raises:
        ValueError: If fewer than two sequences are given, or the argument is
            not a sequence of sequences.
        TypeError: If ``equality`` is neither a policy nor callable.

    Example:
        >>> multi_intersect([[1, 2, 3], [2, 3, 4], [3, 4, 5]])
        [3]
        >>> multi_intersect([[1, "2"], ["1", 2]], equality=EqualityPolicy.LOOSE)
        [1, '2']
    """
    equal = _resolve_equality(equality)

    try:
        validated = SEQUENCE_LIST_ADAPTER.validate_python(sequences)
    except ValidationError as e:
        raise ValueError(
            f"multi_intersect requires a sequence of at least two sequences: {e}"
        ) from e

    running = _intersect(validated[0], validated[1], equal)
    for other in validated[2:]:
        if not running:
            break
        running = _intersect(running, other, equal)

    logger.debug(
        f"Intersected {len(validated)} sequences down to {len(running)} value(s)"
    )
    return copy.deepcopy(running)
