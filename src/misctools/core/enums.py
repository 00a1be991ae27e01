"""Enumerations shared across misctools."""

from enum import Enum

__all__ = ["EqualityPolicy"]


class EqualityPolicy(Enum):
    """How :func:`misctools.functional.sequences.multi_intersect` compares values.

    Attributes:
        STRICT: Python equality, but values of different kinds never match
            (``True != 1``, ``1 != "1"``). ``1 == 1.0`` still holds.
        LOOSE: Values match when their legacy string renderings match, so
            ``1``, ``1.0``, ``"1"`` and ``True`` are all the same element.
    """

    STRICT = "strict"
    LOOSE = "loose"
