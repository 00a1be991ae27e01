"""String helpers: query-string value encoding and personal name abbreviation."""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus

from misctools.logger.logger import get_logger

__all__ = [
    "encode_query_value",
    "abbreviate_name",
    "is_numeric",
]

logger = get_logger(__name__)

# Optional surrounding whitespace, sign, digits with optional fraction, exponent
_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_NAME_SEPARATORS = re.compile(r"[\s-]+")


def is_numeric(value: Any) -> bool:
    """True for finite ints, floats and Decimals, and strings that spell one.

    Booleans are not numeric.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return _NUMERIC_PATTERN.match(value) is not None
    return False


def _number_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query_value(p: Any) -> str:
    """Encode a value for a document-database query string (e.g. CouchDB keys).

    Numbers are sent bare, strings as JSON-style quoted strings, and an empty
    record as ``{}``::

        encode_query_value(42)     -> '42'
        encode_query_value("hi")   -> '%22hi%22'
        encode_query_value({})     -> '{}'

    Numeric strings count as numbers. Encoding follows form rules, so spaces
    become ``+``.

    Args:
        p: Number, string, or empty record.

    Returns:
        The percent-encoded token.

    Raises:
        ValueError: For any other value, including booleans, ``None``,
            sequences, non-empty records and non-finite numbers.
    """
    if is_numeric(p):
        return quote_plus(_number_to_string(p))
    if isinstance(p, str):
        return quote_plus(f'"{p}"')
    if isinstance(p, Mapping) and len(p) == 0:
        return "{}"

    raise ValueError(
        f"Query parameter must be numeric, string, or empty record, got {p!r}."
    )


def abbreviate_name(n: str) -> str:
    """Abbreviate a person's name to initials plus the last part.

    ``"John Wayne"`` becomes ``"J. Wayne"`` and ``"Jan-Josef Liefers"`` becomes
    ``"J.J. Liefers"``. Names that do not split into several parts are returned
    unchanged.

    Raises:
        TypeError: If ``n`` is not a string.
    """
    if not isinstance(n, str):
        raise TypeError(f"Name must be a string, got {type(n).__name__}.")

    parts = _NAME_SEPARATORS.split(n)
    if len(parts) <= 1:
        return n

    initials = "".join(f"{part.strip()[0]}." for part in parts[:-1] if part.strip())
    logger.debug(f"Abbreviated {len(parts) - 1} forename part(s)")
    return f"{initials} {parts[-1]}"
