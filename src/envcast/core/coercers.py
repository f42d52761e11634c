"""Conversion of raw values into typed scalars."""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from .classifiers import is_boolean, is_number, is_string
from .errors import ParseError
from .types import Scalar

# What a leading-decimal float parse consumes; "0x88" stops after the "0".
_LEADING_DECIMAL = re.compile(r"-?(\d+(\.\d*)?|\.\d+)")


def parse_boolean(value: Any, default_value: Optional[bool] = None) -> bool:
    """Parse a value into a boolean.

    Native booleans are returned unchanged. Strings are accepted when they
    read ``true`` or ``false`` in any case, ignoring surrounding whitespace.

    Args:
        value: Raw value from a source.
        default_value: Returned when ``value`` is not boolean-like.

    Returns:
        The parsed boolean, or ``default_value``.

    Raises:
        ParseError: If ``value`` is not boolean-like and no default is given.
    """
    if not is_boolean(value):
        if default_value is None:
            raise ParseError(f"The value {value!r} is not a boolean")
        return default_value
    if not is_string(value):
        return value
    return value.strip().lower() == "true"


def parse_number(
    value: Any, default_value: Optional[Union[int, float]] = None
) -> Union[int, float]:
    """Parse a value into a number.

    Native ints and floats are returned unchanged. Strings may use ``_``
    digit separators (``10_000.35``). Integral literals give an ``int``,
    decimal literals a ``float``.

    Args:
        value: Raw value from a source.
        default_value: Returned when ``value`` is not number-like.

    Returns:
        The parsed number, or ``default_value``.

    Raises:
        ParseError: If ``value`` is not number-like and no default is given.
    """
    if not is_number(value):
        if default_value is None:
            raise ParseError(f"The value {value!r} is not a number")
        return default_value
    if not is_string(value):
        return value
    text = value.replace("_", "").strip()
    match = _LEADING_DECIMAL.match(text)
    if match is None:
        raise ParseError(f"The value {value!r} is not a number")
    literal = match.group(0)
    if "." in literal:
        return float(literal)
    return int(literal)


def parse_auto(value: Any, default_value: Optional[Scalar] = None) -> Optional[Scalar]:
    """Infer the type of a value: boolean, then number, then string.

    ``"true"`` is always a boolean and ``"10"`` always a number; declare a
    ``string`` field to keep such values as text. Blank strings and values
    that are not scalars give ``default_value``.
    """
    if is_boolean(value):
        return parse_boolean(value)
    if is_number(value):
        return parse_number(value)
    if is_string(value):
        return value.strip() or default_value
    return default_value
