"""Predicates deciding whether a raw value can be read as a scalar type."""

from __future__ import annotations

import re
from typing import Any

BOOLEAN_PATTERN = re.compile(r"^\s*(true|false)\s*$", re.IGNORECASE)
# 0x is accepted here but the digits are still read as decimal when parsed;
# 0o and 0b string forms are not recognized at all.
NUMBER_PATTERN = re.compile(r"^\s*-?(0x)?(\d[\d_]*|[\d_]*\.\d[\d_]*)\s*$")


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and BOOLEAN_PATTERN.match(value) is not None


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and NUMBER_PATTERN.match(value) is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)
