"""Resolution of a single field against a single source."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from .coercers import parse_auto, parse_boolean, parse_number
from .errors import ParseError
from .types import Field, FieldSpec, Scalar, SourceMapping, Value, as_field

logger = logging.getLogger(__name__)

_MISSING = object()


def to_text(value: Any) -> str:
    """Render a raw value as a string the way a source would have written it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    return str(value)


def _parse_string_item(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else to_text(value)


_ITEM_PARSERS: Dict[str, Callable[[Any], Optional[Scalar]]] = {
    "auto": parse_auto,
    "boolean": parse_boolean,
    "number": parse_number,
    "string": _parse_string_item,
}


def _split(field: Field, raw: Any) -> List[Any]:
    if isinstance(raw, (list, tuple)):
        return list(raw)
    if isinstance(raw, str):
        separator = field.item_separator
        if isinstance(separator, str):
            return raw.split(separator)
        return separator.split(raw)
    return []


def _parse_array(field: Field, raw: Any) -> List[Scalar]:
    parse_item = _ITEM_PARSERS[field.scalar_type]
    values: List[Scalar] = []
    for item in _split(field, raw):
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        try:
            parsed = parse_item(item)
        except ParseError as exc:
            logger.debug("Dropping item of %s: %s", field.name, exc)
            continue
        if parsed is not None:
            values.append(parsed)
    if values:
        return values
    default = field.default_value
    if default is None:
        return []
    if isinstance(default, (list, tuple)):
        return list(default)
    return [default]


def _parse_scalar(field: Field, raw: Any) -> Value:
    default = field.default_value
    kind = field.scalar_type
    if kind == "string":
        if raw is _MISSING:
            return "" if default is None else default
        return to_text(raw)
    if kind == "auto":
        return parse_auto(None if raw is _MISSING else raw, default)
    if raw is _MISSING and default is None:
        raise ParseError(f"{field.name} is not defined")
    if kind == "boolean":
        return parse_boolean(None if raw is _MISSING else raw, default)
    return parse_number(None if raw is _MISSING else raw, default)


def parse_config(field: FieldSpec, source: SourceMapping) -> Value:
    """Resolve one field from one source.

    Array fields always give a list: items that fail to parse are dropped,
    and an empty result falls back to the field default. Scalar fields go
    through the matching coercer with the field default as fallback.

    Args:
        field: The declaration, or a mapping accepted by ``Field.from_dict``.
        source: Key/value mapping to read from.

    Returns:
        The typed value for this field from this source.

    Raises:
        ParseError: If a boolean or number field cannot be parsed and has
            no default.
    """
    field = as_field(field)
    raw = source.get(field.name, _MISSING)
    if raw is None:
        raw = _MISSING
    if field.is_array_type:
        return _parse_array(field, None if raw is _MISSING else raw)
    return _parse_scalar(field, raw)
