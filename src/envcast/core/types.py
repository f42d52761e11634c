"""Type definitions for the envcast loader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Pattern, Sequence, Union

from .errors import ParseError, SchemaError

SCALAR_TYPES = ("auto", "boolean", "number", "string")
ARRAY_SUFFIX = "[]"
FIELD_TYPES = SCALAR_TYPES + tuple(f"{t}{ARRAY_SUFFIX}" for t in SCALAR_TYPES)

# A run of commas/semicolons, eating the whitespace around it
DEFAULT_SEPARATOR: Pattern[str] = re.compile(r"\s*[,;]+\s*")

Scalar = Union[bool, int, float, str]
Value = Union[Scalar, List[Scalar], None]


@dataclass(frozen=True)
class Field:
    """Declaration of one configuration value.

    Attributes:
        name: Key to look up in each source (e.g. ``DATABASE_URL``).
        type: One of ``FIELD_TYPES``.
        separator: Item separator for array types. A string splits
            literally, a compiled pattern splits by regex. Empty means the
            default comma/semicolon separator.
        default_value: Fallback when the value is absent or unparseable.
            ``None`` means no default.
        is_array: Alternative spelling of the ``[]`` suffix.
    """

    name: str
    type: str = "auto"
    separator: Optional[Union[str, Pattern[str]]] = None
    default_value: Any = None
    is_array: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("Field name must be a non-empty string")
        if self.type not in FIELD_TYPES:
            raise SchemaError(
                f"Unsupported field type {self.type!r} for {self.name}; "
                f"expected one of {', '.join(FIELD_TYPES)}"
            )

    @property
    def is_array_type(self) -> bool:
        return self.is_array or self.type.endswith(ARRAY_SUFFIX)

    @property
    def scalar_type(self) -> str:
        if self.type.endswith(ARRAY_SUFFIX):
            return self.type[: -len(ARRAY_SUFFIX)]
        return self.type

    @property
    def item_separator(self) -> Union[str, Pattern[str]]:
        return self.separator or DEFAULT_SEPARATOR

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Field":
        """Create a Field from a plain mapping.

        Accepts ``name``, ``type``, ``separator``, ``default`` (or
        ``default_value``) and ``is_array``.

        Raises:
            SchemaError: If ``name`` is missing or the type is unknown.
        """
        if "name" not in d:
            raise SchemaError(f"Field declaration {dict(d)!r} has no 'name'")
        default = d.get("default_value", d.get("default"))
        if isinstance(default, list):
            default = tuple(default)
        return Field(
            name=str(d["name"]),
            type=d.get("type") or "auto",
            separator=d.get("separator"),
            default_value=default,
            is_array=bool(d.get("is_array", False)),
        )


FieldSpec = Union[Field, Mapping[str, Any]]
Schema = Mapping[str, FieldSpec]


def as_field(spec: FieldSpec) -> Field:
    if isinstance(spec, Field):
        return spec
    return Field.from_dict(spec)


def as_schema(schema: Schema) -> Dict[str, Field]:
    return {key: as_field(spec) for key, spec in schema.items()}


@dataclass(frozen=True)
class LoadError:
    """One field that failed to resolve from one source.

    Attributes:
        key: Output key in the schema.
        env_name: Name looked up in the source.
        source_index: Position of the source in the source list.
        error: The underlying coercion failure.
    """

    key: str
    env_name: str
    source_index: int
    error: ParseError

    @property
    def message(self) -> str:
        return str(self.error)


SourceMapping = Mapping[str, Any]
Sources = Union[SourceMapping, Sequence[SourceMapping]]
