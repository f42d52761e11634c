"""Loading a whole schema from an ordered list of sources."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, MutableMapping, Optional, Sequence

from .errors import ConfigLoadError, ParseError
from .resolver import parse_config
from .types import LoadError, Schema, SourceMapping, Sources, as_schema

logger = logging.getLogger(__name__)


def as_source_list(sources: Optional[Sources]) -> Sequence[SourceMapping]:
    if sources is None:
        return [os.environ]
    if hasattr(sources, "keys"):
        return [sources]  # type: ignore[list-item]
    # an empty list still resolves every field, against nothing
    return list(sources) or [{}]  # type: ignore[arg-type]


def load_config(
    schema: Schema,
    sources: Optional[Sources] = None,
    merge_target: Optional[MutableMapping[str, Any]] = None,
) -> MutableMapping[str, Any]:
    """Load every field of a schema from one or more sources.

    Sources are applied in order and later sources win. A source that does
    not define a field's name is skipped for that field once the field
    already holds a value, so sparse override sources only replace what they
    actually set.

    Args:
        schema: Output key to field declaration.
        sources: A mapping or an ordered list of mappings. Defaults to
            ``os.environ``.
        merge_target: Mapping to write results into. Its existing entries
            count as already resolved; keys outside the schema are left alone.

    Returns:
        ``merge_target`` when given, otherwise a new dict.

    Raises:
        ConfigLoadError: If any field failed to resolve from any source.
            Raised only after every field and source has been tried.
    """
    fields = as_schema(schema)
    source_list = as_source_list(sources)
    output: MutableMapping[str, Any] = {} if merge_target is None else merge_target
    errors: List[LoadError] = []

    for key, field in fields.items():
        for index, source in enumerate(source_list):
            # a missing or None value is silent once the key has a value
            if source.get(field.name) is None and key in output:
                continue
            try:
                output[key] = parse_config(field, source)
            except ParseError as exc:
                err = LoadError(key=key, env_name=field.name, source_index=index, error=exc)
                logger.warning(
                    "Could not load %s from %s (source #%d): %s",
                    key, field.name, index, exc,
                )
                errors.append(err)
                continue
            logger.debug("Loaded %s from %s (source #%d)", key, field.name, index)

    if errors:
        raise ConfigLoadError(errors)
    return output


def describe_errors(error: ConfigLoadError) -> List[Dict[str, Any]]:
    """Flatten an aggregate failure into JSON-friendly records."""
    return [
        {
            "key": err.key,
            "name": err.env_name,
            "source": err.source_index,
            "message": err.message,
        }
        for err in error.errors
    ]
