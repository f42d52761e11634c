"""Exception hierarchy for envcast."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .types import LoadError


class EnvcastError(Exception):
    """Base class for all envcast errors."""


class ParseError(EnvcastError, ValueError):
    """A raw value could not be coerced to the declared type."""


class SchemaError(EnvcastError, ValueError):
    """A field declaration or project file is malformed."""


class ConfigLoadError(EnvcastError):
    """One or more fields failed to load.

    Raised once per ``load_config`` call, after every field has been tried
    against every source.

    Attributes:
        errors: Every recorded failure, in schema then source order.
    """

    def __init__(self, errors: List["LoadError"]):
        self.errors = list(errors)
        lines = [f"Failed to load {len(self.errors)} configuration value(s):"]
        for err in self.errors:
            lines.append(
                f"  - {err.key} (source #{err.source_index}, {err.env_name}): {err.message}"
            )
        super().__init__("\n".join(lines))
