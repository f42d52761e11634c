"""envcast - Typed configuration from environment variables.

Declare a schema of fields, then load booleans, numbers, strings and
lists of them out of one or more key/value sources, with per-field
defaults and a single aggregated error for everything that failed.
"""

import logging

from .core.classifiers import is_boolean, is_number, is_string
from .core.coercers import parse_auto, parse_boolean, parse_number
from .core.environment import Environment
from .core.errors import ConfigLoadError, EnvcastError, ParseError, SchemaError
from .core.filters import Filter
from .core.loader import load_config
from .core.resolver import parse_config
from .core.source import RegisteredSource, Source
from .core.types import Field, LoadError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "is_boolean",
    "is_number",
    "is_string",
    "parse_auto",
    "parse_boolean",
    "parse_number",
    "parse_config",
    "load_config",
    "Environment",
    "Field",
    "LoadError",
    "Filter",
    "Source",
    "RegisteredSource",
    "EnvcastError",
    "ParseError",
    "SchemaError",
    "ConfigLoadError",
]
