from .classifiers import is_boolean, is_number, is_string
from .coercers import parse_auto, parse_boolean, parse_number
from .environment import Environment
from .errors import ConfigLoadError, EnvcastError, ParseError, SchemaError
from .filters import Filter
from .loader import load_config
from .resolver import parse_config
from .source import RegisteredSource, Source
from .types import Field, LoadError

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
