"""Configuration source implementations.

This package contains the process environment and in-memory mapping
sources. ``Environment`` imports them lazily when a source is registered.
"""

from .mapping import MappingSource
from .process_env import ProcessEnvSource

__all__ = [
    "MappingSource",
    "ProcessEnvSource",
]
