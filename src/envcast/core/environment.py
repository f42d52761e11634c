from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Union

from .errors import SchemaError
from .filters import Filter
from .loader import load_config
from .schema_loader import SchemaLoader
from .source import RegisteredSource, Source
from .types import Schema

logger = logging.getLogger(__name__)

SourceRef = Union[str, Mapping[str, Any]]


class Environment:
    """Named, ordered collection of sources that a schema is loaded from."""

    def __init__(
        self,
        name: str,
        sources: Optional[List[SourceRef]] = None,
        config_path: Optional[Union[str, Path]] = None,
    ):
        """Initialize an Environment.

        Args:
            name: Name of the environment (e.g., "production", "development").
            sources: Optional list of URIs or mappings to register after the
                sources declared for this environment in envcast.yaml.
            config_path: Optional path to envcast.yaml. If not provided,
                searches for envcast.yaml in current and parent directories.
        """
        self.name = name
        self._registered: List[RegisteredSource] = []
        self._schema_loader = SchemaLoader(config_path)

        self._load_from_config_file()

        if sources:
            self.register_sources(*sources)

    def _load_from_config_file(self) -> None:
        """Register the sources envcast.yaml declares for this environment."""
        for source_config in self._schema_loader.get_sources(self.name):
            try:
                parsed = self._schema_loader.parse_source(source_config)
                self.register_source(
                    parsed["uri"],
                    filter=parsed.get("filter"),
                    name=parsed.get("name"),
                )
            except (ValueError, EnvironmentError) as e:
                logger.warning(
                    "Skipping source %r from %s: %s",
                    source_config, self._schema_loader.config_path, e,
                )

    def register_sources(self, *sources: SourceRef) -> None:
        """Register multiple sources at once, in override order.

        Args:
            *sources: URIs or mappings to register.
        """
        for item in sources:
            self.register_source(item)

    def register_source(
        self,
        uri_or_mapping: SourceRef,
        *,
        filter: Optional[Filter] = None,
        name: Optional[str] = None,
    ) -> None:
        """Register a single source after the ones already registered.

        Args:
            uri_or_mapping: ``env://[PREFIX]``, ``env`` or a mapping.
            filter: Optional filter to apply when loading from this source.
            name: Optional name for the source.
        """
        src = self._create_source(uri_or_mapping, name=name)
        self._registered.append(RegisteredSource(source=src, filter=filter))
        logger.debug("Registered source %s in environment %s", src.name, self.name)

    def _create_source(
        self,
        uri_or_mapping: SourceRef,
        name: Optional[str],
    ) -> Source:
        """Create a Source instance based on the URI scheme.

        Args:
            uri_or_mapping: Source URI or an in-memory mapping.
            name: Optional name for the source.

        Returns:
            Source instance.

        Raises:
            ValueError: If the source type is not supported.
        """
        if isinstance(uri_or_mapping, Mapping):
            from ..sources.mapping import MappingSource

            return MappingSource(uri_or_mapping, name=name)
        s = str(uri_or_mapping)
        if s == "env" or s.startswith("env://"):
            from ..sources.process_env import ProcessEnvSource

            env_prefix = s[len("env://") :] if s.startswith("env://") else ""
            return ProcessEnvSource(prefix=env_prefix, name=name)
        raise ValueError(f"Unsupported source type: {uri_or_mapping}")

    def add_source_type(self, source: Source) -> None:
        """Add a custom source instance.

        Args:
            source: Source instance to add.
        """
        # Allow manual injection of a ready-made source instance
        self._registered.append(RegisteredSource(source=source))

    @property
    def registered_sources(self) -> List[RegisteredSource]:
        return list(self._registered)

    def source_mappings(self) -> List[Dict[str, Any]]:
        """Load every registered source, in registration order.

        With no sources registered, the process environment is used.
        """
        if not self._registered:
            from ..sources.process_env import ProcessEnvSource

            return [ProcessEnvSource().load()]
        return [rs.mapping() for rs in self._registered]

    def schema(self) -> Dict[str, Any]:
        """Get the schema declared in envcast.yaml."""
        return dict(self._schema_loader.get_schema())

    def load(
        self,
        schema: Optional[Schema] = None,
        merge_target: Optional[MutableMapping[str, Any]] = None,
    ) -> MutableMapping[str, Any]:
        """Load a schema against this environment's sources.

        Args:
            schema: Schema to load. Defaults to the one in envcast.yaml.
            merge_target: Mapping to merge results into.

        Returns:
            The resolved configuration.

        Raises:
            SchemaError: If no schema is given and none is declared.
            ConfigLoadError: If any field failed to resolve.
        """
        if schema is None:
            schema = self.schema()
            if not schema:
                raise SchemaError(f"No schema given and none declared for environment {self.name}")
        return load_config(schema, self.source_mappings(), merge_target)

    @property
    def config_file_path(self) -> Optional[Path]:
        """Get the path to the loaded envcast.yaml file, if any.

        Returns:
            Path to envcast.yaml file, or None if not found/loaded.
        """
        return self._schema_loader.config_path
