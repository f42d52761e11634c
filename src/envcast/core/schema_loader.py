"""Loader for envcast.yaml project files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import SchemaError
from .filters import Filter
from .types import Field

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "envcast.yaml"
CONFIG_PATH_ENV = "ENVCAST_CONFIG"


class SchemaLoader:
    """Handles loading and parsing of envcast.yaml project files.

    The file declares the schema (which variables to read and how to type
    them) and the sources of each named environment. It never holds
    configuration values itself.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize schema loader.

        Args:
            config_path: Path to envcast.yaml. If None, uses ENVCAST_CONFIG
                or looks in the current directory and its parents.
        """
        self.config_path = self._find_config_file(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def _find_config_file(
        self, config_path: Optional[Union[str, Path]] = None
    ) -> Optional[Path]:
        """Find the envcast.yaml file.

        Args:
            config_path: Explicit path to config file, or None to search.

        Returns:
            Path to config file if found, None otherwise.
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_PATH_ENV) or None

        if config_path is not None:
            path = Path(config_path)
            if path.exists():
                return path
            logger.debug("Project file %s does not exist", path)
            return None

        current = Path.cwd()
        while current != current.parent:
            candidate = current / CONFIG_FILE_NAME
            if candidate.exists():
                return candidate
            current = current.parent

        candidate = current / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

        return None

    def load(self) -> Dict[str, Any]:
        """Load the project file.

        Returns:
            Parsed file contents, or empty dict if there is no file.

        Raises:
            SchemaError: If the file is not valid YAML or not a mapping.
        """
        if self.config_path is None:
            return {}

        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SchemaError(f"Invalid {CONFIG_FILE_NAME} at {self.config_path}: {e}") from e
        except OSError as e:
            logger.warning("Could not read %s at %s: %s", CONFIG_FILE_NAME, self.config_path, e)
            return {}

        if not isinstance(data, dict):
            raise SchemaError(f"{self.config_path} must contain a mapping at the top level")
        self._config = data
        return self._config

    def get_schema(self) -> Dict[str, Field]:
        """Build the field declarations listed under ``schema``.

        A bare string is shorthand for ``{name: <string>}``.

        Raises:
            SchemaError: If a declaration is malformed.
        """
        raw = self.load().get("schema") or {}
        if not isinstance(raw, dict):
            raise SchemaError("'schema' must be a mapping of key to field declaration")
        schema: Dict[str, Field] = {}
        for key, decl in raw.items():
            if isinstance(decl, str):
                decl = {"name": decl}
            elif not isinstance(decl, dict):
                raise SchemaError(f"Field {key!r} must be a mapping or a variable name")
            schema[str(key)] = Field.from_dict(self._parse_field(decl))
        return schema

    @staticmethod
    def _parse_field(decl: Dict[str, Any]) -> Dict[str, Any]:
        parsed = dict(decl)
        # YAML cannot hold a compiled pattern; "separator_regex" asks for one
        if "separator_regex" in parsed:
            parsed["separator"] = re.compile(parsed.pop("separator_regex"))
        return parsed

    def get_environment_config(
        self, environment_name: str
    ) -> Optional[Dict[str, Any]]:
        """Get configuration for a specific environment.

        Args:
            environment_name: Name of the environment.

        Returns:
            Environment configuration dict, or None if not found.
        """
        config = self.load()
        environments = config.get("environments") or {}
        return environments.get(environment_name)

    def get_sources(self, environment_name: str) -> List[Dict[str, Any]]:
        """Get source configurations for an environment.

        Args:
            environment_name: Name of the environment.

        Returns:
            List of source configuration dictionaries.
        """
        env_config = self.get_environment_config(environment_name)
        if env_config is None:
            return []
        return env_config.get("sources") or []

    def parse_source(self, source_config: Dict[str, Any]) -> Dict[str, Any]:
        """Parse a source configuration into components.

        Args:
            source_config: Raw source configuration from YAML.

        Returns:
            Dictionary with ``uri`` and optional ``filter`` and ``name``

        Raises:
            ValueError: If the source has no ``uri``.
        """
        if "uri" not in source_config:
            raise ValueError("Source must have a 'uri'")

        result: Dict[str, Any] = {"uri": str(source_config["uri"])}

        filter_obj = Filter.from_dict(source_config.get("filter"))
        if filter_obj is not None:
            result["filter"] = filter_obj

        if "name" in source_config:
            result["name"] = source_config["name"]

        return result
