"""Process environment configuration source."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Mapping, Optional

from ..core.filters import Filter, apply_filter
from ..core.source import Source


class ProcessEnvSource(Source):
    """Configuration source reading the process environment.

    Values are snapshotted on ``load`` so a single load call sees a
    consistent view even if the environment changes underneath it.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = "",
        name: Optional[str] = None,
    ):
        """Initialize ProcessEnvSource.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            prefix: Only keys starting with this prefix are kept, with the
                prefix stripped (``APP_PORT`` -> ``PORT`` for ``APP_``).
            name: Optional custom name for this source.
        """
        self._environ = environ
        self.prefix = prefix
        self.name = name or (f"env:{prefix}*" if prefix else "env")
        self.id = f"env://{prefix}"
        self._cache: Dict[str, Any] = {}

    def _snapshot(self) -> Dict[str, str]:
        environ = os.environ if self._environ is None else self._environ
        if not self.prefix:
            return dict(environ)
        return {
            k[len(self.prefix) :]: v
            for k, v in environ.items()
            if k.startswith(self.prefix)
        }

    def load(self, filter: Optional[Filter] = None) -> Dict[str, Any]:
        self._cache = self._snapshot()
        return apply_filter(self._cache, filter)

    def get(self, key: str) -> Optional[Any]:
        return self._cache.get(key)

    def exists(self, key: str) -> bool:
        return key in self._cache

    def keys(self) -> List[str]:
        return list(self._cache.keys())

    def reload(self) -> None:
        self.load()
