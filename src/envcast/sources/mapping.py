"""In-memory mapping source for programmatic and native-typed values."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..core.filters import Filter, apply_filter
from ..core.source import Source


class MappingSource(Source):
    """Wrap a plain mapping as a source.

    Native values (``bool``, ``int``, ``float``, lists) are passed through
    untouched; the coercers accept them as already typed.
    """

    def __init__(self, data: Mapping[str, Any], name: Optional[str] = None):
        self._data = data
        self.name = name or "mapping"
        self.id = f"mapping:{id(data):x}"

    def load(self, filter: Optional[Filter] = None) -> Dict[str, Any]:
        return apply_filter(self._data, filter)

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def exists(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def reload(self) -> None:
        pass
