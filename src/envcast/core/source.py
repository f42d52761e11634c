"""Source protocol and registration for configuration sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .filters import Filter


class Source(Protocol):
    """Protocol for read-only key/value sources.

    A source supplies the raw mapping that fields are resolved against.
    Values may be strings or already-typed scalars and lists.
    """

    id: str
    name: str

    def load(self, filter: Optional[Filter] = None) -> Dict[str, Any]:
        """Load key/value pairs from the source.

        Args:
            filter: Optional filter to apply to keys.

        Returns:
            Dictionary of raw key/value pairs.
        """
        ...

    def get(self, key: str) -> Optional[Any]:
        """Get a single raw value, or None when the key is absent."""
        ...

    def exists(self, key: str) -> bool:
        """Check if a key exists in the source."""
        ...

    def keys(self) -> List[str]:
        """Get all keys from the source."""
        ...

    def reload(self) -> None:
        """Reload values from the source."""
        ...


@dataclass
class RegisteredSource:
    """A source registered with an Environment.

    Attributes:
        source: The source instance.
        filter: Optional filter to apply to source keys.
    """

    source: Source
    filter: Optional[Filter] = None

    def mapping(self) -> Dict[str, Any]:
        return self.source.load(filter=self.filter)
