"""Key filtering for registered sources."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Pattern


@dataclass(frozen=True)
class Filter:
    """Filter restricting which keys of a source are visible to the loader.

    Attributes:
        include_regex: Keys must match this pattern (``re.search``).
    """

    include_regex: Optional[Pattern[str]] = None

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Optional["Filter"]:
        """Create a Filter from a dictionary specification.

        Args:
            d: Dictionary with filter specification.

        Returns:
            Filter instance or None if d is None/empty.
        """
        if not d:
            return None
        regex = d.get("include_regex")
        compiled: Optional[Pattern[str]] = (
            re.compile(regex) if isinstance(regex, str) else None
        )
        return Filter(include_regex=compiled)


def should_include_key(key: str, flt: Optional[Filter]) -> bool:
    """Check if a key should be included based on filter.

    Args:
        key: Source key.
        flt: Filter to apply (None means include all).

    Returns:
        True if key should be included, False otherwise.
    """
    if flt is None:
        return True
    if flt.include_regex and not flt.include_regex.search(key):
        return False
    return True


def apply_filter(values: Mapping[str, Any], flt: Optional[Filter]) -> Dict[str, Any]:
    if flt is None:
        return dict(values)
    return {k: v for k, v in values.items() if should_include_key(k, flt)}
