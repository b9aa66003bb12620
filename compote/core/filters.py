"""Filtering mechanisms for configuration keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Pattern


@dataclass(frozen=True)
class Filter:
    """Filter for including/excluding configuration keys.

    Attributes:
        include_regex: Keys must match this pattern to be kept.
        exclude_regex: Keys matching this pattern are dropped.
        strip_prefix: Prefix removed from kept keys that start with it.
    """

    include_regex: Optional[Pattern[str]] = None
    exclude_regex: Optional[Pattern[str]] = None
    strip_prefix: Optional[str] = None

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
        include = d.get("include_regex")
        exclude = d.get("exclude_regex")
        return Filter(
            include_regex=re.compile(include) if isinstance(include, str) else None,
            exclude_regex=re.compile(exclude) if isinstance(exclude, str) else None,
            strip_prefix=d.get("strip_prefix"),
        )


def should_include_key(key: str, flt: Optional[Filter]) -> bool:
    """Check if a key should be included based on filter.

    Args:
        key: Configuration key.
        flt: Filter to apply (None means include all).

    Returns:
        True if key should be included, False otherwise.
    """
    if flt is None:
        return True
    if flt.include_regex and not flt.include_regex.search(key):
        return False
    if flt.exclude_regex and flt.exclude_regex.search(key):
        return False
    return True


def apply_filter(mapping: Mapping[str, str], flt: Optional[Filter]) -> Dict[str, str]:
    """Return the entries of a mapping kept by a filter.

    Args:
        mapping: Configuration key-value pairs.
        flt: Filter to apply (None keeps everything).

    Returns:
        New dictionary of kept entries, with the filter's prefix stripped.
        When a stripped key collides with an unprefixed one, the prefixed
        entry wins regardless of input order.
    """
    plain: Dict[str, str] = {}
    stripped: Dict[str, str] = {}
    prefix = flt.strip_prefix if flt is not None else None
    for key, value in mapping.items():
        if not should_include_key(key, flt):
            continue
        if prefix and key.startswith(prefix):
            stripped[key[len(prefix):]] = value
        else:
            plain[key] = value
    plain.update(stripped)
    return plain
