"""Type definitions for the compote configuration system."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProvenanceRecord:
    """Record tracking which source a merged value came from.

    Attributes:
        key: Configuration key.
        source_index: Position of the winning source in the merge order.
        source_name: Label of the winning source.
        timestamp_loaded: When this value was loaded.
    """

    key: str
    source_index: int
    source_name: str
    timestamp_loaded: datetime
