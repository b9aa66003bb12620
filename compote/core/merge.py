"""Merging logic for multiple configuration payloads."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .types import ProvenanceRecord


def merge_configurations(
    payloads: Sequence[Mapping[str, str]],
    source_names: Optional[Sequence[str]] = None,
) -> Tuple[Dict[str, str], Dict[str, ProvenanceRecord]]:
    """Merge multiple payloads into a single configuration.

    Payloads are merged in order with later payloads overriding
    earlier ones for the same keys.

    Args:
        payloads: Key-value mappings in merge order.
        source_names: Optional labels for each payload, used in provenance.

    Returns:
        Tuple of (effective_config, provenance_map) where:
        - effective_config is a new merged configuration dictionary
        - provenance_map tracks which payload each key came from
    """
    effective: Dict[str, str] = {}
    provenance: Dict[str, ProvenanceRecord] = {}
    loaded_at = datetime.now(timezone.utc)

    for index, payload in enumerate(payloads):
        name = source_names[index] if source_names else f"source[{index}]"
        for key, value in payload.items():
            # last source wins
            effective[key] = value
            provenance[key] = ProvenanceRecord(
                key=key,
                source_index=index,
                source_name=name,
                timestamp_loaded=loaded_at,
            )

    return effective, provenance
