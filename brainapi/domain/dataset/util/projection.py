"""Projection of the upstream search payload onto Records.

The upstream answers ``{"hits": [{...}, ...], ...}`` where each hit carries
many loosely-typed fields. Only the five Record fields survive. Every function
here is total: malformed input degrades to nulls or an empty list, never an
exception.
"""

import json
from typing import Any

from brainapi.domain.dataset.model.record import RECORD_FIELDS, Record


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Scalars and containers keep their JSON spelling (true, 1.5, {"a":1})
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def record_from_hit(hit: Any) -> Record:
    """Copy the five Record fields out of one hit; anything missing becomes None."""
    if not isinstance(hit, dict):
        return Record()
    return Record(**{field: _as_text(hit.get(field)) for field in RECORD_FIELDS})


def extract_hits(payload: Any) -> list[Any]:
    """Return the ``hits`` array, or [] if it is missing or not an array."""
    if not isinstance(payload, dict):
        return []
    hits = payload.get("hits")
    if not isinstance(hits, list):
        return []
    return hits


def records_from_payload(payload: Any) -> list[Record]:
    return [record_from_hit(hit) for hit in extract_hits(payload)]
