"""Cache-related data models."""

from typing import Any

from pydantic import BaseModel

from viewcache.core.constants import COUNT_KEY, NEXT_CURSOR_KEY


class CacheEntryInfo(BaseModel):
    """Summary of one persisted viewport."""

    key: str
    is_envelope: bool = False
    record_count: int = 0
    has_next: bool = False
    total_results: int | None = None

    @classmethod
    def from_payload(cls, key: str, payload: Any, array_attr: str) -> "CacheEntryInfo":
        """Describe a payload written by the persistence mirror."""
        if isinstance(payload, list):
            return cls(key=key, record_count=len(payload))

        records = payload.get(array_attr) or []
        return cls(
            key=key,
            is_envelope=True,
            record_count=len(records),
            has_next=bool(payload.get(NEXT_CURSOR_KEY)),
            total_results=payload.get(COUNT_KEY),
        )
