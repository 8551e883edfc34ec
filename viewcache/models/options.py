"""Per-viewport engine configuration."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from viewcache.core.constants import DEFAULT_ARRAY_ATTR, CachingMode

Record = dict[str, Any]
SortComparator = Callable[[Record, Record], int]


class ViewportOptions(BaseModel):
    """Options fixed when a viewport is created."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_size: int | None = Field(default=None, description="Records per page; None loads more without paging")
    reverse: bool = Field(default=False, description="Newest records are shown last")
    caching: CachingMode = Field(default=CachingMode.FULL, description="Keep full history or only the last page")
    bidirectional: bool = Field(default=True, description="Cached pages can be navigated backwards")
    sort_comparator: SortComparator | None = Field(
        default=None, description="cmp-style function keeping the main collection sorted"
    )
    array_attr: str = Field(default=DEFAULT_ARRAY_ATTR, description="Envelope key holding the record list")
    query_args: dict[str, Any] = Field(default_factory=dict, description="Arguments sent with every query")
    initial_query_args: dict[str, Any] = Field(default_factory=dict, description="Arguments sent with the first query")
    query_method: str = Field(default="query", description="Name of the remote source method used for queries")
    auto_search: bool = Field(default=False, description="Search while the search text changes")
    notifiable_updates: bool = Field(default=False, description="Updated records are reported for notification")
    should_load: bool = Field(default=True, description="Query the remote source at all")
    storage_identifier: str | None = Field(default=None, description="Key of the persisted viewport")
    event_update: str | None = None
    event_delete: str | None = None
    event_polling: str | None = None

    @field_validator("page_size")
    @classmethod
    def check_page_size(cls, v: int | None) -> int | None:
        """Reject non-positive page sizes."""
        if v is not None and v <= 0:
            raise ValueError("page_size must be a positive integer")
        return v

    @field_validator("storage_identifier")
    @classmethod
    def check_storage_identifier(cls, v: str | None) -> str | None:
        """Reject blank storage identifiers."""
        if v is not None and not v.strip():
            raise ValueError("storage_identifier must not be blank")
        return v

    @property
    def is_paginated(self) -> bool:
        """Whether records are shown one page at a time."""
        return self.page_size is not None

    @property
    def is_caching(self) -> bool:
        """Whether the full fetched history is kept."""
        return self.caching == CachingMode.FULL
