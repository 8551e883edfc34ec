"""
Constants and configuration values for the viewport cache engine.
"""

from enum import IntEnum, StrEnum

# Version
PACKAGE_VERSION = "0.1.0"

# Engine-managed record attributes
IS_NEW_KEY = "is_new"
UPDATE_COUNT_KEY = "update_count"
IS_EDITING_KEY = "is_editing"
ENGINE_KEYS = frozenset({IS_NEW_KEY, UPDATE_COUNT_KEY, IS_EDITING_KEY})

# Identity attribute lookup
IDENTITY_KEY = "id"
IDENTITY_SUBSTRING = "id"

# Response envelope
DEFAULT_ARRAY_ATTR = "results"
NEXT_CURSOR_KEY = "next"
COUNT_KEY = "count"

# Namespace of persisted viewports in the disk cache
STORAGE_NAMESPACE = "viewports"

# Query parameters sent to the remote source
PAGE_PARAM = "page"
SEARCH_PARAM = "search"


class CachingMode(StrEnum):
    """How much fetched history the cache keeps."""

    FULL = "full"
    PAGE_ONLY = "page-only"


class MergeKind(StrEnum):
    """Outcome of reconciling one incoming record."""

    NEW = "new"
    UPDATED = "updated"


class APIConstants(IntEnum):
    """API-related limits and constants."""

    DEFAULT_PAGE_SIZE = 10
    REQUEST_TIMEOUT = 30
    BACKOFF_MAX_TRIES = 5
    BACKOFF_FACTOR = 2
    BACKOFF_MAX_VALUE = 30


class DisplayConstants(IntEnum):
    """Display and formatting limits."""

    MAX_COLUMNS = 6
    MAX_CELL_LENGTH = 40
