"""Mirroring of a viewport's main collection into a key-value store."""

import logging
from typing import Any

from viewcache.cache.base import KeyValueStore
from viewcache.core.constants import NEXT_CURSOR_KEY
from viewcache.core.store import CacheStore

logger = logging.getLogger(__name__)


class PersistenceMirror:
    """Writes the cache after every mutation and reads it back on startup.

    Persistence is best-effort: a missing or unsupported store disables it,
    and store errors are logged, never raised.
    """

    def __init__(self, store: CacheStore, backend: KeyValueStore | None = None) -> None:
        self.store = store
        self.backend = backend
        self.key = store.options.storage_identifier

        if self.key and backend is None:
            logger.debug(f"No key-value store supplied, persistence of '{self.key}' disabled")

    @property
    def enabled(self) -> bool:
        """True when a storage identifier is set and the store can be used."""
        if not self.key or self.backend is None:
            return False
        try:
            return bool(self.backend.is_supported)
        except Exception as e:
            logger.debug(f"Key-value store support probe failed: {e}")
            return False

    def hydrate(self) -> Any | None:
        """Payload persisted by a previous session, or None."""
        if not self.enabled:
            return None
        try:
            payload = self.backend.get(self.key)  # type: ignore[union-attr]
        except Exception as e:
            logger.debug(f"Persisted viewport '{self.key}' could not be loaded: {e}")
            return None

        if payload is not None:
            logger.debug(f"Loaded persisted viewport '{self.key}'")
        return payload

    def build_payload(self) -> Any:
        """Payload shaped like a first-page response of the remote source."""
        options = self.store.options
        main = self.store.main
        records = main[: options.page_size] if options.page_size else list(main)

        if not self.store.response_is_envelope:
            return records

        payload = dict(self.store.server_metadata)
        payload[options.array_attr] = records
        if options.page_size and payload.get(NEXT_CURSOR_KEY) is None and len(main) > options.page_size:
            # More records are cached than the persisted first page holds
            payload[NEXT_CURSOR_KEY] = True
        return payload

    def persist(self) -> None:
        """Write the current cache; failures are logged and swallowed."""
        if not self.enabled:
            return
        try:
            self.backend.set(self.key, self.build_payload())  # type: ignore[union-attr]
            logger.debug(f"Persisted viewport '{self.key}' ({len(self.store.main)} records cached)")
        except Exception as e:
            logger.error(f"Error persisting viewport '{self.key}': {e}")
