"""Key-value stores backing persisted viewports."""

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from diskcache import Cache

from viewcache.exceptions import CacheError

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Store a viewport can mirror its cache into."""

    @property
    def is_supported(self) -> bool:
        """False when the store cannot be used right now."""
        ...

    def get(self, key: str) -> Any | None:
        """Stored payload, or None when nothing is stored under ``key``."""
        ...

    def set(self, key: str, payload: Any) -> None:
        """Store ``payload`` under ``key``."""
        ...


class DiskCacheStore:
    """DiskCache-backed key-value store, one directory per namespace."""

    def __init__(self, namespace: str = "default", cache_dir: Path | None = None) -> None:
        """Initialize the store.

        Args:
            namespace: Subdirectory isolating this store's keys
            cache_dir: Root cache directory (defaults to ~/.viewcache/cache)
        """
        self.namespace = namespace

        cache_path = (cache_dir or Path.home() / ".viewcache" / "cache") / namespace
        cache_path.mkdir(parents=True, exist_ok=True)

        self.cache = Cache(str(cache_path))
        self.cache_path = cache_path
        self._closed = False

        logger.debug(f"Initialized cache at {cache_path}")

    @property
    def is_supported(self) -> bool:
        return not self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise CacheError(f"Cache store at {self.cache_path} is closed")

    def get(self, key: str) -> Any | None:
        """Load data from cache.

        Args:
            key: Cache key

        Returns:
            Cached data or None if not found
        """
        self._check_open()
        try:
            return self.cache.get(key)
        except Exception as e:
            logger.debug(f"Error loading cache key {key}: {e}")
            return None

    def set(self, key: str, payload: Any) -> None:
        """Save data to cache.

        Args:
            key: Cache key
            payload: Data to cache
        """
        self._check_open()
        self.cache.set(key, payload)
        logger.debug(f"Cached data with key: {key}")

    def delete(self, key: str) -> bool:
        """Delete a specific cache item.

        Args:
            key: Cache key to delete

        Returns:
            True if item was deleted, False if not found
        """
        self._check_open()
        if key in self.cache:
            del self.cache[key]
            return True
        return False

    def keys(self) -> list[str]:
        """All keys currently stored."""
        self._check_open()
        return sorted(str(key) for key in self.cache.iterkeys())

    def clear(self) -> None:
        """Clear all cached data."""
        self._check_open()
        self.cache.clear()
        logger.info(f"Cleared cache namespace {self.namespace}")

    def close(self) -> None:
        if not self._closed:
            self.cache.close()
            self._closed = True

    def __enter__(self) -> "DiskCacheStore":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self.cache)
