"""Cache module for viewcache."""

from viewcache.cache.base import DiskCacheStore, KeyValueStore
from viewcache.cache.mirror import PersistenceMirror

__all__ = [
    "DiskCacheStore",
    "KeyValueStore",
    "PersistenceMirror",
]
