"""Core functionality module."""

from viewcache.core.constants import CachingMode, MergeKind
from viewcache.core.hooks import ViewportHooks

__all__ = [
    "CachingMode",
    "MergeKind",
    "ViewportHooks",
]
