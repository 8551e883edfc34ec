"""State owned by one viewport instance."""

import functools
import logging
from typing import Any

from viewcache.core.hooks import ViewportHooks
from viewcache.core.slicer import slice_viewport
from viewcache.models.options import ViewportOptions
from viewcache.models.pagination import Flags, PaginationState

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class CacheStore:
    """Collections, viewport, pagination and flags of a single viewport.

    The store is the only place this state lives. Collections and the
    viewport are mutated in place so references held by the presentation
    layer stay current.
    """

    def __init__(self, options: ViewportOptions, hooks: ViewportHooks | None = None) -> None:
        self.options = options
        self.hooks = hooks or ViewportHooks()

        self.main: list[Record] = []
        self.search_results: list[Record] = []
        self.viewport: list[Record] = []

        self.pagination = PaginationState.empty()
        # Restored when leaving search mode
        self.saved_pagination = self.pagination.model_copy()

        self.flags = Flags()
        self.server_metadata: dict[str, Any] = {}
        self.response_is_envelope = True

        self.search_text = ""
        self.current_search = ""
        self.first_fetch_done = False

    @property
    def active(self) -> list[Record]:
        """Collection currently displayed: search results while searching."""
        return self.search_results if self.flags.is_searching else self.main

    def compare(self, incoming: Record, existing: Record) -> bool:
        return self.hooks.compare_items(incoming, existing)

    def pagination_for(self, background: bool) -> PaginationState:
        """Live pagination, or the saved snapshot for background updates."""
        return self.saved_pagination if background else self.pagination

    def reset_viewport(self) -> None:
        """Recompute the viewport from the active collection."""
        if self.options.is_caching and self.options.sort_comparator is not None:
            self.main.sort(key=functools.cmp_to_key(self.options.sort_comparator))

        self.viewport[:] = slice_viewport(self.active, self.pagination, self.options)
        logger.debug(
            f"Viewport reset: page {self.pagination.page}, showing {len(self.viewport)} of {len(self.active)} records"
        )

    def clear_viewport(self) -> None:
        self.viewport.clear()

    def reset_pagination(self, saved: bool = False) -> None:
        """Reset live (or saved) pagination to the empty template."""
        self.pagination_for(saved).reset()

    def snapshot_pagination(self) -> None:
        self.saved_pagination = self.pagination.model_copy()

    def restore_pagination(self) -> None:
        """Copy the saved snapshot back into the live pagination."""
        for name, value in self.saved_pagination:
            setattr(self.pagination, name, value)

    def clear_loading(self, is_initial: bool) -> None:
        if is_initial:
            self.flags.is_loading = False
        else:
            self.flags.is_loading_more = False
