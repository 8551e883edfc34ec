"""Search overlay on top of the main collection."""

import logging

from viewcache.core.orchestrator import FetchOrchestrator
from viewcache.core.store import CacheStore

logger = logging.getLogger(__name__)


class SearchOverlay:
    """Switches a viewport between its main listing and search results.

    Entering search saves the main listing's pagination; clearing search
    restores it and drops the search results.
    """

    def __init__(self, store: CacheStore, orchestrator: FetchOrchestrator) -> None:
        self.store = store
        self.orchestrator = orchestrator

    def start_search(self, term: str, hide_loading: bool = False) -> None:
        """Show the first page of results for ``term``; an empty term clears search."""
        store = self.store
        if term == "":
            self.clear_search()
            return

        if not store.flags.is_searching:
            store.snapshot_pagination()

        logger.debug(f"Searching for '{term}'")
        store.flags.is_searching = True
        store.current_search = term
        if not store.options.auto_search:
            store.clear_viewport()

        store.reset_pagination()
        self.orchestrator.request_more(hide_loading)

    def clear_search(self) -> None:
        """Leave search mode and show the main listing again."""
        store = self.store
        store.flags.is_searching = False
        store.flags.is_loading = False
        store.current_search = ""
        store.search_text = ""
        store.restore_pagination()
        store.search_results.clear()
        store.reset_viewport()
