"""Presentation-facing viewport over a paginated remote source."""

import logging
from collections.abc import Callable
from typing import Any

from viewcache.api.base import ObjectService
from viewcache.cache.base import KeyValueStore
from viewcache.cache.mirror import PersistenceMirror
from viewcache.core.constants import IS_EDITING_KEY
from viewcache.core.handlers import PushHandlers
from viewcache.core.hooks import ViewportHooks
from viewcache.core.identity import resolve
from viewcache.core.orchestrator import FetchOrchestrator
from viewcache.core.pagination import page_links
from viewcache.core.search import SearchOverlay
from viewcache.core.store import CacheStore
from viewcache.events import EventBus
from viewcache.exceptions import ConfigurationError, RecordNotFoundError, ViewcacheError
from viewcache.models.options import ViewportOptions
from viewcache.models.pagination import Flags, PaginationState
from viewcache.models.result import OperationResult

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class Viewport:
    """Cached, paginated view of the records of a remote source.

    The presentation layer reads ``viewport``, ``pagination``, ``flags``,
    ``server_metadata`` and ``search_text`` and calls the navigation methods.
    Navigation never raises on a precondition violation: it returns an
    :class:`OperationResult` carrying the error instead.

    Example:
        viewport = Viewport(service, ViewportOptions(page_size=20))
        result = viewport.next_page()
        if not result.ok:
            print(result.error)
    """

    def __init__(
        self,
        service: ObjectService | None,
        options: ViewportOptions | None = None,
        hooks: ViewportHooks | None = None,
        storage: KeyValueStore | None = None,
        autoload: bool = True,
    ) -> None:
        """Initialize the viewport.

        Args:
            service: Remote source; may be None when ``should_load`` is disabled
            options: Engine configuration
            hooks: Overrides of comparison, update filtering and query arguments
            storage: Key-value store used when ``storage_identifier`` is set
            autoload: Request the first page immediately
        """
        self.options = options or ViewportOptions()
        self.service = service

        self.store = CacheStore(self.options, hooks)
        self.mirror = PersistenceMirror(self.store, storage)
        self.orchestrator = FetchOrchestrator(self.store, service, self.mirror)
        self.search_overlay = SearchOverlay(self.store, self.orchestrator)
        self.handlers = PushHandlers(self.store, self.mirror, self._refresh)

        if autoload:
            self.orchestrator.request_more()

    # State read by the presentation layer

    @property
    def viewport(self) -> list[Record]:
        return self.store.viewport

    @property
    def pagination(self) -> PaginationState:
        return self.store.pagination

    @property
    def flags(self) -> Flags:
        return self.store.flags

    @property
    def server_metadata(self) -> dict[str, Any]:
        return self.store.server_metadata

    @property
    def main_collection(self) -> list[Record]:
        return self.store.main

    @property
    def search_collection(self) -> list[Record]:
        return self.store.search_results

    @property
    def current_search(self) -> str:
        return self.store.current_search

    @property
    def search_text(self) -> str:
        """Text bound to the search input."""
        return self.store.search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        previous = self.store.search_text
        self.store.search_text = value
        if self.options.auto_search and value != previous:
            self.search()

    # Navigation

    def load_more(self, hide_loading: bool = False) -> OperationResult[list[Record]]:
        """Show the next page (or more records when not paginated)."""
        return self._run(self.orchestrator.request_more, hide_loading)

    def next_page(self) -> OperationResult[list[Record]]:
        return self.load_more()

    def previous_page(self) -> OperationResult[list[Record]]:
        return self._run(self.orchestrator.previous_page)

    def move_to_page(self, page_number: int) -> OperationResult[list[Record]]:
        """Jump to a page; only possible when only the current page is cached."""
        return self._run(self.orchestrator.move_to_page, page_number)

    def refresh(self, hide_loading: bool = False) -> OperationResult[list[Record]]:
        """Discard pagination and reload from the first page."""
        return self._run(self._refresh, hide_loading)

    def page_links(self) -> list[int | None]:
        """Page numbers for the pagination control; None marks an ellipsis."""
        return page_links(self.pagination.page, self.pagination.total_pages)

    # Search

    def search(self, hide_loading: bool = False) -> OperationResult[list[Record]]:
        """Search for the current ``search_text``; empty text clears search."""
        return self._run(self.search_overlay.start_search, self.store.search_text, hide_loading)

    def clear_search(self) -> OperationResult[list[Record]]:
        return self._run(self.search_overlay.clear_search)

    # Local creation and removal

    def create(self) -> None:
        """Create a record remotely and show it first, in edit mode."""
        if self.service is None:
            raise ConfigurationError("An object service is required to create records")

        store = self.store
        store.flags.is_creating_object = True

        def on_created(record: Record) -> None:
            store.flags.is_creating_object = False
            record[IS_EDITING_KEY] = True
            store.flags.edit_mode = True
            store.main.insert(0, record)
            store.reset_viewport()
            self.mirror.persist()

        self.service.create(on_created)

    def remove(self, record: Record) -> OperationResult[Record]:
        """Drop a record from the main collection after its remote deletion."""

        store = self.store
        idx = resolve(record, store.main, store.compare)
        if idx is None:
            error = RecordNotFoundError(record)
            logger.debug(f"remove failed: {error}")
            return OperationResult(error=error)

        removed = store.main.pop(idx)
        store.reset_viewport()
        self.mirror.persist()
        return OperationResult(value=removed)

    # Push events

    def apply_updates(self, records: list[Record], event: str | None = None) -> list[Record]:
        """Merge pushed records; returns the records to notify the user about."""
        return self.handlers.apply_updates(records, event)

    def apply_deletes(self, records: list[Record], event: str | None = None) -> OperationResult[list[Record]]:
        """Remove pushed deletions; the value holds the records removed."""
        try:
            removed = self.handlers.apply_deletes(records, event)
        except ViewcacheError as e:
            logger.debug(f"Delete event rejected: {e}")
            return OperationResult(error=e)
        return OperationResult(value=removed)

    def apply_poll(self, event: str | None = None) -> OperationResult[list[Record]]:
        return self._run(self.handlers.apply_poll, event)

    def bind(self, bus: EventBus) -> Callable[[], None]:
        """Subscribe to the configured update, delete and poll channels.

        Returns:
            Callable removing every subscription made here
        """
        unsubscribers = []
        if self.options.event_update:
            unsubscribers.append(
                bus.subscribe(self.options.event_update, lambda name, records: self.apply_updates(records, name))
            )
        if self.options.event_delete:
            unsubscribers.append(
                bus.subscribe(self.options.event_delete, lambda name, records: self.apply_deletes(records, name))
            )
        if self.options.event_polling:
            unsubscribers.append(bus.subscribe(self.options.event_polling, lambda name, *_: self.apply_poll(name)))

        def unbind() -> None:
            for unsubscribe in unsubscribers:
                unsubscribe()

        return unbind

    def _refresh(self, hide_loading: bool = False) -> None:
        if self.store.flags.is_searching:
            self.search_overlay.clear_search()
        self.store.reset_pagination()
        self.orchestrator.request_more(hide_loading)

    def _run(self, operation: Callable[..., Any], *args: Any) -> OperationResult[list[Record]]:
        """Run a navigation step, capturing precondition errors."""
        try:
            operation(*args)
        except ViewcacheError as e:
            logger.debug(f"{getattr(operation, '__name__', 'operation')} failed: {e}")
            return OperationResult(error=e)
        return OperationResult(value=self.store.viewport)
