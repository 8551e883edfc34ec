"""Requests to the remote source and ingestion of their results."""

import logging
from typing import Any

from viewcache.api.base import ObjectService
from viewcache.cache.mirror import PersistenceMirror
from viewcache.core.constants import COUNT_KEY, NEXT_CURSOR_KEY, PAGE_PARAM, SEARCH_PARAM
from viewcache.core.identity import merge_fetched
from viewcache.core.store import CacheStore
from viewcache.exceptions import ConfigurationError, InvalidPaginationError, ViewcacheError

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class FetchOrchestrator:
    """Drives paging against the remote source and feeds results into the store."""

    def __init__(self, store: CacheStore, service: ObjectService | None, mirror: PersistenceMirror) -> None:
        self.store = store
        self.service = service
        self.mirror = mirror

        options = store.options
        self._query = getattr(service, options.query_method, None) if service is not None else None
        if service is not None and not callable(self._query):
            raise ConfigurationError(
                f"Object service has no '{options.query_method}' method",
                {"query_method": options.query_method},
            )
        if service is None and options.should_load:
            raise ConfigurationError("An object service is required unless should_load is disabled")

    def request_more(self, hide_loading: bool = False) -> None:
        """Show the next page, from cache when possible, otherwise from the server.

        Args:
            hide_loading: Leave the loading flags untouched (background refresh)

        Raises:
            InvalidPaginationError: If neither the cache nor the server has more records
        """
        store = self.store
        options = store.options
        pagination = store.pagination
        flags = store.flags

        is_initial = pagination.page == 0
        if not hide_loading:
            if is_initial:
                flags.is_loading = True
            else:
                flags.is_loading_more = True

        if options.page_size is not None and options.is_caching and not is_initial:
            lower_bound = options.page_size * pagination.page
            upper_bound = options.page_size * (pagination.page + 1)
            cached = store.active

            if upper_bound > len(cached) and pagination.has_more_on_server:
                self.load_from_server(is_initial=False)
            elif lower_bound < len(cached):
                logger.debug(f"Serving page {pagination.page + 1} from cache")
                pagination.page += 1
                pagination.has_previous = pagination.page > 1
                store.reset_viewport()
                flags.is_loading_more = False
            else:
                flags.is_loading_more = False
                raise InvalidPaginationError(
                    "There are no more records cached or on the server; the next page control should be disabled",
                    page=pagination.page,
                )
        elif options.should_load:
            self.load_from_server(is_initial)
        else:
            store.clear_loading(is_initial)

    def previous_page(self) -> None:
        """Step back one page.

        Raises:
            InvalidPaginationError: If there is no previous page
        """
        store = self.store
        pagination = store.pagination
        if not pagination.has_previous:
            raise InvalidPaginationError(
                "There are no previous pages; the previous page control should be disabled",
                page=pagination.page,
            )

        pagination.page -= 1
        pagination.has_previous = pagination.page > 1

        if store.options.is_caching:
            store.reset_viewport()
        else:
            # Step back once more so the server is asked for the previous page
            pagination.page -= 1
            pagination.has_more_on_server = True
            self.request_more()

    def move_to_page(self, page_number: int) -> None:
        """Jump to ``page_number``; only valid when just the current page is cached.

        Raises:
            InvalidPaginationError: If caching is full or the page is out of range
        """
        pagination = self.store.pagination
        if self.store.options.is_caching:
            raise InvalidPaginationError(
                "Moving to a specific page is only possible when only the current page is cached",
                page=page_number,
            )
        if page_number > pagination.total_pages or page_number < 1:
            raise InvalidPaginationError(f"Invalid page number: {page_number}", page=page_number)
        if page_number == pagination.page:
            return

        pagination.page = page_number - 1
        pagination.has_more_on_server = True
        self.request_more(hide_loading=True)

    def load_from_server(self, is_initial: bool) -> None:
        """Query the remote source for the page after the current one.

        On the startup load a persisted payload, if any, is ingested
        immediately; the network response then merges on top of it.
        """
        store = self.store
        options = store.options
        flags = store.flags

        if self._query is None:
            raise ConfigurationError("No object service to load records from")

        params = dict(store.hooks.get_query_args(is_initial, dict(options.query_args)))
        params[PAGE_PARAM] = store.pagination.page + 1
        skip_page_increment = False

        if is_initial:
            # Only the startup load of the main listing bootstraps from storage
            bootstrap = not flags.is_searching and not store.first_fetch_done
            payload = self.mirror.hydrate() if bootstrap else None
            if payload is not None:
                try:
                    self.ingest(payload, is_initial=True)
                except ViewcacheError as e:
                    logger.debug(f"Ignoring unreadable persisted viewport: {e}")
                else:
                    is_initial = False
                    skip_page_increment = True
            params.update(options.initial_query_args)

        was_searching = flags.is_searching
        dispatched_search = store.current_search
        if was_searching:
            params[SEARCH_PARAM] = dispatched_search

        logger.debug(f"Querying page {params[PAGE_PARAM]} (search={dispatched_search if was_searching else None!r})")

        def on_response(data: Any) -> None:
            if was_searching:
                if store.current_search != dispatched_search:
                    logger.debug(f"Discarding stale results for search '{dispatched_search}'")
                    return
                self.ingest(data, is_initial, skip_page_increment=skip_page_increment)
            else:
                # A search started while the main list was loading
                self.ingest(data, is_initial, is_background=flags.is_searching, skip_page_increment=skip_page_increment)

        self._query(params, on_response)

    def ingest(
        self,
        data: Any,
        is_initial: bool,
        is_background: bool = False,
        skip_page_increment: bool = False,
    ) -> None:
        """Apply one response of the remote source.

        Args:
            data: Record list, or envelope dict holding the list under ``array_attr``
            is_initial: First page of a fresh load; the target collection is cleared
            is_background: Update the main collection and saved pagination without re-slicing the display
            skip_page_increment: Keep the current page number (persisted bootstrap)
        """
        store = self.store
        options = store.options
        items, envelope = self._normalize(data)

        pagination = store.pagination_for(is_background)
        if not skip_page_increment:
            pagination.page += 1
        pagination.has_previous = pagination.page > 1
        pagination.has_more = envelope is not None and envelope.get(NEXT_CURSOR_KEY) is not None
        pagination.has_more_on_server = pagination.has_more

        if not store.flags.is_searching or is_background:
            if is_initial or not options.is_caching:
                store.main.clear()
            for item in items:
                merge_fetched(item, store.main, options.reverse, store.compare)
            target = store.main
        else:
            if is_initial or not options.is_caching:
                store.search_results.clear()
            store.search_results.extend(items)
            target = store.search_results

        count = envelope.get(COUNT_KEY) if envelope is not None else None
        pagination.total_results = count if count is not None else len(target)

        if not is_background:
            store.reset_viewport()
        store.clear_loading(is_initial)

        if is_initial and not store.first_fetch_done:
            store.first_fetch_done = True
            store.hooks.first_fetch_finished()

        self.mirror.persist()

    def _normalize(self, data: Any) -> tuple[list[Record], dict[str, Any] | None]:
        """Split a response into its records and its envelope (None for a plain list)."""
        store = self.store
        if isinstance(data, list):
            store.response_is_envelope = False
            return list(data), None

        if not isinstance(data, dict):
            raise ViewcacheError(f"Unexpected response of type {type(data).__name__}", {"response": data})

        array_attr = store.options.array_attr
        store.response_is_envelope = True
        store.server_metadata.update({key: value for key, value in data.items() if key != array_attr})
        return list(data.get(array_attr) or []), data
