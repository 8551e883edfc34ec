"""Handlers for pushed update, delete and poll events."""

import logging
from collections.abc import Callable
from typing import Any

from viewcache.cache.mirror import PersistenceMirror
from viewcache.core.identity import merge_update, record_identity, remove_by_identity
from viewcache.core.store import CacheStore

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class PushHandlers:
    """Apply events delivered by the push transport to the main collection."""

    def __init__(
        self,
        store: CacheStore,
        mirror: PersistenceMirror,
        refresh: Callable[[bool], None],
    ) -> None:
        """Initialize handlers.

        Args:
            store: State of the viewport the events apply to
            mirror: Persistence mirror written after each event
            refresh: Reloads the first page; receives ``hide_loading``
        """
        self.store = store
        self.mirror = mirror
        self._refresh = refresh

    def apply_updates(self, records: list[Record], event: str | None = None) -> list[Record]:
        """Merge pushed records and return the ones worth notifying about.

        New records are always returned; updated ones only with
        ``notifiable_updates``. Records are not merged into search results.
        """
        store = self.store
        options = store.options

        records = store.hooks.pre_process_update(event, records)
        if not records:
            return []

        should_reset = options.sort_comparator is not None
        notifiable: list[Record] = []

        for record in records:
            result = merge_update(record, store.main, options.reverse, store.compare)
            if result.is_new:
                should_reset = True
                notifiable.append(result.target)
            elif options.notifiable_updates:
                notifiable.append(result.target)

        logger.debug(f"Applied {len(records)} pushed updates, {len(notifiable)} notifiable")

        if should_reset and not store.flags.is_searching:
            store.reset_viewport()

        self.mirror.persist()
        return notifiable

    def apply_deletes(self, records: list[Record], event: str | None = None) -> list[Record]:
        """Remove pushed deletions from the main collection.

        Every identity is resolved before anything is removed.

        Raises:
            MissingIdentityError: If a record has no identity attribute
        """
        store = self.store
        identities = [record_identity(record) for record in records]

        removed: list[Record] = []
        for key, value in identities:
            record = remove_by_identity(key, value, store.main)
            if record is not None:
                removed.append(record)

        if removed and not store.flags.is_searching:
            store.reset_viewport()

        self.mirror.persist()
        return removed

    def apply_poll(self, event: str | None = None) -> None:
        """Reload from the first page after the poller signalled a change."""
        searching = self.store.flags.is_searching
        self.store.reset_pagination(saved=searching)
        self._refresh(searching)
