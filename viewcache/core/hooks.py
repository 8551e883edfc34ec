"""Override points a viewport owner can customise."""

from typing import Any

from viewcache.core.identity import identities_match

Record = dict[str, Any]


class ViewportHooks:
    """Default behaviour of the overridable viewport hooks.

    Subclass and override any method to change how records are compared,
    which pushed records are accepted, or which arguments are sent to the
    remote source. An instance is passed to the viewport at construction.
    """

    def compare_items(self, incoming: Record, existing: Record) -> bool:
        """Return True when ``incoming`` and ``existing`` are the same record."""
        return identities_match(incoming, existing)

    def pre_process_update(self, event: str | None, records: list[Record]) -> list[Record]:
        """Filter or transform pushed records before they are merged."""
        return records

    def get_query_args(self, is_initial: bool, query_args: dict[str, Any]) -> dict[str, Any]:
        """Arguments for the next query, before page and search are added."""
        return query_args

    def first_fetch_finished(self) -> None:
        """Called once, after the first load has been ingested."""
