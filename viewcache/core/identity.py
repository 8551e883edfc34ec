"""Record identity and reconciliation of incoming records into collections."""

import logging
from collections.abc import Callable
from typing import Any

from viewcache.core.constants import (
    ENGINE_KEYS,
    IDENTITY_KEY,
    IDENTITY_SUBSTRING,
    IS_NEW_KEY,
    UPDATE_COUNT_KEY,
    MergeKind,
)
from viewcache.exceptions import MissingIdentityError
from viewcache.models.result import MergeResult

logger = logging.getLogger(__name__)

Record = dict[str, Any]
Comparator = Callable[[Record, Record], bool]


def identity_key(record: Record) -> str | None:
    """Name of the attribute identifying ``record``.

    ``id`` wins when present, otherwise the first attribute whose name
    contains ``id``. Engine-managed attributes never count.
    """
    if IDENTITY_KEY in record:
        return IDENTITY_KEY
    for key in record:
        if key in ENGINE_KEYS:
            continue
        if IDENTITY_SUBSTRING in key:
            return key
    return None


def record_identity(record: Record) -> tuple[str, Any]:
    """Identity attribute name and value of ``record``.

    Raises:
        MissingIdentityError: If the record has no identity attribute
    """
    key = identity_key(record)
    if key is None:
        raise MissingIdentityError(record)
    return key, record[key]


def identities_match(incoming: Record, existing: Record) -> bool:
    """Default comparator: both records carry the same identity value."""
    key = identity_key(incoming)
    if key is None or key not in existing:
        return False
    return incoming[key] == existing[key]


def resolve(record: Record, collection: list[Record], compare: Comparator = identities_match) -> int | None:
    """Index of the cached record matching ``record``, or None."""
    for idx, existing in enumerate(collection):
        if compare(record, existing):
            return idx
    return None


def merge_update(
    record: Record,
    collection: list[Record],
    reverse: bool = False,
    compare: Comparator = identities_match,
) -> MergeResult:
    """Merge a pushed record, tracking update and new markers.

    A match is extended in place and its ``update_count`` incremented. A new
    record is flagged ``is_new`` and placed where the newest records are
    displayed: the head, or the tail when the display is reversed.
    """
    idx = resolve(record, collection, compare)
    if idx is not None:
        existing = collection[idx]
        existing[UPDATE_COUNT_KEY] = existing.get(UPDATE_COUNT_KEY, 0) + 1
        existing.update({k: v for k, v in record.items() if k not in (UPDATE_COUNT_KEY, IS_NEW_KEY)})
        return MergeResult(kind=MergeKind.UPDATED, target=existing)

    record[IS_NEW_KEY] = True
    if reverse:
        collection.append(record)
    else:
        collection.insert(0, record)
    return MergeResult(kind=MergeKind.NEW, target=record)


def merge_fetched(
    record: Record,
    collection: list[Record],
    reverse: bool = False,
    compare: Comparator = identities_match,
) -> MergeResult:
    """Merge a fetched record silently.

    Fetch results re-synchronise the cache, so no markers are touched. New
    records join the end of the listing: the tail, or the head when reversed.
    """
    idx = resolve(record, collection, compare)
    if idx is not None:
        existing = collection[idx]
        existing.update(record)
        return MergeResult(kind=MergeKind.UPDATED, target=existing)

    if reverse:
        collection.insert(0, record)
    else:
        collection.append(record)
    return MergeResult(kind=MergeKind.NEW, target=record)


def remove_by_identity(key: str, value: Any, collection: list[Record]) -> Record | None:
    """Remove and return the record whose ``key`` equals ``value``."""
    for idx, existing in enumerate(collection):
        if key in existing and existing[key] == value:
            logger.debug(f"Removing cached record {key}={value!r}")
            return collection.pop(idx)
    return None
