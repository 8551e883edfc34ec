"""Tests for record identity and reconciliation."""

import pytest

from viewcache.core.constants import IS_NEW_KEY, UPDATE_COUNT_KEY, MergeKind
from viewcache.core.identity import (
    identities_match,
    identity_key,
    merge_fetched,
    merge_update,
    record_identity,
    remove_by_identity,
    resolve,
)
from viewcache.exceptions import MissingIdentityError


class TestIdentityKey:
    def test_prefers_id(self) -> None:
        assert identity_key({"user_id": 3, "id": 1}) == "id"

    def test_falls_back_to_first_key_containing_id(self) -> None:
        assert identity_key({"name": "x", "user_id": 3, "uuid": "u"}) == "user_id"

    def test_engine_keys_never_identify(self) -> None:
        assert identity_key({IS_NEW_KEY: True, "name": "x"}) is None

    def test_record_identity_raises_without_identity(self) -> None:
        with pytest.raises(MissingIdentityError) as exc_info:
            record_identity({"name": "anonymous"})
        assert exc_info.value.record == {"name": "anonymous"}

    def test_identities_match(self) -> None:
        assert identities_match({"id": 1, "name": "a"}, {"id": 1, "name": "b"})
        assert not identities_match({"id": 1}, {"id": 2})
        assert not identities_match({"id": 1}, {"user_id": 1})


class TestResolve:
    def test_returns_index_of_match(self) -> None:
        collection = [{"id": 1}, {"id": 2}]
        assert resolve({"id": 2}, collection) == 1

    def test_returns_none_without_match(self) -> None:
        assert resolve({"id": 3}, [{"id": 1}]) is None

    def test_uses_custom_comparator(self) -> None:
        collection = [{"id": 1, "slug": "a"}, {"id": 2, "slug": "b"}]
        assert resolve({"slug": "b"}, collection, lambda new, old: new["slug"] == old["slug"]) == 1


class TestMergeUpdate:
    def test_existing_record_is_extended_and_counted(self) -> None:
        cached = {"id": 1, "name": "old", "extra": True}
        collection = [cached]

        merge_update({"id": 1, "name": "new"}, collection)
        result = merge_update({"id": 1, "name": "newer"}, collection)

        assert result.kind == MergeKind.UPDATED
        assert result.target is cached
        assert cached == {"id": 1, "name": "newer", "extra": True, UPDATE_COUNT_KEY: 2}

    def test_incoming_markers_do_not_overwrite_cached_ones(self) -> None:
        cached = {"id": 1, UPDATE_COUNT_KEY: 4}
        merge_update({"id": 1, UPDATE_COUNT_KEY: 0, IS_NEW_KEY: True}, [cached])
        assert cached[UPDATE_COUNT_KEY] == 5
        assert IS_NEW_KEY not in cached

    def test_new_record_goes_first(self) -> None:
        collection = [{"id": 1}]
        result = merge_update({"id": 2}, collection)
        assert result.is_new
        assert collection[0] == {"id": 2, IS_NEW_KEY: True}

    def test_new_record_goes_last_when_reversed(self) -> None:
        collection = [{"id": 1}]
        merge_update({"id": 2}, collection, reverse=True)
        assert collection[-1]["id"] == 2


class TestMergeFetched:
    def test_existing_record_updated_without_markers(self) -> None:
        cached = {"id": 1, "name": "old"}
        result = merge_fetched({"id": 1, "name": "new"}, [cached])
        assert result.kind == MergeKind.UPDATED
        assert cached == {"id": 1, "name": "new"}

    def test_new_record_appended(self) -> None:
        collection = [{"id": 1}]
        merge_fetched({"id": 2}, collection)
        assert [r["id"] for r in collection] == [1, 2]

    def test_new_record_prepended_when_reversed(self) -> None:
        collection = [{"id": 1}]
        merge_fetched({"id": 2}, collection, reverse=True)
        assert [r["id"] for r in collection] == [2, 1]


class TestRemoveByIdentity:
    def test_removes_match(self) -> None:
        collection = [{"id": 1}, {"id": 2}]
        assert remove_by_identity("id", 2, collection) == {"id": 2}
        assert collection == [{"id": 1}]

    def test_missing_record_is_a_no_op(self) -> None:
        collection = [{"id": 1}]
        assert remove_by_identity("id", 9, collection) is None
        assert collection == [{"id": 1}]
