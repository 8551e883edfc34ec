"""Tests for pagination arithmetic and the page-link window."""

import pytest

from viewcache.core.pagination import (
    cached_item_indices,
    index_of,
    page_item_indices,
    page_links,
    total_pages,
)


class TestTotalPages:
    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
    )
    def test_rounds_up(self, total: int, size: int, expected: int) -> None:
        assert total_pages(total, size) == expected

    def test_zero_page_size_gives_no_pages(self) -> None:
        assert total_pages(25, 0) == 0


class TestItemIndices:
    def test_index_of_matches_by_identity(self) -> None:
        a = {"id": 1}
        twin = {"id": 1}
        assert index_of([twin, a], a) == 1
        assert index_of([twin], a) == -1

    def test_cached_indices_are_one_based(self) -> None:
        collection = [{"id": i} for i in range(1, 8)]
        assert cached_item_indices(collection, collection[3:6]) == (4, 6)

    def test_cached_indices_of_empty_viewport(self) -> None:
        assert cached_item_indices([{"id": 1}], []) is None

    def test_page_indices(self) -> None:
        assert page_item_indices(3, 10, 5) == (21, 25)

    def test_page_indices_of_empty_first_page(self) -> None:
        assert page_item_indices(1, 10, 0) == (0, 0)


class TestPageLinks:
    def test_single_page(self) -> None:
        assert page_links(1, 1) == [1]

    def test_first_of_three(self) -> None:
        assert page_links(1, 3) == [1, 2, None, 3]

    def test_middle_page(self) -> None:
        assert page_links(3, 10) == [1, 2, 3, 4, None, 10]

    def test_far_from_both_edges(self) -> None:
        assert page_links(6, 10) == [1, None, 5, 6, 7, None, 10]

    def test_last_page_shows_two_before(self) -> None:
        assert page_links(5, 5) == [1, None, 3, 4, 5]
