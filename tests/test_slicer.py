"""Tests for viewport slicing."""

from conftest import ids, make_records

from viewcache.core.constants import CachingMode
from viewcache.core.slicer import slice_bounds, slice_viewport
from viewcache.models.options import ViewportOptions
from viewcache.models.pagination import PaginationState


class TestSliceBounds:
    def test_bidirectional_shows_one_page(self) -> None:
        assert slice_bounds(2, 10, 25, bidirectional=True) == (10, 20)

    def test_forward_only_grows_from_start(self) -> None:
        assert slice_bounds(2, 10, 25, bidirectional=False) == (0, 20)

    def test_end_clamped_to_length(self) -> None:
        assert slice_bounds(3, 10, 25, bidirectional=True) == (20, 25)


class TestSliceViewport:
    def test_slices_current_page(self) -> None:
        active = make_records(25)
        pagination = PaginationState(page=2, total_results=25, has_more_on_server=False)

        viewport = slice_viewport(active, pagination, ViewportOptions(page_size=10))

        assert ids(viewport) == list(range(11, 21))
        assert pagination.has_more
        assert (pagination.first_item_index, pagination.last_item_index) == (11, 20)
        assert pagination.total_pages == 3

    def test_last_cached_page_has_no_more(self) -> None:
        active = make_records(25)
        pagination = PaginationState(page=3, total_results=25, has_more_on_server=False)

        slice_viewport(active, pagination, ViewportOptions(page_size=10))

        assert not pagination.has_more

    def test_server_more_keeps_has_more(self) -> None:
        active = make_records(10)
        pagination = PaginationState(page=1, total_results=25, has_more_on_server=True)

        slice_viewport(active, pagination, ViewportOptions(page_size=10))

        assert pagination.has_more

    def test_reversed_slice_counts_from_the_tail(self) -> None:
        # Newest first in the collection, displayed oldest first
        active = list(reversed(make_records(25)))
        pagination = PaginationState(page=3, total_results=25, has_more_on_server=False)

        viewport = slice_viewport(active, pagination, ViewportOptions(page_size=10, reverse=True))

        assert ids(viewport) == [25, 24, 23, 22, 21]
        assert not pagination.has_more

    def test_page_only_shows_everything_held(self) -> None:
        active = make_records(10, start=21)
        pagination = PaginationState(page=3, total_results=30)

        viewport = slice_viewport(active, pagination, ViewportOptions(page_size=10, caching=CachingMode.PAGE_ONLY))

        assert viewport == active
        assert viewport is not active
        assert (pagination.first_item_index, pagination.last_item_index) == (21, 30)

    def test_unpaginated_leaves_indices_untouched(self) -> None:
        active = make_records(3)
        pagination = PaginationState(page=1, total_results=3)

        viewport = slice_viewport(active, pagination, ViewportOptions())

        assert len(viewport) == 3
        assert pagination.first_item_index == 0
        assert pagination.total_pages == 0

    def test_empty_viewport_keeps_previous_indices(self) -> None:
        pagination = PaginationState(page=1, first_item_index=1, last_item_index=10)

        slice_viewport([], pagination, ViewportOptions(page_size=10))

        assert (pagination.first_item_index, pagination.last_item_index) == (1, 10)
