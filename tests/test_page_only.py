"""Tests for viewports caching only the current page."""

import pytest
from conftest import FakeService, ids

from viewcache.core.constants import CachingMode
from viewcache.exceptions import InvalidPaginationError


@pytest.fixture
def page_only(make_viewport):
    return make_viewport(caching=CachingMode.PAGE_ONLY)


class TestPageOnly:
    def test_only_current_page_is_held(self, page_only) -> None:
        page_only.next_page()

        assert ids(page_only.main_collection) == list(range(11, 21))
        assert ids(page_only.viewport) == list(range(11, 21))
        assert (page_only.pagination.first_item_index, page_only.pagination.last_item_index) == (11, 20)

    def test_move_to_page(self, page_only, service: FakeService) -> None:
        result = page_only.move_to_page(3)

        assert result.ok
        assert service.calls[-1] == {"page": 3}
        assert page_only.pagination.page == 3
        assert ids(page_only.viewport) == list(range(21, 26))
        assert (page_only.pagination.first_item_index, page_only.pagination.last_item_index) == (21, 25)
        assert not page_only.flags.is_loading_more

    def test_move_to_current_page_does_nothing(self, page_only, service: FakeService) -> None:
        page_only.move_to_page(1)
        assert len(service.calls) == 1

    @pytest.mark.parametrize("page_number", [0, 4])
    def test_move_out_of_range(self, page_only, page_number: int) -> None:
        result = page_only.move_to_page(page_number)

        assert isinstance(result.error, InvalidPaginationError)
        assert result.error.page == page_number

    def test_move_requires_page_only_mode(self, make_viewport) -> None:
        result = make_viewport().move_to_page(2)
        assert isinstance(result.error, InvalidPaginationError)

    def test_previous_page_refetches(self, page_only, service: FakeService) -> None:
        page_only.move_to_page(3)

        page_only.previous_page()

        assert service.calls[-1] == {"page": 2}
        assert page_only.pagination.page == 2
        assert page_only.pagination.has_previous
        assert ids(page_only.viewport) == list(range(11, 21))

    def test_page_links(self, page_only) -> None:
        assert page_only.page_links() == [1, 2, None, 3]
