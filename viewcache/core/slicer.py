"""Computation of the displayed slice of a collection."""

from typing import Any

from viewcache.core.pagination import cached_item_indices, page_item_indices, total_pages
from viewcache.models.options import ViewportOptions
from viewcache.models.pagination import PaginationState

Record = dict[str, Any]


def slice_bounds(page: int, page_size: int, length: int, bidirectional: bool) -> tuple[int, int]:
    """Start and end indices of ``page`` inside a collection of ``length`` records."""
    end = min(page_size * page, length)
    start = page_size * (page - 1) if bidirectional else 0
    return max(start, 0), max(end, 0)


def slice_viewport(active: list[Record], pagination: PaginationState, options: ViewportOptions) -> list[Record]:
    """Return the records to display and refresh the pagination indices.

    ``pagination.has_more`` is recomputed for a paginated full cache: more is
    available while the server has more or the cache holds records past the
    slice.
    """
    if not options.is_caching or options.page_size is None:
        viewport = list(active)
        update_indices(active, viewport, pagination, options)
        return viewport

    cached = list(active)
    if options.reverse:
        cached.reverse()
    start, end = slice_bounds(pagination.page, options.page_size, len(cached), options.bidirectional)
    viewport = cached[start:end]

    last_cached = cached[-1] if cached else None
    last_shown = viewport[-1] if viewport else None
    pagination.has_more = pagination.has_more_on_server or last_cached is not last_shown

    if options.reverse:
        viewport.reverse()

    update_indices(active, viewport, pagination, options)
    return viewport


def update_indices(
    active: list[Record],
    viewport: list[Record],
    pagination: PaginationState,
    options: ViewportOptions,
) -> None:
    """Recompute first/last item numbers and the page count."""
    if options.page_size is None:
        return

    if options.is_caching:
        indices = cached_item_indices(active, viewport)
        if indices is not None:
            pagination.first_item_index, pagination.last_item_index = indices
    else:
        pagination.first_item_index, pagination.last_item_index = page_item_indices(
            pagination.page, options.page_size, len(viewport)
        )

    pagination.total_pages = total_pages(pagination.total_results, options.page_size)
