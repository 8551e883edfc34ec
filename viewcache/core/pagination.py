"""Pagination arithmetic shared by the slicer and the presentation layer."""

import math
from collections.abc import Sequence
from typing import Any


def total_pages(total_results: int, page_size: int) -> int:
    """Number of pages needed to show ``total_results`` records."""
    if page_size <= 0:
        return 0
    return math.ceil(total_results / page_size)


def index_of(collection: Sequence[Any], item: Any) -> int:
    """Position of ``item`` in ``collection`` by object identity, or -1."""
    for idx, candidate in enumerate(collection):
        if candidate is item:
            return idx
    return -1


def cached_item_indices(collection: Sequence[Any], viewport: Sequence[Any]) -> tuple[int, int] | None:
    """1-based positions of the viewport's first and last record inside the collection.

    Returns None for an empty viewport, in which case the previous indices are kept.
    """
    if not viewport:
        return None
    first = index_of(collection, viewport[0]) + 1
    last = index_of(collection, viewport[-1]) + 1
    return first, last


def page_item_indices(page: int, page_size: int, viewport_length: int) -> tuple[int, int]:
    """First and last item numbers when only the current page is held."""
    first = page_size * (page - 1) + 1
    last = first + viewport_length - 1
    if last == 0:
        first = 0
    return first, last


def page_links(page: int, number_pages: int) -> list[int | None]:
    """Page numbers shown by the pagination control; None marks an ellipsis.

    The window always offers the first and last page, the neighbours of the
    current page, and one extra page when the current page sits at an edge.
    """
    links: list[int | None] = []
    if number_pages >= 1 and page > 1:
        links.append(1)
    if page >= 4:
        links.append(None)
    if page - 2 > 1 and page == number_pages:
        links.append(page - 2)
    if page - 1 > 1:
        links.append(page - 1)
    links.append(page)
    if page + 1 < number_pages:
        links.append(page + 1)
    if page + 2 < number_pages and page < 3:
        links.append(page + 2)
    if page < number_pages - 1:
        links.append(None)
    if number_pages > 1 and page < number_pages:
        links.append(number_pages)
    return links
