"""Pagination and flag models observed by the presentation layer."""

from pydantic import BaseModel


class PaginationState(BaseModel):
    """Pagination metadata of the displayed collection."""

    page: int = 0
    has_more: bool = False
    has_more_on_server: bool = True
    has_previous: bool = False
    total_pages: int = 0
    total_results: int = 0
    first_item_index: int = 0
    last_item_index: int = 0

    @classmethod
    def empty(cls) -> "PaginationState":
        """State used to reset pagination before a fresh load."""
        return cls()

    def reset(self) -> None:
        """Reset every field in place to the empty template."""
        for name, value in PaginationState.empty():
            setattr(self, name, value)


class Flags(BaseModel):
    """Boolean flags describing what the viewport is doing."""

    is_loading: bool = False
    is_loading_more: bool = False
    is_creating_object: bool = False
    is_searching: bool = False
    edit_mode: bool = False

    @property
    def is_search_done(self) -> bool:
        """True once a search was performed and its results are in."""
        return self.is_searching and not self.is_loading
