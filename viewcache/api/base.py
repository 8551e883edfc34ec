"""Interface of the remote data source a viewport reads from."""

from collections.abc import Callable
from typing import Any, Protocol

Record = dict[str, Any]
QueryCallback = Callable[[Any], None]
CreateCallback = Callable[[Record], None]


class ObjectService(Protocol):
    """Remote source of records.

    Both operations are callback based: the viewport passes a callback and
    never waits on the call. Responses may arrive in any order.
    """

    def query(self, params: dict[str, Any], callback: QueryCallback) -> None:
        """Fetch one page; ``callback`` receives a record list or an envelope dict."""
        ...

    def create(self, callback: CreateCallback) -> None:
        """Create a record remotely; ``callback`` receives the new record."""
        ...
