"""Shared fixtures: an in-memory record source and key-value store."""

from collections.abc import Callable
from typing import Any

import pytest

from viewcache.core.viewport import Viewport
from viewcache.models.options import ViewportOptions

Record = dict[str, Any]
Responder = Callable[[dict[str, Any]], Any]


def make_records(count: int, start: int = 1) -> list[Record]:
    return [{"id": i, "name": f"record {i}"} for i in range(start, start + count)]


def envelope_responder(records: list[Record], page_size: int) -> Responder:
    """Serve ``records`` as paginated envelopes, filtered by the search param."""

    def respond(params: dict[str, Any]) -> dict[str, Any]:
        term = params.get("search")
        matching = [r for r in records if term is None or term in r["name"]]
        page = params.get("page", 1)
        chunk = matching[(page - 1) * page_size : page * page_size]
        has_next = page * page_size < len(matching)
        return {
            "count": len(matching),
            "next": f"/records?page={page + 1}" if has_next else None,
            "results": [dict(r) for r in chunk],
        }

    return respond


class FakeService:
    """Record source answering from a responder, immediately or on demand."""

    def __init__(self, responder: Responder, deferred: bool = False) -> None:
        self.responder = responder
        self.deferred = deferred
        self.calls: list[dict[str, Any]] = []
        self.pending: list[tuple[dict[str, Any], Callable[[Any], None]]] = []
        self.next_id = 1000

    def query(self, params: dict[str, Any], callback: Callable[[Any], None]) -> None:
        self.calls.append(dict(params))
        if self.deferred:
            self.pending.append((dict(params), callback))
        else:
            callback(self.responder(params))

    def deliver(self, index: int = 0) -> None:
        params, callback = self.pending.pop(index)
        callback(self.responder(params))

    def create(self, callback: Callable[[Record], None]) -> None:
        self.next_id += 1
        callback({"id": self.next_id, "name": "draft"})


class MemoryStore:
    """Key-value store kept in a dict."""

    def __init__(self, supported: bool = True) -> None:
        self.data: dict[str, Any] = {}
        self.supported = supported
        self.writes = 0

    @property
    def is_supported(self) -> bool:
        return self.supported

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, payload: Any) -> None:
        self.writes += 1
        self.data[key] = payload


@pytest.fixture
def records() -> list[Record]:
    return make_records(25)


@pytest.fixture
def service(records: list[Record]) -> FakeService:
    return FakeService(envelope_responder(records, 10))


@pytest.fixture
def deferred_service(records: list[Record]) -> FakeService:
    return FakeService(envelope_responder(records, 10), deferred=True)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def make_viewport(service: FakeService) -> Callable[..., Viewport]:
    """Factory building a viewport over the default service."""

    def factory(svc: Any = None, storage: Any = None, hooks: Any = None, **options: Any) -> Viewport:
        options.setdefault("page_size", 10)
        return Viewport(svc or service, ViewportOptions(**options), hooks=hooks, storage=storage)

    return factory


def ids(records: list[Record]) -> list[Any]:
    return [r["id"] for r in records]
