"""In-process transport for named push events."""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[..., Any]


class EventBus:
    """Named channels; every handler receives the event name first."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, name: str, handler: EventHandler) -> Callable[[], None]:
        """Register ``handler`` on channel ``name`` and return its unsubscriber."""
        self._handlers[name].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(name, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, name: str, *args: Any) -> list[Any]:
        """Deliver an event to the handlers of ``name``; returns their results in order."""
        handlers = list(self._handlers.get(name, []))
        logger.debug(f"Emitting '{name}' to {len(handlers)} handlers")
        return [handler(name, *args) for handler in handlers]

    def handler_count(self, name: str) -> int:
        return len(self._handlers.get(name, []))
