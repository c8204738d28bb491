from __future__ import annotations

from collections.abc import Callable

from purge_bridge.models.purge import PurgeEvent

Handler = Callable[[PurgeEvent], None]


class PurgeEventSource:
    """The origin cache's "site purged" hook."""

    def __init__(self, available: bool = True):
        self.available = available
        self.handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        self.handlers.append(handler)

    def fire(self, success: bool) -> None:
        """Deliver one origin purge outcome to every subscriber."""
        event = PurgeEvent(success=success)
        for handler in self.handlers:
            handler(event)
