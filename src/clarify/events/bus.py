"""Synchronous event bus for interview and pipeline progress."""

from __future__ import annotations

from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners run inline, in registration order, on the thread that emits.
    There is no buffering: a listener that blocks stalls the interview.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}
        self._global_listeners: list[Callable[[Any], None]] = []

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> None:
        """Register a callback for a specific event type."""
        self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Callable[[Any], None]) -> None:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

    def unsubscribe(self, callback: Callable[[Any], None]) -> None:
        """Remove *callback* wherever it was registered."""
        if callback in self._global_listeners:
            self._global_listeners.remove(callback)
        for callbacks in self._listeners.values():
            if callback in callbacks:
                callbacks.remove(callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
