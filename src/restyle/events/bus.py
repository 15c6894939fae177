"""Synchronous event bus for style generation lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus the caller uses to drive notifications.

    Listeners subscribe to one event type or to every event. Dispatch is
    synchronous: global listeners first, then type listeners, each group in
    registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function that removes it."""
        self._listeners.setdefault(event_type, []).append(callback)

        def unsubscribe() -> None:
            listeners = self._listeners.get(event_type, [])
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._global_listeners:
                self._global_listeners.remove(callback)

        return unsubscribe

    def emit(self, event: Any) -> None:
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
