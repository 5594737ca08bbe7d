"""Queues events and delivers them to registered handlers on update."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, List

from ashmow.context import Service
from ashmow.events import Event, EventHandler


class EventService(Service):
    """Events dispatched from any thread are delivered on the next update.

    Events dispatched while an update is delivering wait for the update after.
    """

    def __init__(self) -> None:
        self._handlers: List[EventHandler] = []
        self._handlers_lock = threading.RLock()
        self._pending: Deque[Event] = deque()
        self._pending_lock = threading.Lock()

    @property
    def name(self) -> str:
        return "event_service"

    def add_event_handler(self, handler: EventHandler) -> None:
        with self._handlers_lock:
            self._handlers.append(handler)

    def remove_event_handler(self, handler: EventHandler) -> None:
        """Remove the first registration of handler; unknown handlers are ignored."""
        with self._handlers_lock:
            for index, item in enumerate(self._handlers):
                if item is handler:
                    del self._handlers[index]
                    return

    def dispatch(self, event: Event) -> None:
        """Queue an event for delivery on the next update."""
        with self._pending_lock:
            self._pending.append(event)

    def update(self) -> None:
        """Deliver every queued event to every handler, in dispatch order."""
        with self._pending_lock:
            events, self._pending = self._pending, deque()
        while events:
            event = events.popleft()
            with self._handlers_lock:
                handlers = tuple(self._handlers)
                for handler in handlers:
                    handler.dispatch(event)