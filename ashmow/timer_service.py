"""Delivers events to handlers after a delay, once or repeatedly."""

from __future__ import annotations

import bisect
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ashmow.context import Service
from ashmow.events import Event, EventHandler


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class _TimerPlan:
    event: Event
    when: int
    reschedule: int


class TimerService(Service):
    """Fires scheduled events on update once their time has passed.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _now_ms
        self._handlers: List[EventHandler] = []
        self._timer_events: List[_TimerPlan] = []
        self._added: List[_TimerPlan] = []
        self._added_lock = threading.Lock()

    @property
    def name(self) -> str:
        return "timer_service"

    def add_timer_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def remove_timer_event_handler(self, handler: EventHandler) -> None:
        """Remove the first registration of handler; unknown handlers are ignored."""
        for index, item in enumerate(self._handlers):
            if item is handler:
                del self._handlers[index]
                return

    def schedule_single_event(self, event: Event, timer_ms: int) -> None:
        """Fire the event once, timer_ms milliseconds from now."""
        self._schedule(event, timer_ms, cyclic=False)

    def schedule_cyclic_event(self, event: Event, timer_ms: int) -> None:
        """Fire the event every timer_ms milliseconds, starting timer_ms from now."""
        self._schedule(event, timer_ms, cyclic=True)

    def _schedule(self, event: Event, timer_ms: int, cyclic: bool) -> None:
        if timer_ms < 0:
            raise ValueError(f"timer_ms must not be negative: {timer_ms}")
        plan = _TimerPlan(event, self._clock() + timer_ms, timer_ms if cyclic else 0)
        with self._added_lock:
            self._added.append(plan)

    def update(self) -> None:
        """Fire every event whose time has passed, earliest first."""
        with self._added_lock:
            added, self._added = self._added, []
        for plan in added:
            bisect.insort_right(self._timer_events, plan, key=lambda p: p.when)

        if not self._timer_events:
            return

        now = self._clock()
        due = 0
        for plan in self._timer_events:
            if plan.when >= now:
                break
            for handler in tuple(self._handlers):
                handler.dispatch(plan.event)
            if plan.reschedule > 0:
                plan.when += plan.reschedule
                with self._added_lock:
                    self._added.append(plan)
            due += 1
        del self._timer_events[:due]