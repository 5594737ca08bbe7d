"""Worker contexts: threads that update a set of objects periodically."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

DEFAULT_PERIOD = 0.2


class Updatable(ABC):
    """Something a context updates on every cycle."""

    @abstractmethod
    def update(self) -> None:
        """Do one cycle of work."""


class Service(Updatable):
    """A named updatable."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The service's name."""


@dataclass
class ContextInfo:
    exec_time: float = 0.0
    sleep_time: float = 0.0
    exec_ratio: float = 0.0


class Context:
    """A worker thread that updates its updatables once per period."""

    def __init__(self, period: float = DEFAULT_PERIOD, name: Optional[str] = None) -> None:
        self.period = period
        self.name = name
        self.info = ContextInfo()
        self._updatables: List[Updatable] = []
        self._lock = threading.RLock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    @property
    def updatables(self) -> Tuple[Updatable, ...]:
        with self._lock:
            return tuple(self._updatables)

    def start(self) -> None:
        """Start the worker thread; does nothing if it is already running."""
        if self.running:
            return
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._work, args=(stop_event,), name=self.name, daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker thread to finish after its current cycle."""
        if self._stop_event is not None:
            self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def add_updatable(self, updatable: Updatable) -> None:
        """Add an updatable unless it is already present."""
        with self._lock:
            if any(item is updatable for item in self._updatables):
                return
            self._updatables.append(updatable)

    def remove_updatable(self, updatable: Updatable) -> None:
        """Remove the updatable and every updatable added after it."""
        with self._lock:
            for index, item in enumerate(self._updatables):
                if item is updatable:
                    del self._updatables[index:]
                    return

    def run_once(self) -> None:
        """Update every updatable once, in the order they were added."""
        with self._lock:
            for updatable in tuple(self._updatables):
                updatable.update()

    def _work(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.period):
            self.run_once()


class ContextRegistry:
    """Named contexts, started in name order and stopped in reverse."""

    def __init__(self, context_period: float = DEFAULT_PERIOD) -> None:
        self._context_period = context_period
        self._contexts: Dict[str, Context] = {}

    @property
    def contexts(self) -> Dict[str, Context]:
        """The registered contexts, ordered by name."""
        return {name: self._contexts[name] for name in sorted(self._contexts)}

    def register_context(self, name: str) -> Context:
        """Return the context with this name, creating it on first use."""
        context = self._contexts.get(name)
        if context is None:
            context = Context(self._context_period, name=name)
            self._contexts[name] = context
        return context

    def start(self) -> None:
        for name, context in self.contexts.items():
            context.start()
            print(f"Starting thread: {name}")

    def stop(self) -> None:
        for name, context in reversed(list(self.contexts.items())):
            context.stop()
            print(f"Stopping thread: {name}")

    def close(self, timeout: Optional[float] = None) -> None:
        """Stop and wait for every context, in reverse name order."""
        for context in reversed(list(self.contexts.values())):
            context.stop()
            context.join(timeout)