"""A small reusable finite state machine."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Optional, Type, TypeVar

K = TypeVar("K", bound=Hashable)


class State(Generic[K]):
    """A state owned by a machine; subclasses override the hooks they need.

    The default hooks track whether the state is current and how many
    updates it has received.
    """

    def __init__(self, fsm: FiniteStateMachine[K], state_id: K, name: str = "default") -> None:
        self.fsm = fsm
        self.id = state_id
        self.name = name
        self.active = False
        self.update_count = 0

    def enter(self) -> None:
        """Called when the machine switches into this state."""
        self.active = True

    def exit(self) -> None:
        """Called when the machine switches away from this state."""
        self.active = False

    def update(self) -> None:
        """Called on each machine update while this state is current."""
        self.update_count += 1


class FiniteStateMachine(Generic[K]):
    """Holds a set of states, at most one of which is current."""

    def __init__(self) -> None:
        self._states: Dict[K, State[K]] = {}
        self._current: Optional[State[K]] = None

    @property
    def current_state(self) -> Optional[State[K]]:
        return self._current

    def add(self, state_id: K, state_class: Type[State[K]]) -> State[K]:
        """Create a state of state_class for this machine and register it."""
        if state_class is State:
            raise TypeError("add needs a subclass of State, not State itself")
        state = state_class(self)  # type: ignore[call-arg]
        self._states[state_id] = state
        return state

    def get_state(self, state_id: K) -> State[K]:
        try:
            return self._states[state_id]
        except KeyError:
            raise KeyError(f"no state registered for {state_id!r}") from None

    def set_current_state(self, state_id: K) -> None:
        self._switch_to(self.get_state(state_id))

    def update(self) -> None:
        if self._current is not None:
            self._current.update()

    def _switch_to(self, state: Optional[State[K]]) -> None:
        if self._current is state:
            return
        if self._current is not None:
            self._current.exit()
        self._current = state
        if state is not None:
            state.enter()