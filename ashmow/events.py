"""Events identified by per-type uuids, and handlers routed by event type."""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from ashmow.uuid_util import Uuid

_HANDLED_ATTR = "_handled_event_type"

F = TypeVar("F", bound=Callable[..., Any])


class Event:
    """Base of all events.

    Each subclass gets its own type uuid: the one given as the ``uuid`` class
    keyword, or a random one when none is given.
    """

    uuid: ClassVar[Uuid]

    def __init_subclass__(cls, *, uuid: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.uuid = Uuid.from_string(uuid) if uuid is not None else Uuid.random()


def handles(event_type: Type[Event]) -> Callable[[F], F]:
    """Mark an EventHandler method as the handler for one event type."""
    if not (
        isinstance(event_type, type)
        and issubclass(event_type, Event)
        and event_type is not Event
    ):
        raise TypeError(f"handles needs an Event subclass, not {event_type!r}")

    def decorator(func: F) -> F:
        setattr(func, _HANDLED_ATTR, event_type)
        return func

    return decorator


class EventHandler:
    """Routes events to the methods marked with ``handles``."""

    _routes: ClassVar[Tuple[Tuple[Type[Event], str], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        routes: Dict[Type[Event], str] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                event_type = getattr(attr, _HANDLED_ATTR, None)
                if event_type is not None:
                    routes[event_type] = name
        cls._routes = tuple(routes.items())

    def event_types(self) -> List[Uuid]:
        """Uuids of the event types this handler accepts, in declaration order."""
        return [event_type.uuid for event_type, _ in self._routes]

    def dispatch(self, event: Event) -> bool:
        """Pass the event to its handler method; return whether one took it."""
        for event_type, name in self._routes:
            if event.uuid == event_type.uuid:
                getattr(self, name)(event)
                return True
        return False