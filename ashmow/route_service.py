"""Route events and the service that answers grid route requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ashmow.context import Service
from ashmow.event_service import EventService
from ashmow.events import Event, EventHandler, handles
from ashmow.geo_pos import GeoPos
from ashmow.grid import GridCell

_PLANNED_PATH = (
    GridCell(0, 0), GridCell(1, 0), GridCell(1, 1), GridCell(2, 1),
    GridCell(2, 2), GridCell(3, 2), GridCell(3, 3), GridCell(4, 3),
    GridCell(4, 4), GridCell(5, 4), GridCell(5, 5),
)


@dataclass(frozen=True)
class EvRoute(Event):
    """A route position."""

    geo_pos: GeoPos = field(default_factory=GeoPos)


class EvRequestGridRoute(Event):
    """Asks for a route over the grid."""


@dataclass(frozen=True)
class EvGridRoute(Event):
    """A route as a sequence of grid cells."""

    path: Tuple[GridCell, ...] = ()

    def __init__(self, path: Iterable[GridCell] = ()) -> None:
        object.__setattr__(self, "path", tuple(path))


class RouteService(Service, EventHandler):
    """Answers each grid route request with a grid route on its next update."""

    def __init__(self, event_service: EventService) -> None:
        self._event_service = event_service
        self._do_work = False
        event_service.add_event_handler(self)

    @property
    def name(self) -> str:
        return "route_service"

    @property
    def pending(self) -> bool:
        """Whether a request waits for the next update."""
        return self._do_work

    def update(self) -> None:
        if self._do_work:
            self._event_service.dispatch(EvGridRoute(_PLANNED_PATH))
            self._do_work = False

    @handles(EvRequestGridRoute)
    def on_request_grid_route(self, event: EvRequestGridRoute) -> None:
        self._do_work = True