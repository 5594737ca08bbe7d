from ashmow.event_service import EventService
from ashmow.events import EventHandler, handles
from ashmow.geo_pos import GeoPos
from ashmow.grid import GridCell
from ashmow.route_service import (
    EvGridRoute,
    EvRequestGridRoute,
    EvRoute,
    RouteService,
)

EXPECTED_PATH = tuple(
    GridCell(x, y)
    for x, y in [
        (0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 2),
        (3, 3), (4, 3), (4, 4), (5, 4), (5, 5),
    ]
)


class Collector(EventHandler):
    def __init__(self):
        self.routes = []

    @handles(EvGridRoute)
    def on_grid_route(self, event):
        self.routes.append(event)


def _setup():
    events = EventService()
    service = RouteService(events)
    collector = Collector()
    events.add_event_handler(collector)
    return events, service, collector


def test_route_event_default_position():
    assert EvRoute().geo_pos == GeoPos()


def test_grid_route_stores_path_as_tuple():
    cells = [GridCell(1, 2), GridCell(1, 3)]
    route = EvGridRoute(cells)
    cells.append(GridCell(9, 9))
    assert route.path == (GridCell(1, 2), GridCell(1, 3))


def test_name():
    assert RouteService(EventService()).name == "route_service"


def test_request_produces_grid_route():
    events, service, collector = _setup()
    events.dispatch(EvRequestGridRoute())
    events.update()
    assert service.pending
    service.update()
    events.update()
    assert [route.path for route in collector.routes] == [EXPECTED_PATH]
    assert not service.pending


def test_path_steps_are_adjacent():
    events, service, collector = _setup()
    service.on_request_grid_route(EvRequestGridRoute())
    service.update()
    events.update()
    path = collector.routes[0].path
    assert all(a.is_adjacent(b) for a, b in zip(path, path[1:]))


def test_no_request_no_route():
    events, service, collector = _setup()
    service.update()
    events.update()
    assert collector.routes == []


def test_one_route_per_request():
    events, service, collector = _setup()
    events.dispatch(EvRequestGridRoute())
    events.update()
    service.update()
    service.update()
    events.update()
    assert len(collector.routes) == 1