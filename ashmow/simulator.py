"""Simulator events, environment and the simulator service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from ashmow.context import Service
from ashmow.event_service import EventService
from ashmow.events import Event, EventHandler, handles
from ashmow.geometry import ContainmentMode, Point2D, Polygon
from ashmow.grid import GridCell
from ashmow.robot import RobotState, SimulatedRobot
from ashmow.route_service import EvGridRoute, EvRequestGridRoute
from ashmow.world_map import WorldMap


class EvSim(Event):
    """A simulator event."""


def _strict_polygon(points: Iterable[Tuple[float, float]]) -> Polygon:
    polygon = Polygon()
    for x, y in points:
        polygon.add_point(x, y)
    polygon.close()
    polygon.containment_mode = ContainmentMode.STRICT
    return polygon


def add_map_objects(world_map: WorldMap) -> None:
    """Fill a map with the simulator's test garden: a boundary and obstacles."""
    boundary = _strict_polygon([(0.0, 0.0), (500.0, 0.0), (500.0, 500.0), (0.0, 500.0)])
    obs1 = _strict_polygon([(75.0, 75.0), (100.0, 75.0), (100.0, 100.0), (75.0, 100.0)])
    obs2 = _strict_polygon([(0.0, 200.0), (0.0, 250.0), (500.0, 250.0), (500.0, 200.0)])
    obs3 = _strict_polygon([(250.0, 200.0), (200.0, 250.0), (300.0, 350.0), (350.0, 220.0)])
    obs4 = _strict_polygon([(170.0, 250.0), (120.0, 300.0), (220.0, 400.0), (270.0, 270.0)])
    obs5 = _strict_polygon([(28.0, 350.0), (28.0, 450.0), (80.0, 450.0), (80.0, 350.0)])

    world_map.set_boundary(boundary)
    world_map.add_obstacle(obs1)
    world_map.add_obstacle(obs3)
    world_map.add_obstacle(obs4)
    world_map.add_soft_obstacle(obs2)
    world_map.add_soft_obstacle(obs5)


@dataclass(frozen=True)
class Environment:
    """The world a simulated robot moves in."""

    world_map: WorldMap


class SimulatorService(Service, EventHandler):
    """Simulates a robot in a test garden and asks for a grid route to follow."""

    def __init__(self, event_service: EventService) -> None:
        self._event_service = event_service
        self.robot = SimulatedRobot(RobotState.IDLE, Point2D(0.0, 0.0), 180.0, 100.0)
        self.world_map = WorldMap()
        add_map_objects(self.world_map)
        self.environment = Environment(self.world_map)
        self._last_path: Tuple[GridCell, ...] = ()
        event_service.add_event_handler(self)
        event_service.dispatch(EvRequestGridRoute())

    @property
    def name(self) -> str:
        return "simulator_service"

    @property
    def last_path(self) -> Tuple[GridCell, ...]:
        """The most recent grid route received, empty until one arrives."""
        return self._last_path

    def update(self) -> None:
        """Run one simulation cycle; the robot is moved by its commands only."""

    @handles(EvGridRoute)
    def on_grid_route(self, event: EvGridRoute) -> None:
        self._last_path = event.path