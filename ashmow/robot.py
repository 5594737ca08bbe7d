"""Robot state and the robots that hold it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from ashmow.geometry import Point2D


class RobotState(Enum):
    IDLE = "idle"
    MOVING = "moving"
    STOPPED = "stopped"
    SHUTDOWN = "shutdown"


class BaseRobot(ABC):
    """State, position, heading and battery level shared by every robot."""

    def __init__(
        self,
        state: RobotState,
        position: Point2D,
        heading: float,
        battery_level: float,
    ) -> None:
        self._state = state
        self._position = position
        self._heading = heading
        self._battery_level = battery_level

    @property
    def state(self) -> RobotState:
        return self._state

    @property
    def position(self) -> Point2D:
        return self._position

    @property
    def heading(self) -> float:
        return self._heading

    @property
    def battery_level(self) -> float:
        return self._battery_level

    @abstractmethod
    def initialize(self) -> None:
        """Bring the robot to its starting condition."""

    @abstractmethod
    def move_to(self, target: Point2D) -> None:
        """Drive to the target position."""

    @abstractmethod
    def stop(self) -> None:
        """Halt the robot."""

    @abstractmethod
    def shutdown(self) -> None:
        """Power the robot down."""


class Robot(BaseRobot):
    """The physical mower; it starts idle at the origin with a full battery.

    Its commands are accepted but leave the recorded state as it is.
    """

    def __init__(self) -> None:
        super().__init__(RobotState.IDLE, Point2D(0.0, 0.0), 0.0, 100.0)

    def initialize(self) -> None:
        """Accept the request; the recorded state is left unchanged."""

    def move_to(self, target: Point2D) -> None:
        """Accept the request; the recorded position is left unchanged."""

    def stop(self) -> None:
        """Accept the request; the recorded state is left unchanged."""

    def shutdown(self) -> None:
        """Accept the request; the recorded state is left unchanged."""


class SimulatedRobot(BaseRobot):
    """A robot whose commands take effect immediately."""

    def __init__(
        self,
        state: RobotState = RobotState.IDLE,
        position: Optional[Point2D] = None,
        heading: float = 0.0,
        battery_level: float = 100.0,
    ) -> None:
        super().__init__(
            state, position if position is not None else Point2D(), heading, battery_level
        )

    def initialize(self) -> None:
        self._state = RobotState.IDLE
        self._position = Point2D(0.0, 0.0)
        self._heading = 0.0
        self._battery_level = 100.0

    def move_to(self, target: Point2D) -> None:
        self._position = target
        self._state = RobotState.MOVING

    def stop(self) -> None:
        self._state = RobotState.STOPPED

    def shutdown(self) -> None:
        self._state = RobotState.SHUTDOWN
        self._battery_level = 0.0