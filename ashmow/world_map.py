"""A map made of a boundary polygon and hard and soft obstacles."""

from __future__ import annotations

import copy
from typing import List, Tuple

from ashmow.geometry import Polygon


class WorldMap:
    """Boundary plus obstacles; polygons are copied when they are added."""

    def __init__(self) -> None:
        self._boundary = Polygon()
        self._obstacles: List[Polygon] = []
        self._soft_obstacles: List[Polygon] = []

    @property
    def boundary(self) -> Polygon:
        return self._boundary

    @property
    def obstacles(self) -> Tuple[Polygon, ...]:
        return tuple(self._obstacles)

    @property
    def soft_obstacles(self) -> Tuple[Polygon, ...]:
        return tuple(self._soft_obstacles)

    def set_boundary(self, boundary: Polygon) -> None:
        self._boundary = copy.deepcopy(boundary)

    def add_obstacle(self, obstacle: Polygon) -> None:
        self._obstacles.append(copy.deepcopy(obstacle))

    def add_soft_obstacle(self, obstacle: Polygon) -> None:
        self._soft_obstacles.append(copy.deepcopy(obstacle))