"""Occupancy grid: cells, cell types and a grid laid over world coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ashmow.geometry import Point2D


@dataclass(frozen=True, order=True)
class GridCell:
    """A cell address; cells order by x first, then y."""

    x: int = 0
    y: int = 0

    def is_adjacent(self, other: GridCell) -> bool:
        """Whether the cells share an edge (diagonal neighbours do not count)."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


class CellType(Enum):
    FREE = "free"
    OBSTACLE = "obstacle"
    SOFT_OBSTACLE = "soft_obstacle"


class GridMap:
    """A width x height grid of cells, every cell an obstacle until set otherwise."""

    def __init__(
        self,
        width: int,
        height: int,
        resolution: float = 1.0,
        origin: Optional[Point2D] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {width}x{height}")
        self._width = width
        self._height = height
        self._resolution = resolution
        self._origin = origin if origin is not None else Point2D()
        self._cells: List[List[CellType]] = [
            [CellType.OBSTACLE] * width for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def origin(self) -> Point2D:
        return self._origin

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _set(self, x: int, y: int, cell_type: CellType) -> None:
        if self.in_bounds(x, y):
            self._cells[y][x] = cell_type

    def _is(self, x: int, y: int, *cell_types: CellType) -> bool:
        return self.in_bounds(x, y) and self._cells[y][x] in cell_types

    def set_obstacle(self, x: int, y: int) -> None:
        """Mark a cell as an obstacle; out-of-bounds cells are ignored."""
        self._set(x, y, CellType.OBSTACLE)

    def set_free(self, x: int, y: int) -> None:
        """Mark a cell as free; out-of-bounds cells are ignored."""
        self._set(x, y, CellType.FREE)

    def set_soft_obstacle(self, x: int, y: int) -> None:
        """Mark a cell as a soft obstacle; out-of-bounds cells are ignored."""
        self._set(x, y, CellType.SOFT_OBSTACLE)

    def is_free(self, x: int, y: int) -> bool:
        """Whether the cell can be driven over: free or a soft obstacle."""
        return self._is(x, y, CellType.FREE, CellType.SOFT_OBSTACLE)

    def is_obstacle(self, x: int, y: int) -> bool:
        return self._is(x, y, CellType.OBSTACLE)

    def is_soft_obstacle(self, x: int, y: int) -> bool:
        return self._is(x, y, CellType.SOFT_OBSTACLE)

    def is_strictly_free(self, x: int, y: int) -> bool:
        return self._is(x, y, CellType.FREE)

    def get(self, x: int, y: int) -> CellType:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self._cells[y][x]

    def grid_to_world(self, x: int, y: int) -> Point2D:
        """World coordinates of the centre of cell (x, y)."""
        half = self._resolution / 2.0
        return Point2D(
            self._origin.x + x * self._resolution + half,
            self._origin.y + y * self._resolution + half,
        )

    def world_to_grid(self, point: Point2D) -> Tuple[int, int]:
        """Cell holding a world point, truncating towards zero."""
        return (
            int((point.x - self._origin.x) / self._resolution),
            int((point.y - self._origin.y) / self._resolution),
        )

    @staticmethod
    def convert_path_to_world(
        grid_path: Iterable[GridCell], grid: GridMap
    ) -> List[Point2D]:
        """Map each cell of a path to the world position of its centre."""
        return [grid.grid_to_world(cell.x, cell.y) for cell in grid_path]