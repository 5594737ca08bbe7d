"""Turns a world map into an occupancy grid."""

from __future__ import annotations

import math
from typing import Tuple

from ashmow.geometry import Point2D, Polygon
from ashmow.grid import CellType, GridMap
from ashmow.world_map import WorldMap

_RASTER_EPS = 1e-9


class GridMapBuilder:
    """Builds grids of a fixed resolution (world units per cell)."""

    def __init__(
        self,
        resolution: float,
        max_width_cells: int = 200,
        max_height_cells: int = 200,
    ) -> None:
        if resolution <= 0:
            raise ValueError(f"resolution must be positive: {resolution}")
        self.resolution = resolution
        self.max_width_cells = max_width_cells
        self.max_height_cells = max_height_cells
        self.origin = Point2D(0.0, 0.0)

    def world_to_grid(self, point: Point2D) -> Tuple[int, int]:
        """Cell holding a world point, rounding down, relative to the builder origin."""
        return (
            math.floor((point.x - self.origin.x) / self.resolution),
            math.floor((point.y - self.origin.y) / self.resolution),
        )

    def rasterize_polygon(
        self, grid_map: GridMap, poly: Polygon, fill_type: CellType
    ) -> None:
        """Mark cells whose centres lie inside poly; only obstacle fills change cells."""
        vertices = poly.vertices
        if not vertices:
            raise ValueError("cannot rasterize a polygon without vertices")

        gx_min, gy_min = self.world_to_grid(
            Point2D(min(p.x for p in vertices), min(p.y for p in vertices))
        )
        gx_max, gy_max = self.world_to_grid(
            Point2D(max(p.x for p in vertices), max(p.y for p in vertices))
        )
        edges = list(poly.edges())
        half = self.resolution / 2.0

        for y in range(gy_min, gy_max + 1):
            for x in range(gx_min, gx_max + 1):
                cx = x * self.resolution + half
                cy = y * self.resolution + half
                crossings = sum(
                    1
                    for a, b in edges
                    if (a.y > cy) != (b.y > cy)
                    and cx < (b.x - a.x) * (cy - a.y) / (b.y - a.y + _RASTER_EPS) + a.x
                )
                if (
                    crossings % 2 == 1
                    and grid_map.in_bounds(x, y)
                    and fill_type is CellType.OBSTACLE
                ):
                    grid_map.set_obstacle(x, y)

    def build_from(self, world_map: WorldMap) -> GridMap:
        """Grid covering the boundary's bounding box, classified by cell centre."""
        boundary = world_map.boundary
        vertices = boundary.vertices
        if not vertices:
            raise ValueError("the map boundary has no vertices")

        min_x = min(p.x for p in vertices)
        min_y = min(p.y for p in vertices)
        max_x = max(p.x for p in vertices)
        max_y = max(p.y for p in vertices)

        width = math.ceil((max_x - min_x) / self.resolution)
        height = math.ceil((max_y - min_y) / self.resolution)
        grid = GridMap(width, height, self.resolution, Point2D(min_x, min_y))

        obstacles = world_map.obstacles
        soft_obstacles = world_map.soft_obstacles
        for y in range(height):
            for x in range(width):
                centre = grid.grid_to_world(x, y)
                if not boundary.contains(centre):
                    continue
                if any(obstacle.contains(centre) for obstacle in obstacles):
                    continue
                if any(soft.contains(centre) for soft in soft_obstacles):
                    grid.set_soft_obstacle(x, y)
                else:
                    grid.set_free(x, y)
        return grid