import itertools

import pytest

from ashmow.geometry import Point2D
from ashmow.grid import CellType, GridCell, GridMap


def test_grid_cell_adjacency():
    centre = GridCell(3, 3)
    assert centre.is_adjacent(GridCell(3, 4))
    assert centre.is_adjacent(GridCell(2, 3))
    assert not centre.is_adjacent(GridCell(4, 4))
    assert not centre.is_adjacent(centre)


def test_grid_cell_ordering_is_x_then_y():
    cells = [GridCell(2, 0), GridCell(1, 5), GridCell(1, 2)]
    assert sorted(cells) == [GridCell(1, 2), GridCell(1, 5), GridCell(2, 0)]
    assert GridCell(1, 1) <= GridCell(1, 1)
    assert GridCell(0, 9) < GridCell(1, 0)


def test_grid_cell_default_is_origin():
    assert GridCell() == GridCell(0, 0)


def test_new_grid_is_all_obstacle():
    grid = GridMap(3, 2)
    assert all(
        grid.get(x, y) is CellType.OBSTACLE
        for x, y in itertools.product(range(3), range(2))
    )
    assert grid.width == 3
    assert grid.height == 2


def test_cell_type_queries():
    grid = GridMap(3, 3)
    grid.set_free(0, 0)
    grid.set_soft_obstacle(1, 1)
    assert grid.is_free(0, 0) and grid.is_strictly_free(0, 0)
    assert grid.is_free(1, 1) and not grid.is_strictly_free(1, 1)
    assert grid.is_soft_obstacle(1, 1)
    assert grid.is_obstacle(2, 2) and not grid.is_free(2, 2)
    grid.set_obstacle(0, 0)
    assert grid.get(0, 0) is CellType.OBSTACLE


def test_out_of_bounds_queries_are_false_and_sets_ignored():
    grid = GridMap(2, 2)
    grid.set_free(-1, 0)
    grid.set_free(2, 0)
    for query in (grid.is_free, grid.is_obstacle, grid.is_soft_obstacle, grid.is_strictly_free):
        assert query(-1, 0) is False
        assert query(0, 2) is False
    assert not grid.in_bounds(2, 1)
    assert grid.in_bounds(1, 1)


def test_get_out_of_bounds_raises():
    grid = GridMap(2, 2)
    with pytest.raises(IndexError):
        grid.get(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        GridMap(-1, 3)


def test_grid_world_round_trip():
    grid = GridMap(4, 4, resolution=0.5, origin=Point2D(1.0, 1.0))
    for x, y in itertools.product(range(4), range(4)):
        assert grid.world_to_grid(grid.grid_to_world(x, y)) == (x, y)


def test_world_to_grid_truncates_towards_zero():
    grid = GridMap(4, 4, resolution=0.5, origin=Point2D(1.0, 1.0))
    assert grid.world_to_grid(Point2D(0.9, 0.9)) == (0, 0)


def test_convert_path_to_world_follows_cell_centres():
    grid = GridMap(5, 5, resolution=2.0, origin=Point2D(-3.0, 4.0))
    path = [GridCell(0, 0), GridCell(1, 0), GridCell(1, 1)]
    world = GridMap.convert_path_to_world(path, grid)
    assert world == [grid.grid_to_world(c.x, c.y) for c in path]
    assert [grid.world_to_grid(p) for p in world] == [(0, 0), (1, 0), (1, 1)]