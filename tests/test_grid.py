"""Tests for the Grid module."""

import pytest

from rainbow_snake.grid import GRID_SIZE, Grid, wrap


class TestWrap:
    def test_in_range_unchanged(self):
        assert wrap(0, 20) == 0
        assert wrap(19, 20) == 19

    def test_negative_wraps_to_far_edge(self):
        assert wrap(-1, 20) == 19
        assert wrap(-21, 20) == 19

    def test_overflow_wraps_to_zero(self):
        assert wrap(20, 20) == 0
        assert wrap(45, 20) == 5

    def test_result_always_in_range(self):
        for coordinate in range(-50, 50):
            assert 0 <= wrap(coordinate, GRID_SIZE) < GRID_SIZE


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cell_count == 400

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)


class TestGridOperations:
    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 4)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, 5)

    def test_wrap(self):
        grid = Grid(size=5)
        assert grid.wrap(-1, 0) == (4, 0)
        assert grid.wrap(0, -1) == (0, 4)
        assert grid.wrap(5, 5) == (0, 0)

    def test_free_cells(self):
        grid = Grid(size=4)
        assert len(grid.free_cells([])) == 16
        free = grid.free_cells([(0, 0), (3, 1)])
        assert len(free) == 14
        assert (0, 0) not in free
        assert (3, 1) not in free
        assert (1, 0) in free

    def test_free_cells_uses_xy_order(self):
        grid = Grid(size=4)
        occupied = [(x, y) for x in range(4) for y in range(4) if (x, y) != (3, 0)]
        assert grid.free_cells(occupied) == [(3, 0)]

    def test_to_dict(self):
        assert Grid(size=6).to_dict() == {"size": 6, "topology": "torus"}
