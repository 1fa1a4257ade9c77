"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from rainbow_snake.food import FoodSpawner
from rainbow_snake.grid import Grid


class TestFoodSpawnerInit:
    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodSpawner(Grid(), max_attempts=0)


class TestFoodPlacement:
    def test_never_on_snake(self):
        grid = Grid(size=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        occupied = [(x, y) for x in range(5) for y in range(4)]
        for _ in range(200):
            x, y = spawner.place(occupied)
            assert (x, y) not in occupied
            assert grid.in_bounds(x, y)

    def test_deterministic(self):
        occupied = [(5, 5), (4, 5)]
        a = FoodSpawner(Grid(), rng=np.random.default_rng(42))
        b = FoodSpawner(Grid(), rng=np.random.default_rng(42))
        assert [a.place(occupied) for _ in range(10)] == [
            b.place(occupied) for _ in range(10)
        ]

    def test_full_grid_returns_none(self):
        grid = Grid(size=4)
        spawner = FoodSpawner(grid)
        occupied = [(x, y) for x in range(4) for y in range(4)]
        assert spawner.place(occupied) is None

    def test_falls_back_to_free_cells(self):
        grid = Grid(size=4)
        spawner = FoodSpawner(
            grid, rng=np.random.default_rng(3), max_attempts=1,
        )
        occupied = [(x, y) for x in range(4) for y in range(4) if (x, y) != (2, 3)]
        # With one free cell and a single attempt the fallback is what finds it.
        for _ in range(20):
            assert spawner.place(occupied) == (2, 3)

    def test_returns_plain_ints(self):
        spawner = FoodSpawner(Grid(), rng=np.random.default_rng(1))
        x, y = spawner.place([])
        assert type(x) is int
        assert type(y) is int
