"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from rainbow_snake.grid import Grid

logger = logging.getLogger(__name__)

_DEFAULT_MAX_ATTEMPTS = 1000


class FoodSpawner:
    """Picks food cells uniformly over the grid, avoiding the snake.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = _DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def place(
        self, occupied: Collection[tuple[int, int]],
    ) -> tuple[int, int] | None:
        """Return a cell not in *occupied*, or ``None`` if the board is full.

        Rejection sampling is tried first; after ``max_attempts`` misses the
        choice falls back to the explicit list of free cells.
        """
        taken = set(occupied)
        if len(taken) >= self.grid.cell_count:
            logger.warning("No free cells available for food placement.")
            return None

        size = self.grid.size
        for _ in range(self.max_attempts):
            x, y = (int(v) for v in self.rng.integers(0, size, size=2))
            if (x, y) not in taken:
                return x, y

        free = self.grid.free_cells(taken)
        logger.debug(
            "Rejection sampling exhausted after %d attempts; "
            "choosing among %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]
