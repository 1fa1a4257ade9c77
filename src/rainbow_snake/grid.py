"""Toroidal grid representation for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

GRID_SIZE = 20


def wrap(coordinate: int, size: int) -> int:
    """Map *coordinate* into ``[0, size)`` using true modulo.

    Python's ``%`` already floors towards negative infinity, so ``-1`` maps
    to ``size - 1`` rather than staying negative.
    """
    return coordinate % size


class Grid:
    """Square, edge-wrapping board.

    Coordinates use ``(x, y)`` ordering: ``x`` is the column, ``y`` the row.
    Internally the free-cell mask is a NumPy array indexed ``[y, x]``.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return wrap(x, self.size), wrap(y, self.size)

    def free_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return every cell not listed in *occupied*, in row-major order."""
        mask = np.ones((self.size, self.size), dtype=bool)
        for x, y in occupied:
            mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"size": self.size, "topology": "torus"}
