"""Snake body representation and direction rules."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def change_direction(current: Direction, requested: Direction) -> Direction:
    """Adopt *requested* unless it reverses *current*."""
    if _OPPOSITES[current] == requested:
        return current
    return requested


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[tuple[int, int]]) -> None:
        self.body: deque[tuple[int, int]] = deque(
            (int(x), int(y)) for x, y in segments
        )
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    def __len__(self) -> int:
        return len(self.body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self.body == other.body

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def copy(self) -> Snake:
        return Snake(self.body)

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the unwrapped next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(
        self, new_head: tuple[int, int], grow: bool = False,
    ) -> tuple[int, int] | None:
        """Prepend *new_head*; drop the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
