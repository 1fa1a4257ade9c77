"""Rainbow Snake — game engine and score service."""

from rainbow_snake.engine import (
    GameEngine,
    GameEvent,
    GamePhase,
    GameState,
    reset,
    step,
)
from rainbow_snake.grid import GRID_SIZE, Grid, wrap
from rainbow_snake.snake import Direction, Snake, change_direction

__all__ = [
    "GRID_SIZE",
    "Direction",
    "GameEngine",
    "GameEvent",
    "GamePhase",
    "GameState",
    "Grid",
    "Snake",
    "change_direction",
    "reset",
    "step",
    "wrap",
]
