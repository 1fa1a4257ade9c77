"""Tick-based game state machine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from rainbow_snake.food import FoodSpawner
from rainbow_snake.grid import GRID_SIZE, Grid
from rainbow_snake.snake import Direction, Snake, change_direction

logger = logging.getLogger(__name__)

INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((5, 5),)
INITIAL_DIRECTION = Direction.RIGHT
INITIAL_FOOD: tuple[int, int] = (10, 10)
TICK_INTERVAL_MS = 100


class GameEvent(str, enum.Enum):
    """Discrete signals emitted by :func:`step` for the presentation layer."""

    FOOD_EATEN = "food_eaten"
    GAME_OVER = "game_over"


class GamePhase(str, enum.Enum):
    """Game-level lifecycle."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass
class GameState:
    """Everything needed to render or advance one game."""

    snake: Snake
    direction: Direction
    food: tuple[int, int] | None
    score: int = 0
    is_over: bool = False
    tick: int = 0

    def copy(self) -> GameState:
        return GameState(
            snake=self.snake.copy(),
            direction=self.direction,
            food=self.food,
            score=self.score,
            is_over=self.is_over,
            tick=self.tick,
        )

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "is_over": self.is_over,
            "direction": self.direction.name,
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
        }


class StepResult(NamedTuple):
    state: GameState
    events: tuple[GameEvent, ...]


def reset() -> GameState:
    """Return the fixed initial game state."""
    return GameState(
        snake=Snake(INITIAL_SNAKE),
        direction=INITIAL_DIRECTION,
        food=INITIAL_FOOD,
    )


def step(
    state: GameState,
    direction: Direction,
    spawner: FoodSpawner | None = None,
) -> StepResult:
    """Advance *state* by one tick moving in *direction*.

    The input state is left untouched. *direction* is trusted as given;
    reversal filtering belongs to :func:`change_direction`. A state that is
    already over is returned as-is with no events.
    """
    if state.is_over:
        return StepResult(state, ())
    if spawner is None:
        spawner = FoodSpawner(Grid(GRID_SIZE))

    grid = spawner.grid
    new_state = state.copy()
    new_state.direction = direction
    new_state.tick += 1

    snake = new_state.snake
    next_x, next_y = snake.next_head(direction)
    new_head = grid.wrap(next_x, next_y)

    events: list[GameEvent] = []
    ate = new_head == state.food
    snake.advance(new_head, grow=ate)

    if snake.self_collision():
        # Keep the pre-move body so the collision frame is what gets shown.
        new_state.snake = state.snake.copy()
        new_state.is_over = True
        logger.info(
            "Snake collided with itself at tick %d with score %d.",
            new_state.tick, new_state.score,
        )
        return StepResult(new_state, (GameEvent.GAME_OVER,))

    if ate:
        new_state.score += 1
        new_state.food = spawner.place(snake.body)
        events.append(GameEvent.FOOD_EATEN)

    return StepResult(new_state, tuple(events))


EventListener = Callable[[GameEvent, GameState], None]


class GameEngine:
    """Single-player engine owning the current state and its lifecycle.

    Directional input is buffered as a single pending direction that the
    next :meth:`step` consumes; a later request overwrites an earlier one.
    """

    def __init__(
        self,
        seed: int | None = None,
        max_food_attempts: int = 1000,
    ) -> None:
        self.grid = Grid(GRID_SIZE)
        self.rng = np.random.default_rng(seed)
        self.spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=max_food_attempts,
        )
        self.state = reset()
        self.phase = GamePhase.NOT_STARTED
        self._pending_direction: Direction | None = None
        self._listeners: list[EventListener] = []

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.OVER

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback invoked for every emitted event."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Move from NotStarted to Running."""
        if self.phase != GamePhase.NOT_STARTED:
            raise RuntimeError(f"Cannot start a game in phase {self.phase.value}.")
        self.phase = GamePhase.RUNNING
        logger.info("Game started.")

    def reset(self) -> None:
        """Restore the initial state and resume play after a game over."""
        if self.phase != GamePhase.OVER:
            raise RuntimeError(f"Cannot reset a game in phase {self.phase.value}.")
        self.state = reset()
        self._pending_direction = None
        self.phase = GamePhase.RUNNING
        logger.info("Game reset.")

    def set_direction(self, direction: Direction) -> None:
        """Request a turn for the next tick, ignoring 180° reversals."""
        if self.phase != GamePhase.RUNNING:
            return
        self._pending_direction = change_direction(
            self.state.direction, direction,
        )

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.phase != GamePhase.RUNNING:
            return self.get_state()

        direction = self._pending_direction
        if direction is None:
            direction = self.state.direction
        self._pending_direction = None
        result = step(self.state, direction, self.spawner)
        self.state = result.state
        if self.state.is_over:
            self.phase = GamePhase.OVER

        for event in result.events:
            self._emit(event)
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        data = self.state.to_dict()
        data["phase"] = self.phase.value
        return data

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self.state)
            except Exception:
                logger.exception("Listener failed handling %s.", event.value)
