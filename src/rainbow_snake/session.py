"""One player's game session: nickname gate, tick loop, score submission."""

from __future__ import annotations

import logging

from rainbow_snake.client import ScoreClient
from rainbow_snake.config import GameConfig
from rainbow_snake.engine import GameEngine, GamePhase
from rainbow_snake.errors import ConflictError, TransportError, ValidationError
from rainbow_snake.scheduler import TickScheduler
from rainbow_snake.snake import Direction
from rainbow_snake.store import LEADERBOARD_SIZE, LeaderboardEntry

logger = logging.getLogger(__name__)

_GENERIC_ERROR = "An error occurred. Please try again."


class GameSession:
    """Drives a :class:`GameEngine` from a :class:`TickScheduler`.

    Network calls never interrupt play: transport failures are logged and
    the leaderboard simply stays stale.
    """

    def __init__(
        self,
        client: ScoreClient,
        engine: GameEngine | None = None,
        scheduler: TickScheduler | None = None,
        leaderboard_size: int = LEADERBOARD_SIZE,
    ) -> None:
        self.client = client
        self.engine = engine if engine is not None else GameEngine()
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.leaderboard_size = leaderboard_size
        self.nickname: str | None = None
        self.nickname_error: str | None = None
        self.proposed_nickname: str | None = None
        self.leaderboard: list[LeaderboardEntry] = []
        self._score_submitted = False

    @classmethod
    def from_config(
        cls, config: GameConfig, client: ScoreClient | None = None,
    ) -> GameSession:
        """Build a session whose engine, clock, and client follow *config*."""
        if client is None:
            client = ScoreClient(
                base_url=config.server_url, timeout=config.request_timeout,
            )
        return cls(
            client,
            engine=GameEngine(
                seed=config.seed, max_food_attempts=config.max_food_attempts,
            ),
            scheduler=TickScheduler(period_ms=config.tick_interval_ms),
            leaderboard_size=config.leaderboard_size,
        )

    @property
    def phase(self) -> GamePhase:
        return self.engine.phase

    async def register(self, nickname: str) -> bool:
        """Reserve *nickname* and start the game on success.

        On a clash the server's suggestion is kept in ``proposed_nickname``
        for the player to accept or edit. Only a session that has not started
        may register; otherwise :class:`RuntimeError` is raised before any
        request is made.
        """
        if self.engine.phase != GamePhase.NOT_STARTED:
            raise RuntimeError(
                f"Cannot register a nickname in phase {self.engine.phase.value}.",
            )
        try:
            await self.client.register_nickname(nickname)
        except ConflictError as exc:
            self.nickname_error = str(exc)
            self.proposed_nickname = exc.suggestion or None
            return False
        except ValidationError as exc:
            self.nickname_error = str(exc)
            return False
        except TransportError:
            logger.exception("Error registering nickname '%s'.", nickname)
            self.nickname_error = _GENERIC_ERROR
            return False

        self.engine.start()
        self.nickname = nickname
        self.nickname_error = None
        self.proposed_nickname = None
        self._begin()
        return True

    def press(self, direction: Direction) -> None:
        """Forward a directional key; the next tick picks it up."""
        self.engine.set_direction(direction)

    async def tick(self) -> dict:
        """Advance one tick; on game over stop the clock and report the score."""
        state = self.engine.step()
        if self.engine.game_over and not self._score_submitted:
            self._score_submitted = True
            await self.scheduler.stop()
            await self._submit_score()
            await self.refresh_leaderboard()
        return state

    async def play_again(self) -> None:
        """Reset after a game over and restart the clock."""
        self.engine.reset()
        self.leaderboard = []
        self._begin()

    async def refresh_leaderboard(self) -> None:
        try:
            self.leaderboard = await self.client.fetch_leaderboard(
                limit=self.leaderboard_size,
            )
        except (TransportError, ValidationError):
            logger.exception("Error fetching leaderboard.")

    async def close(self) -> None:
        await self.scheduler.stop()

    def _begin(self) -> None:
        self._score_submitted = False
        self.scheduler.start(self.tick)

    async def _submit_score(self) -> None:
        score = self.engine.state.score
        try:
            await self.client.record_score(self.nickname, score)
        except (TransportError, ValidationError):
            logger.exception(
                "Error recording score %d for '%s'.", score, self.nickname,
            )
