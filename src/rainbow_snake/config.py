"""Game and server configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from rainbow_snake.engine import TICK_INTERVAL_MS
from rainbow_snake.store import LEADERBOARD_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Client-side game settings."""

    tick_interval_ms: int = TICK_INTERVAL_MS
    seed: int | None = None
    max_food_attempts: int = 1000
    leaderboard_size: int = LEADERBOARD_SIZE
    server_url: str = "http://127.0.0.1:8000"
    request_timeout: float = 5.0


@dataclass(frozen=True)
class ServerConfig:
    """Settings for serving the score API."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"


@dataclass(frozen=True)
class AppConfig:
    """Full configuration, JSON round-trippable."""

    game: GameConfig = field(default_factory=GameConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> AppConfig:
        return cls(
            game=GameConfig(**raw.get("game", {})),
            server=ServerConfig(**raw.get("server", {})),
        )

    @classmethod
    def load(cls, path: str | Path) -> AppConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
