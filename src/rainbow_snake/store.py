"""Nickname registry and score store on top of an injected key-value store."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from rainbow_snake.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)

LEADERBOARD_SIZE = 10


class KeyValueStore(Protocol):
    """Minimal storage capability the registry and score store need."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def contains(self, key: str) -> bool: ...

    def items(self) -> Iterator[tuple[str, Any]]: ...


class InMemoryStore:
    """Process-local dict-backed store; contents vanish with the process."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def contains(self, key: str) -> bool:
        return key in self._data

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(list(self._data.items()))

    def __len__(self) -> int:
        return len(self._data)


def _require_nickname(nickname: object) -> str:
    if not isinstance(nickname, str) or not nickname:
        raise ValidationError("Nickname is required.")
    return nickname


class NicknameRegistry:
    """Set of reserved nicknames with suggestion-on-collision."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        self.store = store if store is not None else InMemoryStore()

    def is_reserved(self, nickname: str) -> bool:
        return self.store.contains(nickname)

    def suggest(self, nickname: str) -> str:
        """Return *nickname* with the smallest free positive integer suffix."""
        counter = 1
        while self.store.contains(f"{nickname}{counter}"):
            counter += 1
        return f"{nickname}{counter}"

    def register(self, nickname: str) -> None:
        """Reserve *nickname* or raise :class:`ConflictError` with a suggestion."""
        nickname = _require_nickname(nickname)
        if self.store.contains(nickname):
            suggestion = self.suggest(nickname)
            logger.info(
                "Nickname '%s' already taken; suggested '%s'.",
                nickname, suggestion,
            )
            raise ConflictError("Nickname already taken.", suggestion)
        self.store.set(nickname, True)
        logger.info("Nickname '%s' registered.", nickname)


class ScoreStore:
    """Best score per nickname."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        self.store = store if store is not None else InMemoryStore()

    def record(self, nickname: str, score: int) -> int:
        """Keep ``max(existing, score)`` for *nickname*; return the stored value."""
        nickname = _require_nickname(nickname)
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValidationError("Score must be an integer.")

        existing = self.store.get(nickname)
        if existing is None or score > existing:
            self.store.set(nickname, score)
            logger.info("Recorded score %d for '%s'.", score, nickname)
            return score
        return existing

    def get(self, nickname: str) -> int | None:
        return self.store.get(nickname)

    def all_scores(self) -> dict[str, int]:
        """Return the full nickname → best score mapping."""
        return dict(self.store.items())


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""

    nickname: str
    score: int


def leaderboard(
    scores: Mapping[str, int], limit: int = LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    """Sort *scores* descending and keep the top *limit* rows.

    Ties keep the mapping's insertion order.
    """
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [LeaderboardEntry(nickname=n, score=s) for n, s in ranked[:limit]]
