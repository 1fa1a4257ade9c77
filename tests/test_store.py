"""Tests for the nickname registry and score store."""

import pytest

from rainbow_snake.errors import ConflictError, ValidationError
from rainbow_snake.store import (
    InMemoryStore,
    LeaderboardEntry,
    NicknameRegistry,
    ScoreStore,
    leaderboard,
)


class TestInMemoryStore:
    def test_get_set_contains(self):
        store = InMemoryStore()
        assert store.get("a") is None
        assert store.get("a", 3) == 3
        store.set("a", 1)
        assert store.contains("a")
        assert store.get("a") == 1
        assert len(store) == 1

    def test_items_snapshot(self):
        store = InMemoryStore({"a": 1})
        items = store.items()
        store.set("b", 2)
        assert list(items) == [("a", 1)]


class TestNicknameRegistry:
    def test_register_new(self):
        registry = NicknameRegistry()
        registry.register("fox")
        assert registry.is_reserved("fox")

    def test_conflict_suggests_first_suffix(self):
        registry = NicknameRegistry(InMemoryStore({"fox": True}))
        with pytest.raises(ConflictError) as exc_info:
            registry.register("fox")
        assert exc_info.value.suggestion == "fox1"

    def test_conflict_skips_taken_suffixes(self):
        registry = NicknameRegistry(InMemoryStore({"fox": True, "fox1": True}))
        with pytest.raises(ConflictError) as exc_info:
            registry.register("fox")
        assert exc_info.value.suggestion == "fox2"

    def test_suggestion_is_not_reserved(self):
        registry = NicknameRegistry(InMemoryStore({"fox": True}))
        with pytest.raises(ConflictError):
            registry.register("fox")
        assert not registry.is_reserved("fox1")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            NicknameRegistry().register("")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            NicknameRegistry().register(None)


class TestScoreStore:
    def test_first_score_stored(self):
        scores = ScoreStore()
        assert scores.record("fox", 5) == 5
        assert scores.get("fox") == 5

    def test_keeps_maximum(self):
        scores = ScoreStore()
        scores.record("fox", 5)
        assert scores.record("fox", 3) == 5
        assert scores.get("fox") == 5
        scores.record("fox", 8)
        assert scores.get("fox") == 8

    def test_zero_score_recorded(self):
        scores = ScoreStore()
        scores.record("owl", 0)
        assert scores.all_scores() == {"owl": 0}

    @pytest.mark.parametrize("bad", ["5", 5.5, None, True])
    def test_non_integer_score_rejected(self, bad):
        with pytest.raises(ValidationError, match="integer"):
            ScoreStore().record("fox", bad)

    def test_empty_nickname_rejected(self):
        with pytest.raises(ValidationError):
            ScoreStore().record("", 1)

    def test_shares_injected_store(self):
        backing = InMemoryStore()
        ScoreStore(backing).record("fox", 2)
        assert ScoreStore(backing).get("fox") == 2


class TestLeaderboard:
    def test_sorted_descending(self):
        rows = leaderboard({"a": 1, "b": 7, "c": 3})
        assert rows == [
            LeaderboardEntry("b", 7),
            LeaderboardEntry("c", 3),
            LeaderboardEntry("a", 1),
        ]

    def test_truncated_to_ten(self):
        rows = leaderboard({f"p{i}": i for i in range(15)})
        assert len(rows) == 10
        assert rows[0] == LeaderboardEntry("p14", 14)
        assert rows[-1] == LeaderboardEntry("p5", 5)

    def test_custom_limit(self):
        assert len(leaderboard({"a": 1, "b": 2}, limit=1)) == 1

    def test_empty(self):
        assert leaderboard({}) == []
