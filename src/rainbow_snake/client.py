"""Async HTTP client for the nickname and score endpoints."""

from __future__ import annotations

import logging

import httpx

from rainbow_snake.errors import ConflictError, TransportError, ValidationError
from rainbow_snake.store import LEADERBOARD_SIZE, LeaderboardEntry, leaderboard

logger = logging.getLogger(__name__)


_NO_DETAIL = object()


def _detail(response: httpx.Response) -> object:
    """Return the ``detail`` member of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return _NO_DETAIL
    if not isinstance(body, dict):
        return _NO_DETAIL
    return body.get("detail", _NO_DETAIL)


def _detail_message(response: httpx.Response) -> str:
    detail = _detail(response)
    if detail is _NO_DETAIL:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(detail, dict):
        return str(detail.get("message", detail))
    if isinstance(detail, list) and detail:
        # FastAPI request-validation errors.
        return "; ".join(
            str(item.get("msg", item)) if isinstance(item, dict) else str(item)
            for item in detail
        )
    return str(detail)


class ScoreClient:
    """Talks to the score service, mapping failures onto domain errors.

    Any network problem or 5xx answer becomes :class:`TransportError`; 409
    becomes :class:`ConflictError`; other 4xx become :class:`ValidationError`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(
            base_url=base_url, timeout=timeout,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ScoreClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 500:
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}.",
            )
        if response.status_code == 409:
            detail = _detail(response)
            if not isinstance(detail, dict):
                detail = {"message": _detail_message(response)}
            raise ConflictError(
                str(detail.get("message", "Nickname already taken.")),
                str(detail.get("suggestion", "")),
            )
        if response.status_code >= 400:
            raise ValidationError(_detail_message(response))
        return response

    async def register_nickname(self, nickname: str) -> None:
        await self._request(
            "POST", "/api/register-nickname", json={"nickname": nickname},
        )

    async def record_score(self, nickname: str, score: int) -> None:
        await self._request(
            "POST", "/api/record-score",
            json={"nickname": nickname, "score": score},
        )

    async def fetch_scores(self) -> dict[str, int]:
        """Return the raw nickname → best score mapping."""
        response = await self._request("GET", "/api/record-score")
        try:
            return dict(response.json())
        except (ValueError, TypeError) as exc:
            raise TransportError("Malformed score listing.") from exc

    async def fetch_leaderboard(
        self, limit: int = LEADERBOARD_SIZE,
    ) -> list[LeaderboardEntry]:
        return leaderboard(await self.fetch_scores(), limit=limit)
