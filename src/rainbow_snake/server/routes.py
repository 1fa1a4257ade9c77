"""REST API route handlers for nicknames and scores."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from rainbow_snake.errors import ConflictError, ValidationError
from rainbow_snake.server.models import (
    ConflictDetail,
    MessageResponse,
    RecordScoreRequest,
    RegisterNicknameRequest,
)
from rainbow_snake.store import NicknameRegistry, ScoreStore

router = APIRouter(prefix="/api", tags=["scores"])
health_router = APIRouter(tags=["health"])


def _get_registry(request: Request) -> NicknameRegistry:
    return request.app.state.nickname_registry


def _get_scores(request: Request) -> ScoreStore:
    return request.app.state.score_store


@router.post("/register-nickname")
async def register_nickname(
    body: RegisterNicknameRequest, request: Request,
) -> MessageResponse:
    """Reserve a nickname, or answer 409 with a free alternative."""
    try:
        _get_registry(request).register(body.nickname)
    except ConflictError as exc:
        detail = ConflictDetail(message=str(exc), suggestion=exc.suggestion)
        raise HTTPException(status_code=409, detail=detail.model_dump()) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return MessageResponse(message="Nickname registered successfully.")


@router.post("/record-score")
async def record_score(
    body: RecordScoreRequest, request: Request,
) -> MessageResponse:
    """Store the best score seen for a nickname."""
    try:
        _get_scores(request).record(body.nickname, body.score)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return MessageResponse(message="Score recorded successfully.")


@router.get("/record-score")
async def list_scores(request: Request) -> dict[str, int]:
    """Return every nickname's best score, unsorted."""
    return _get_scores(request).all_scores()


@health_router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
