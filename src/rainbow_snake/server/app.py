"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rainbow_snake.server.routes import health_router, router
from rainbow_snake.store import InMemoryStore, NicknameRegistry, ScoreStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    logger.info(
        "Score service ready (%d nicknames, %d scores).",
        sum(1 for _ in app.state.nickname_registry.store.items()),
        len(app.state.score_store.all_scores()),
    )
    yield
    logger.info("Score service shutting down.")


def create_app(
    registry: NicknameRegistry | None = None,
    scores: ScoreStore | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Stores default to process-local memory; pass instances backed by other
    :class:`~rainbow_snake.store.KeyValueStore` implementations to swap them.
    """
    app = FastAPI(
        title="Rainbow Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.nickname_registry = (
        registry if registry is not None else NicknameRegistry(InMemoryStore())
    )
    app.state.score_store = (
        scores if scores is not None else ScoreStore(InMemoryStore())
    )
    app.include_router(router)
    app.include_router(health_router)
    return app
