"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RegisterNicknameRequest(BaseModel):
    """Request body for POST /api/register-nickname."""

    nickname: str = Field(min_length=1)


class RecordScoreRequest(BaseModel):
    """Request body for POST /api/record-score.

    Whole-valued numbers such as ``5.0`` are accepted; strings, booleans and
    fractional numbers are not.
    """

    nickname: str = Field(min_length=1)
    score: int

    @field_validator("score", mode="before")
    @classmethod
    def check_numeric_score(cls, value: object) -> object:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("Score must be a number.")
        return value


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ConflictDetail(BaseModel):
    """Body of a 409 response's ``detail``."""

    message: str
    suggestion: str
