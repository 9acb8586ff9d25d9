"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    grid_size: int = Field(default=20, ge=6, le=100)
    tick_rate_ms: int = Field(default=100, ge=20, le=2000)
    swipe_threshold: float = Field(default=30.0, gt=0)
    seed: int | None = None


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    grid_size: int
    tick_rate_ms: int
    tick: int
    score: int
    game_over: bool
    observers: int


class SwipeInput(BaseModel):
    """Swipe displacement sent over the play socket."""

    dx: float = Field(allow_inf_nan=False)
    dy: float = Field(allow_inf_nan=False)


class PlayerInput(BaseModel):
    """One message on the play socket; the first field set wins."""

    direction: str | None = None
    key: str | None = None
    swipe: SwipeInput | None = None
