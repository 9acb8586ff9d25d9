"""REST API route handlers for session lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.server.models import CreateSessionRequest, SessionSummary
from grid_snake.server.session_manager import SessionManager

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a session and start ticking it."""
    manager = _get_manager(request)
    try:
        session = manager.create_session(
            grid_size=body.grid_size,
            tick_rate_ms=body.tick_rate_ms,
            swipe_threshold=body.swipe_threshold,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List running sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the current game state."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    result = session.summary().model_dump()
    result["state"] = session.engine.get_state()
    return result


@router.post("/{session_id}/reset")
async def reset_session(session_id: str, request: Request) -> dict:
    """Start a fresh game in an existing session."""
    try:
        return _get_manager(request).reset_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, request: Request) -> Response:
    """Stop a session and disconnect its sockets."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
