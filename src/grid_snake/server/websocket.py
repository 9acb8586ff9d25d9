"""WebSocket handler for real-time steering and state streaming."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from grid_snake.server.models import PlayerInput
from grid_snake.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Send directions, receive game state each tick and after each input."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    manager.attach(session, websocket)
    logger.info("Socket connected to session %s.", session_id)

    # Initial snapshot so the client can draw immediately.
    await websocket.send_text(
        json.dumps(session.engine.get_state(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = PlayerInput.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError):
                continue

            direction = session.resolve_input(msg)
            if direction is None:
                continue

            session.engine.request_direction_change(direction)
            await websocket.send_text(
                json.dumps(session.engine.get_state(), separators=(",", ":")),
            )
    except WebSocketDisconnect:
        logger.info("Socket disconnected from session %s.", session_id)
    finally:
        manager.detach(session, websocket)
