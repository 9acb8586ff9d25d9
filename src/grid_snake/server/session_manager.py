"""In-memory session registry, lifecycle management, and tick broadcasting."""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from grid_snake.config import GameConfig
from grid_snake.controls import direction_for_key, direction_for_swipe
from grid_snake.driver import TickDriver
from grid_snake.engine import GameEngine
from grid_snake.server.models import PlayerInput, SessionSummary
from grid_snake.snake import Direction
from grid_snake.state import GameSnapshot

logger = logging.getLogger(__name__)


def _encode(state: dict) -> str:
    return json.dumps(state, separators=(",", ":"))


@dataclass
class GameSession:
    """One engine, its tick driver, and the sockets watching it."""

    session_id: str
    config: GameConfig
    engine: GameEngine
    driver: TickDriver | None = None
    sockets: list[WebSocket] = field(default_factory=list)

    def summary(self) -> SessionSummary:
        snap = self.engine.snapshot()
        return SessionSummary(
            session_id=self.session_id,
            grid_size=self.config.grid_size,
            tick_rate_ms=self.config.tick_ms,
            tick=snap.tick,
            score=snap.score,
            game_over=snap.game_over,
            observers=len(self.sockets),
        )

    def resolve_input(self, msg: PlayerInput) -> Direction | None:
        """Translate a socket message into a direction, if it names one."""
        if msg.direction is not None:
            return Direction.from_label(msg.direction)
        if msg.key is not None:
            return direction_for_key(msg.key)
        if msg.swipe is not None:
            return direction_for_swipe(
                msg.swipe.dx, msg.swipe.dy, self.config.swipe_threshold,
            )
        return None


class SessionManager:
    """Central registry managing all game sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        grid_size: int = 20,
        tick_rate_ms: int = 100,
        swipe_threshold: float = 30.0,
        seed: int | None = None,
    ) -> GameSession:
        """Create a session and start its tick loop.

        Must be called with a running event loop.
        """
        config = GameConfig(
            grid_size=grid_size,
            tick_ms=tick_rate_ms,
            swipe_threshold=swipe_threshold,
            seed=seed,
        )
        session = GameSession(
            session_id=uuid.uuid4().hex[:12],
            config=config,
            engine=GameEngine(config),
        )

        async def on_tick(snapshot: GameSnapshot) -> None:
            await self._broadcast(session, snapshot.to_dict())

        session.driver = TickDriver(session.engine, on_tick=on_tick)
        self._sessions[session.session_id] = session
        session.driver.start()
        logger.info(
            "Session %s created (grid=%d, tick=%d ms).",
            session.session_id, grid_size, tick_rate_ms,
        )
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        return self._sessions.get(session_id)

    def _require(self, session_id: str) -> GameSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    def reset_session(self, session_id: str) -> dict:
        """Reset a session's game; its tick loop keeps running."""
        session = self._require(session_id)
        session.engine.reset()
        return session.engine.get_state()

    async def close_session(self, session_id: str) -> None:
        """Stop a session's tick loop, close its sockets, and forget it."""
        session = self._require(session_id)
        del self._sessions[session_id]
        if session.driver is not None:
            await session.driver.stop()
        await self._close_connections(session)
        logger.info("Session %s closed.", session_id)

    def attach(self, session: GameSession, ws: WebSocket) -> None:
        session.sockets.append(ws)

    def detach(self, session: GameSession, ws: WebSocket) -> None:
        if ws in session.sockets:
            session.sockets.remove(ws)

    async def _close_connections(self, session: GameSession) -> None:
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session closed.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.sockets.clear()

    async def _broadcast(self, session: GameSession, state: dict) -> None:
        """Send game state to every connected socket."""
        payload = _encode(state)
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the
        # live list without affecting this send loop.
        for ws in list(session.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            self.detach(session, ws)

    async def cleanup(self) -> None:
        """Stop every tick loop and close every socket."""
        for session_id in list(self._sessions):
            await self.close_session(session_id)
        logger.info("SessionManager cleanup complete.")
