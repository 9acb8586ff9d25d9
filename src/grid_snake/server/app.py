"""FastAPI application factory for the session server."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from grid_snake.server.routes import router
from grid_snake.server.session_manager import SessionManager
from grid_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _stop_sessions_on_shutdown(app: FastAPI) -> AsyncIterator[None]:
    try:
        yield
    finally:
        manager: SessionManager = app.state.session_manager
        await manager.cleanup()
        logger.info("Session server shut down.")


def create_app(manager: SessionManager | None = None) -> FastAPI:
    """Build the application around *manager*, or a fresh one.

    The manager is attached at build time, so transports that skip the
    lifespan (such as ``httpx.ASGITransport``) still find it. Shutdown
    stops every session's tick loop.
    """
    app = FastAPI(
        title="Grid Snake API",
        version="0.1.0",
        lifespan=_stop_sessions_on_shutdown,
    )
    app.state.session_manager = manager if manager is not None else SessionManager()
    app.include_router(router)
    app.include_router(ws_router)
    return app
