"""Tests for the in-memory session registry."""

from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError

from grid_snake.server.models import PlayerInput
from grid_snake.server.session_manager import SessionManager
from grid_snake.snake import Direction


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_create_starts_ticking(self):
        manager = SessionManager()
        session = manager.create_session(tick_rate_ms=20, seed=1)
        assert manager.get_session(session.session_id) is session
        assert session.driver is not None and session.driver.running
        await asyncio.sleep(0.1)
        assert session.engine.tick >= 1
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_invalid_config_rejected(self):
        manager = SessionManager()
        with pytest.raises(ValueError):
            manager.create_session(grid_size=0)
        assert manager.list_sessions() == []

    @pytest.mark.asyncio
    async def test_list_sessions(self):
        manager = SessionManager()
        a = manager.create_session(tick_rate_ms=1000)
        b = manager.create_session(grid_size=12, tick_rate_ms=1000)
        summaries = {s.session_id: s for s in manager.list_sessions()}
        assert set(summaries) == {a.session_id, b.session_id}
        assert summaries[b.session_id].grid_size == 12
        assert summaries[a.session_id].observers == 0
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_reset_session(self):
        manager = SessionManager()
        session = manager.create_session(tick_rate_ms=10, seed=2)
        await asyncio.sleep(0.05)
        state = manager.reset_session(session.session_id)
        assert state["tick"] == 0
        assert state["score"] == 0
        assert state["game_over"] is False
        assert session.driver.running
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_close_session(self):
        manager = SessionManager()
        session = manager.create_session(tick_rate_ms=10)
        await manager.close_session(session.session_id)
        assert manager.get_session(session.session_id) is None
        assert not session.driver.running

    @pytest.mark.asyncio
    async def test_unknown_session(self):
        manager = SessionManager()
        with pytest.raises(KeyError):
            manager.reset_session("missing")
        with pytest.raises(KeyError):
            await manager.close_session("missing")

    @pytest.mark.asyncio
    async def test_many_sessions_run_to_game_over(self):
        manager = SessionManager()
        sessions = [
            manager.create_session(tick_rate_ms=20, seed=i) for i in range(20)
        ]
        for _ in range(100):
            await asyncio.sleep(0.05)
            if all(s.engine.game_over for s in sessions):
                break
        assert all(s.engine.game_over for s in sessions)
        await manager.cleanup()
        assert manager.list_sessions() == []


class TestInputResolution:
    @pytest.mark.asyncio
    async def test_resolve_messages(self):
        manager = SessionManager()
        session = manager.create_session(tick_rate_ms=1000, swipe_threshold=10)
        resolve = session.resolve_input
        assert resolve(PlayerInput(direction="UP")) == Direction.UP
        assert resolve(PlayerInput(direction="sideways")) is None
        assert resolve(PlayerInput(key="ArrowLeft")) == Direction.LEFT
        assert resolve(PlayerInput(key="x")) is None
        assert resolve(
            PlayerInput.model_validate({"swipe": {"dx": 0, "dy": 15}}),
        ) == Direction.DOWN
        assert resolve(
            PlayerInput.model_validate({"swipe": {"dx": 5, "dy": 0}}),
        ) is None
        assert resolve(PlayerInput()) is None
        await manager.cleanup()

    def test_non_finite_swipe_rejected_by_model(self):
        with pytest.raises(ValidationError):
            PlayerInput.model_validate({"swipe": {"dx": 0, "dy": float("nan")}})
        with pytest.raises(ValidationError):
            PlayerInput.model_validate({"swipe": {"dx": float("inf"), "dy": 0}})
