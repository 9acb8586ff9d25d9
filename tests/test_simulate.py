"""Tests for headless simulation."""

import pytest

from grid_snake.config import GameConfig
from grid_snake.simulate import SimulationResult, run_simulation


class TestRunSimulation:
    def test_runs_requested_games(self):
        result = run_simulation(GameConfig(seed=0), games=5, max_ticks=100)
        assert result.games == 5
        assert len(result.scores) == 5
        assert all(1 <= t <= 100 for t in result.ticks)

    def test_deterministic_with_seed(self):
        a = run_simulation(GameConfig(seed=11), games=3, max_ticks=200)
        b = run_simulation(GameConfig(seed=11), games=3, max_ticks=200)
        assert a.scores == b.scores
        assert a.ticks == b.ticks

    def test_straight_line_hits_wall(self):
        result = run_simulation(
            GameConfig(grid_size=10, seed=0),
            games=1, max_ticks=100, turn_probability=0.0,
        )
        assert result.ticks == [5]

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            run_simulation(games=0)
        with pytest.raises(ValueError):
            run_simulation(max_ticks=0)


class TestSimulationResult:
    def test_summary(self):
        result = SimulationResult(
            games=2, scores=[1, 3], ticks=[10, 30], wall_time_seconds=0.5,
        )
        assert result.mean_score == 2.0
        assert result.max_score == 3
        assert result.mean_ticks == 20.0
        assert result.ticks_per_second == 80.0
        assert "score mean 2.00, max 3" in result.summary()
