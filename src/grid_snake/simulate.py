"""Headless simulation of many games with a random steering policy."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate results from a batch of headless games."""

    games: int
    scores: list[int]
    ticks: list[int]
    wall_time_seconds: float

    @property
    def mean_score(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    @property
    def max_score(self) -> int:
        return max(self.scores, default=0)

    @property
    def mean_ticks(self) -> float:
        return float(np.mean(self.ticks)) if self.ticks else 0.0

    @property
    def ticks_per_second(self) -> float:
        if self.wall_time_seconds <= 0:
            return 0.0
        return sum(self.ticks) / self.wall_time_seconds

    def summary(self) -> str:
        return (
            f"Simulated {self.games} game(s) | "
            f"score mean {self.mean_score:.2f}, max {self.max_score} | "
            f"mean ticks {self.mean_ticks:.1f} | "
            f"{self.ticks_per_second:.0f} ticks/s"
        )


def run_simulation(
    config: GameConfig | None = None,
    *,
    games: int = 10,
    max_ticks: int = 500,
    turn_probability: float = 0.2,
) -> SimulationResult:
    """Play *games* games, each capped at *max_ticks* ticks.

    Before every tick the policy requests a random direction with
    probability *turn_probability*; the engine drops reversals as usual.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")

    config = config if config is not None else GameConfig()
    rng = np.random.default_rng(config.seed)
    engine = GameEngine(config, rng=rng)

    scores: list[int] = []
    ticks: list[int] = []
    start = time.perf_counter()
    for game in range(games):
        if game:
            engine.reset()
        while not engine.game_over and engine.tick < max_ticks:
            if rng.random() < turn_probability:
                engine.request_direction_change(
                    _DIRECTIONS[rng.integers(len(_DIRECTIONS))],
                )
            engine.advance_tick()
        scores.append(engine.score)
        ticks.append(engine.tick)
    elapsed = time.perf_counter() - start

    result = SimulationResult(
        games=games, scores=scores, ticks=ticks, wall_time_seconds=elapsed,
    )
    logger.info("Simulation finished: %s", result.summary())
    return result
