"""Mutable game state record and its immutable snapshot."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from grid_snake.grid import Grid
from grid_snake.snake import Direction, Position, Snake


@dataclass
class GameState:
    """All authoritative data for one game.

    Owned by a :class:`~grid_snake.engine.GameEngine`, which is the only
    writer.
    """

    snake: Snake
    food: Position
    direction: Direction = Direction.RIGHT
    score: int = 0
    game_over: bool = False
    can_change_direction: bool = True
    tick: int = 0

    @classmethod
    def initial(cls, grid: Grid, length: int, food: Position) -> GameState:
        start_x, start_y = grid.center()
        return cls(
            snake=Snake(start_x, start_y, length=length, heading=Direction.RIGHT),
            food=food,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game, taken after a tick or input call."""

    snake: tuple[Position, ...]
    food: Position
    direction: Direction
    score: int
    game_over: bool
    can_change_direction: bool
    tick: int
    grid_size: int

    @classmethod
    def of(cls, state: GameState, grid_size: int) -> GameSnapshot:
        return cls(
            snake=state.snake.segments(),
            food=state.food,
            direction=state.direction,
            score=state.score,
            game_over=state.game_over,
            can_change_direction=state.can_change_direction,
            tick=state.tick,
            grid_size=grid_size,
        )

    @property
    def head(self) -> Position:
        return self.snake[0]

    def to_array(self) -> np.ndarray:
        """Rasterize the board, indexed ``[y, x]``."""
        return Grid(self.grid_size).render(self.snake, self.food)

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "game_over": self.game_over,
            "direction": self.direction.label,
            "can_change_direction": self.can_change_direction,
            "grid_size": self.grid_size,
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
        }
