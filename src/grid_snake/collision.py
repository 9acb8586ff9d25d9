"""Collision detection for a candidate head position."""

from __future__ import annotations

from collections.abc import Iterable

from grid_snake.grid import GRID_SIZE
from grid_snake.snake import Position


def is_collision(
    candidate: Position,
    body: Iterable[Position],
    grid_size: int = GRID_SIZE,
) -> bool:
    """Return True if *candidate* leaves the grid or lands on *body*.

    *body* is the pre-move snake, tail included: the tail has not moved
    away yet when the head arrives, so stepping onto it is fatal.
    """
    x, y = candidate
    if not (0 <= x < grid_size and 0 <= y < grid_size):
        return True
    return any(segment == candidate for segment in body)
