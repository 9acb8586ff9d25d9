"""Mapping of raw key presses and swipe gestures onto directions.

These helpers only translate; feeding the result to
:meth:`~grid_snake.engine.GameEngine.request_direction_change` is what
applies the reversal and input-lock rules.
"""

from __future__ import annotations

import math

from grid_snake.config import SWIPE_THRESHOLD
from grid_snake.snake import Direction

KEY_BINDINGS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Map a key name (case-insensitive) to a direction, or ``None``."""
    return KEY_BINDINGS.get(key.lower())


def direction_for_swipe(
    dx: float,
    dy: float,
    threshold: float = SWIPE_THRESHOLD,
) -> Direction | None:
    """Map a swipe displacement to a direction along its dominant axis.

    Ties go to the vertical axis. Returns ``None`` unless the dominant
    displacement strictly exceeds *threshold*, or if either component is
    not finite.
    """
    if not (math.isfinite(dx) and math.isfinite(dy)):
        return None
    if abs(dx) > abs(dy):
        if abs(dx) <= threshold:
            return None
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if abs(dy) <= threshold:
        return None
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeTracker:
    """Turns a touch start plus subsequent moves into one direction.

    Once a move crosses the threshold the start point is dropped, so a
    single gesture yields at most one direction. Moves made while the
    engine is not accepting input keep the start point, so a gesture
    held across a tick still registers afterwards.
    """

    def __init__(self, threshold: float = SWIPE_THRESHOLD) -> None:
        if threshold <= 0:
            raise ValueError("threshold must be positive.")
        self.threshold = threshold
        self._start: tuple[float, float] | None = None

    @property
    def active(self) -> bool:
        return self._start is not None

    def begin(self, x: float, y: float) -> None:
        self._start = (x, y)

    def move(
        self, x: float, y: float, accepting: bool = True,
    ) -> Direction | None:
        if self._start is None or not accepting:
            return None
        sx, sy = self._start
        direction = direction_for_swipe(x - sx, y - sy, self.threshold)
        if direction is not None:
            self._start = None
        return direction

    def cancel(self) -> None:
        self._start = None
