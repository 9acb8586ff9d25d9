"""Grid geometry and rasterization for the snake board."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

GRID_SIZE = 20


class CellType(enum.IntEnum):
    """Integer codes stored in a rasterized board."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


class Grid:
    """Square board of ``size`` x ``size`` cells.

    Coordinates are (x, y) with ``x`` the column and ``y`` the row, so a
    rasterized board is indexed ``cells[y, x]``.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 1:
            raise ValueError("Grid size must be at least 1.")
        self.size = size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def center(self) -> tuple[int, int]:
        return self.size // 2, self.size // 2

    def render(
        self,
        snake: Iterable[tuple[int, int]],
        food: tuple[int, int] | None,
    ) -> np.ndarray:
        """Rasterize a snake body and food cell into an int8 array.

        Snake cells are painted after the food, so a food cell that lies
        under the body is hidden.
        """
        cells = np.zeros((self.size, self.size), dtype=np.int8)
        if food is not None and self.in_bounds(*food):
            cells[food[1], food[0]] = CellType.FOOD
        for i, (x, y) in enumerate(snake):
            if self.in_bounds(x, y):
                cells[y, x] = CellType.HEAD if i == 0 else CellType.SNAKE
        return cells