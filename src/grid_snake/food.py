"""Food placement logic."""

from __future__ import annotations

import logging

import numpy as np

from grid_snake.grid import GRID_SIZE
from grid_snake.snake import Position

logger = logging.getLogger(__name__)


class FoodGenerator:
    """Draws food positions uniformly over the whole grid.

    Uses an injected NumPy RNG for deterministic, reproducible placement.
    Cells occupied by the snake are not excluded, so food can land on the
    body.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate_food(self) -> Position:
        """Return a new food position with x and y drawn independently."""
        x, y = self.rng.integers(0, self.grid_size, size=2)
        position = (int(x), int(y))
        logger.debug("Food placed at %s.", position)
        return position
