"""Tick-based game engine composing state, collision, and food logic."""

from __future__ import annotations

import logging
import threading

import numpy as np

from grid_snake.collision import is_collision
from grid_snake.config import GameConfig
from grid_snake.food import FoodGenerator
from grid_snake.grid import Grid
from grid_snake.snake import Direction, Position
from grid_snake.state import GameSnapshot, GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the game state and is its only writer.
    :meth:`advance_tick` moves the snake one cell and
    :meth:`request_direction_change` steers it; renderers read
    :meth:`snapshot`. A single lock guards the whole state, so ticks and
    input may arrive from different threads.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.food_generator = FoodGenerator(self.config.grid_size, rng=self.rng)
        self._lock = threading.Lock()
        self._state = self._fresh_state()

    def _fresh_state(self) -> GameState:
        return GameState.initial(
            self.grid,
            self.config.initial_length,
            self.food_generator.generate_food(),
        )

    # --- read-only accessors ---

    @property
    def snake(self) -> tuple[Position, ...]:
        return self._state.snake.segments()

    @property
    def food(self) -> Position:
        return self._state.food

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def can_change_direction(self) -> bool:
        return self._state.can_change_direction

    @property
    def tick(self) -> int:
        return self._state.tick

    # --- operations ---

    def reset(self) -> None:
        """Reinitialize every field and draw a fresh food position."""
        with self._lock:
            self._state = self._fresh_state()
            food = self._state.food
        logger.info("Game reset; food at %s.", food)

    def request_direction_change(self, requested: Direction) -> None:
        """Accept at most one non-reversing direction change per tick.

        A request equal to the current direction is ignored and leaves the
        input unlocked; only an actual change locks it.
        """
        with self._lock:
            state = self._state
            if not state.can_change_direction:
                return
            if requested == state.direction or requested == state.direction.opposite:
                return
            logger.debug(
                "Direction %s -> %s at tick %d.",
                state.direction.label, requested.label, state.tick,
            )
            state.direction = requested
            state.can_change_direction = False

    def advance_tick(self) -> None:
        """Advance the game by one tick. No-op once the game is over."""
        with self._lock:
            state = self._state
            if state.game_over:
                return

            state.tick += 1
            snake = state.snake
            new_head = snake.next_head(state.direction)

            # Checked against the pre-move body, tail included.
            if is_collision(new_head, snake.body, self.grid.size):
                self._end_game()
                return

            ate = new_head == state.food
            snake.advance(new_head, grow=ate)
            if ate:
                state.score += 1
                state.food = self.food_generator.generate_food()
                logger.debug(
                    "Food eaten at %s; score %d, length %d.",
                    new_head, state.score, len(snake),
                )

            state.can_change_direction = True

    def snapshot(self) -> GameSnapshot:
        """Return an immutable view of the current state."""
        with self._lock:
            return GameSnapshot.of(self._state, self.grid.size)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return self.snapshot().to_dict()

    def _end_game(self) -> None:
        """Mark the game as over. Caller holds the lock."""
        self._state.game_over = True
        logger.info(
            "Snake died at tick %d with score %d.",
            self._state.tick, self._state.score,
        )
