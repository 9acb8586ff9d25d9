"""Grid Snake: single-player snake simulation core."""

from grid_snake.collision import is_collision
from grid_snake.config import GameConfig
from grid_snake.controls import SwipeTracker, direction_for_key, direction_for_swipe
from grid_snake.engine import GameEngine
from grid_snake.food import FoodGenerator
from grid_snake.grid import GRID_SIZE, CellType, Grid
from grid_snake.snake import Direction, Snake
from grid_snake.state import GameSnapshot, GameState

__all__ = [
    "GRID_SIZE",
    "CellType",
    "Direction",
    "FoodGenerator",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "GameState",
    "Grid",
    "Snake",
    "SwipeTracker",
    "direction_for_key",
    "direction_for_swipe",
    "is_collision",
]
