"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

Position = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, so ``UP`` decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_label(cls, label: str) -> Direction | None:
        """Look up a direction by its lowercase name, ``None`` if unknown."""
        return _BY_LABEL.get(label.lower())


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_BY_LABEL: dict[str, Direction] = {d.label: d for d in Direction}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake does not
    own a direction: the game state does, and passes it in on each move.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        length: int = 4,
        heading: Direction = Direction.RIGHT,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = heading.value
        self.body: deque[Position] = deque(
            (start_x - dx * i, start_y - dy * i) for i in range(length)
        )

    @classmethod
    def from_segments(cls, segments: Iterable[Position]) -> Snake:
        """Build a snake from explicit head-first segments."""
        body = deque((int(x), int(y)) for x, y in segments)
        if not body:
            raise ValueError("Snake must have at least one segment.")
        snake = cls.__new__(cls)
        snake.body = body
        return snake

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> Position:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(self, new_head: Position, grow: bool = False) -> None:
        """Push *new_head* onto the front of the body, dropping the tail
        unless the snake grows."""
        self.body.appendleft(new_head)
        if not grow:
            self.body.pop()

    def segments(self) -> tuple[Position, ...]:
        return tuple(self.body)
