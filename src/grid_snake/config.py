"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from grid_snake.grid import GRID_SIZE

logger = logging.getLogger(__name__)

TICK_MS = 100
SWIPE_THRESHOLD = 30.0
INITIAL_LENGTH = 4


@dataclass(frozen=True)
class GameConfig:
    """Tunables for a single game instance.

    Values are fixed once an engine is built from them; changing the grid
    size or speed means building a new engine.
    """

    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    swipe_threshold: float = SWIPE_THRESHOLD
    initial_length: int = INITIAL_LENGTH
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive.")
        if self.swipe_threshold <= 0:
            raise ValueError("swipe_threshold must be positive.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        # The snake starts at the centre with its body trailing leftwards.
        if self.grid_size // 2 - (self.initial_length - 1) < 0:
            raise ValueError(
                "initial_length does not fit the configured grid; increase "
                "grid_size or reduce initial_length."
            )

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with the non-``None`` overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values) if values else self

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
