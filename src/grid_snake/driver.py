"""Fixed-period asyncio tick driver."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from grid_snake.engine import GameEngine
from grid_snake.state import GameSnapshot

logger = logging.getLogger(__name__)

TickCallback = Callable[[GameSnapshot], Awaitable[None]]


class TickDriver:
    """Calls :meth:`GameEngine.advance_tick` once per period.

    A single task runs the loop, so a tick always completes before the
    next one is scheduled. The driver keeps running after game over; a
    reset resumes play on the next tick.
    """

    def __init__(
        self,
        engine: GameEngine,
        period_ms: int | None = None,
        on_tick: TickCallback | None = None,
    ) -> None:
        period = period_ms if period_ms is not None else engine.config.tick_ms
        if period <= 0:
            raise ValueError("period_ms must be positive.")
        self.engine = engine
        self.period_ms = period
        self.on_tick = on_tick
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the tick loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info("Tick driver started (period=%d ms).", self.period_ms)

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Tick driver stopped.")

    async def _run(self) -> None:
        interval = self.period_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(interval)
                self.engine.advance_tick()
                if self.on_tick is not None:
                    await self.on_tick(self.engine.snapshot())
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error; driver halted.")
