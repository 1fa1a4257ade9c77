"""Fixed-period asyncio tick loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[Any] | Any]


class TickScheduler:
    """Runs one callback per period on a single task.

    The callback is awaited before the next sleep begins, so ticks never
    overlap. An exception raised by the callback stops the loop.
    """

    def __init__(self, period_ms: int = 100) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive.")
        self.period_ms = period_ms
        self.ticks = 0
        self._task: asyncio.Task | None = None
        self._stop_event: asyncio.Event | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback) -> None:
        """Begin invoking *callback* every period."""
        if self.running:
            raise RuntimeError("Scheduler is already running.")
        self.ticks = 0
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(
            self._loop(callback, self._stop_event),
        )

    async def stop(self) -> None:
        """Stop the loop; waits for it unless called from the callback."""
        task, stop_event = self._task, self._stop_event
        self._task = None
        self._stop_event = None
        if task is None or task.done():
            return
        stop_event.set()
        if task is asyncio.current_task():
            # The loop exits once the running callback returns.
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def _loop(
        self, callback: TickCallback, stop_event: asyncio.Event,
    ) -> None:
        interval = self.period_ms / 1000.0
        try:
            while not stop_event.is_set():
                await asyncio.sleep(interval)
                if stop_event.is_set():
                    break
                self.ticks += 1
                result = callback()
                if asyncio.iscoroutine(result):
                    await result
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled after %d ticks.", self.ticks)
        except Exception:
            logger.exception("Tick loop error after %d ticks.", self.ticks)
