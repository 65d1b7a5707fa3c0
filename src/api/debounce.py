"""Debouncing for rapid, keystroke-level input."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Runs a callback with the latest value once input has been quiet.

    Every submit() cancels the pending run and schedules a new one after
    `delay_ms`, so a burst of values triggers a single callback with the
    last value.
    """

    def __init__(self, delay_ms: int, callback: Callable[[str], Awaitable[None]]):
        self.delay = delay_ms / 1000
        self.callback = callback
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit(self, value: str) -> None:
        """Schedule the callback for `value`, replacing any pending run."""
        self.cancel()
        self._task = asyncio.create_task(self._run(value))

    def cancel(self) -> None:
        """Drop the pending run, if any."""
        if self.pending:
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the pending run to finish."""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def _run(self, value: str) -> None:
        await asyncio.sleep(self.delay)
        try:
            await self.callback(value)
        except Exception:
            # Finished runs are never awaited; log and drop the error
            logger.exception(f"Debounced callback failed for {value!r}")
