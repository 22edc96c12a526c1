"""Cancelable once-per-second tick schedule.

The clock engine never schedules itself. A presentation layer owns one
TickScheduler, calls :meth:`TickScheduler.sync` with the clock's running flag
after every state change, and :meth:`TickScheduler.close` on teardown so no
orphaned schedule keeps firing.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TickScheduler:
    """Calls *on_tick* every *interval* seconds on the running event loop.

    At most one schedule is active at a time.
    """

    def __init__(self, on_tick: Callable[[], object], interval: float = 1.0):
        self.on_tick = on_tick
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Begin ticking. No-op if a schedule is already active."""
        if self.active:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("tick schedule started interval=%s", self.interval)

    def cancel(self) -> None:
        """Stop ticking. No-op if nothing is scheduled."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.debug("tick schedule cancelled")

    def sync(self, running: bool) -> None:
        """Create the schedule when the clock runs, destroy it when it stops."""
        if running:
            self.start()
        else:
            self.cancel()

    async def close(self) -> None:
        """Cancel unconditionally and wait for the loop task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_at = loop.time() + self.interval
        while True:
            await asyncio.sleep(max(0.0, next_at - loop.time()))
            next_at += self.interval
            try:
                self.on_tick()
            except Exception:
                logger.exception("tick callback failed")
