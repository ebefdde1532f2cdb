"""Fixed-interval polling.

The scheduler owns one timer task. Every tick spawns the callback as its own
task, so stopping the timer never interrupts a cycle that is already running.
Overlap between ticks is the callback's concern (the controller skips while a
cycle is outstanding).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine, Optional, Set


log = logging.getLogger("job_feed.scheduler")

DEFAULT_INTERVAL_S = 2.0


class PollingScheduler:
    """Call ``tick`` immediately on :meth:`start`, then every ``interval_s`` seconds."""

    def __init__(self, tick: Callable[[], Coroutine[Any, Any, Any]], interval_s: float = DEFAULT_INTERVAL_S) -> None:
        if interval_s <= 0:
            raise ValueError(f"interval_s must be > 0, got {interval_s}")
        self._tick = tick
        self.interval_s = interval_s
        self._timer: Optional[asyncio.Task] = None
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def is_active(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self) -> None:
        """Activate the timer. Must be called with a running event loop.

        Calling it while already active does nothing.
        """
        if self.is_active:
            log.debug("scheduler already active")
            return
        self._spawn()
        self._timer = asyncio.get_running_loop().create_task(self._run())
        log.info("polling every %.3gs", self.interval_s)

    def stop(self) -> None:
        """Cancel future ticks. In-flight ticks are left to finish."""
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        log.info("polling stopped (%d tick(s) still in flight)", len(self._in_flight))

    async def wait_idle(self) -> None:
        """Wait until every in-flight tick has settled."""
        while True:
            pending = {t for t in self._in_flight if not t.done()}
            if not pending:
                return
            await asyncio.wait(pending)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_s)
            self._spawn()

    def _spawn(self) -> None:
        task = asyncio.get_running_loop().create_task(self._tick())
        self._in_flight.add(task)
        task.add_done_callback(self._settled)

    def _settled(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.error("polling tick failed", exc_info=exc)
