"""
Application service: drives the two dashboard timelines.

  - Market timeline: one cycle immediately, then one every MARKET_INTERVAL_SECONDS
    on a fixed-rate grid measured from the end of start(). A cycle is spawned
    as its own task, so a slow fetch never delays the next tick; overlapping
    cycles are allowed and whichever finishes last owns the rendered list.
  - Chart timeline: exactly one cycle, at start-up.

Cycles are plain async callables returning anything; an exception raised by a
cycle is logged here and never stops the timer.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

Cycle = Callable[[], Awaitable[Any]]


class DashboardScheduler:
    MARKET_INTERVAL_SECONDS: float = 10.0

    def __init__(
        self,
        market_cycle: Cycle,
        chart_cycle: Cycle,
        interval: float = MARKET_INTERVAL_SECONDS,
    ) -> None:
        self._market_cycle = market_cycle
        self._chart_cycle = chart_cycle
        self._interval = interval
        self._timer: Optional[asyncio.Task] = None
        self._pending: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self) -> None:
        """Fire both timelines now and arm the market timer. Needs a running loop."""
        if self.running:
            raise RuntimeError("Scheduler already started.")
        self._spawn(self._market_cycle, "market")
        self._spawn(self._chart_cycle, "chart")
        self._timer = asyncio.create_task(self._tick_forever())
        logger.info("Dashboard scheduler started (market every %.1fs)", self._interval)

    async def stop(self) -> None:
        """Cancel the timer and every in-flight cycle. Used on process shutdown."""
        tasks = list(self._pending)
        if self._timer is not None:
            tasks.append(self._timer)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._timer = None
        logger.info("Dashboard scheduler stopped")

    async def _tick_forever(self) -> None:
        loop = asyncio.get_running_loop()
        next_fire = loop.time()
        while True:
            next_fire += self._interval
            await asyncio.sleep(max(0.0, next_fire - loop.time()))
            self._spawn(self._market_cycle, "market")

    def _spawn(self, cycle: Cycle, name: str) -> None:
        task = asyncio.create_task(self._guarded(cycle, name), name=f"{name}-cycle")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @staticmethod
    async def _guarded(cycle: Cycle, name: str) -> None:
        try:
            await cycle()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Unexpected error in %s cycle", name)
