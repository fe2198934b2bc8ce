import asyncio
import logging
from datetime import datetime, tzinfo
from typing import Any, Awaitable, Callable, Optional, Set

import tzlocal
from croniter import croniter

logger = logging.getLogger(__name__)


class CronTimer:
    """
    Recurring timer firing a callback at every due time of a cron expression.

    Due times are computed from the previous due time rather than from the wall
    clock, so a late wake-up still produces one firing per missed due time.
    Each firing runs as its own asyncio task; firings never wait for each other.
    """

    def __init__(self, cron_expression: str, callback: Callable[[], Awaitable[Any]], tz: Optional[tzinfo] = None):
        self.cron_expression = cron_expression
        self.callback = callback
        self.tz: tzinfo = tz or tzlocal.get_localzone()
        self.next_execution_time: Optional[datetime] = None
        self.firings: int = 0
        self._loop_task: Optional[asyncio.Task] = None
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    def start(self) -> None:
        """
        Start the timer. Must be called from a running event loop.
        """
        if self.is_running:
            return
        now = datetime.now(self.tz)
        schedule = croniter(self.cron_expression, now, second_at_beginning=True)
        self.next_execution_time = schedule.get_next(datetime)
        self._loop_task = asyncio.get_running_loop().create_task(self._timer_loop(schedule))
        logger.debug("Timer '%s' started, next execution at %s", self.cron_expression, self.next_execution_time)

    async def _timer_loop(self, schedule: croniter) -> None:
        while True:
            delay = (self.next_execution_time - datetime.now(self.tz)).total_seconds()
            if delay > 0:
                await asyncio.sleep(delay)
            self._fire()
            self.next_execution_time = schedule.get_next(datetime)

    def _fire(self) -> None:
        self.firings += 1
        future = asyncio.create_task(self.callback())
        self._in_flight.add(future)
        future.add_done_callback(self._handle_firing_done)

    def _handle_firing_done(self, future: asyncio.Task) -> None:
        self._in_flight.discard(future)
        if not future.cancelled() and future.exception() is not None:
            logger.error("Timer '%s' callback failed: %s", self.cron_expression, future.exception())

    def stop(self) -> None:
        """
        Stop scheduling further firings. In-flight firings keep running.
        """
        if self._loop_task and not self._loop_task.done():
            self._loop_task.cancel()

    async def cancel(self) -> None:
        """
        Stop the timer and wait for in-flight firings to finish.
        """
        if self._loop_task:
            self.stop()
            try:
                await self._loop_task
            except asyncio.CancelledError:
                pass
            self._loop_task = None
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        logger.debug("Timer '%s' cancelled", self.cron_expression)
