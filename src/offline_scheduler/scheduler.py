import asyncio
import json
import logging
import signal
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from offline_scheduler.domain.configuration import FunctionConfiguration, ScheduleConfigOptions
from offline_scheduler.invokers.protocol import Invoker
from offline_scheduler.providers import FunctionProvider
from offline_scheduler.resolver import get_function_configurations
from offline_scheduler.timers import CronTimer

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS: Tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class OfflineScheduler:
    """
    Schedules the ``schedule`` triggers of serverless functions in the local process.

    Every call to ``schedule_events`` re-queries the function provider, resolves
    each trigger to cron expressions and registers one timer per expression.
    Timers are keyed by function name and a schedule index counted across all
    of the function's triggers.
    User-facing notices go to ``log`` (``print`` by default).
    """

    def __init__(
        self,
        function_provider: FunctionProvider,
        invoker: Invoker,
        config_options: Optional[ScheduleConfigOptions] = None,
        log: Callable[[str], None] = print,
    ):
        self.function_provider = function_provider
        self.invoker = invoker
        self.config_options: ScheduleConfigOptions = config_options or ScheduleConfigOptions()
        self.log = log
        self.jobs: Dict[Tuple[str, int], CronTimer] = {}

    async def schedule_events_standalone(self) -> str:
        """
        Schedule all events, then wait for SIGINT or SIGTERM.

        Returns:
            str: Name of the signal that stopped the scheduler.
        """
        self.log("Starting offline-scheduler in standalone process. Press CTRL+C to stop.")
        loop = asyncio.get_running_loop()
        waiters: Dict[signal.Signals, asyncio.Future] = {}
        for sig in TERMINATION_SIGNALS:
            waiters[sig] = loop.create_future()
            loop.add_signal_handler(sig, self._resolve_waiter, waiters[sig], sig.name)

        try:
            await self.schedule_events()
            done, _ = await asyncio.wait(waiters.values(), return_when=asyncio.FIRST_COMPLETED)
            received = done.pop().result()
        finally:
            for sig in TERMINATION_SIGNALS:
                loop.remove_signal_handler(sig)

        self.log(f"Got {received} signal. Stopping offline-scheduler...")
        await self.stop()
        return received

    @staticmethod
    def _resolve_waiter(waiter: asyncio.Future, signal_name: str) -> None:
        if not waiter.done():
            waiter.set_result(signal_name)

    async def schedule_events(self) -> None:
        """
        Resolve all schedule triggers and register their timers.

        Timers left from a previous call are stopped first. New timers start only
        once every trigger is registered, so no firing overlaps registration.
        Immediate runs report only failures.

        Raises:
            InvalidExpression: If any expression is malformed; nothing is registered then.
        """
        configurations = get_function_configurations(self.function_provider())
        skip_functions = self.config_options.skip_set
        run_immediately = self.config_options.run_immediately

        for previous in self.jobs.values():
            previous.stop()
        self.jobs = {}
        schedule_indexes: Dict[str, int] = {}

        for configuration in configurations:
            function_name = configuration.function_name

            if function_name in skip_functions:
                self.log(f"Skipping scheduled function [{function_name}]")
                continue

            self.log(
                f"Scheduling [{function_name}] cron: [{','.join(configuration.cron)}] "
                f"input: {json.dumps(configuration.input, separators=(',', ':'), ensure_ascii=False)}"
            )

            for cron in configuration.cron:
                if run_immediately:
                    self.log(f"Running scheduled function immediately [{function_name}]")
                    await self._invoke(configuration, report_success=False)
                # indexes run across all triggers of a function
                index = schedule_indexes.get(function_name, 0)
                schedule_indexes[function_name] = index + 1
                self._register(configuration, index, cron)

        for timer in self.jobs.values():
            timer.start()

    def _register(self, configuration: FunctionConfiguration, index: int, cron: str) -> None:
        key = (configuration.function_name, index)
        self.jobs[key] = CronTimer(cron, lambda: self._invoke(configuration))
        logger.debug("Registered timer %s for '%s'", key, cron)

    async def _invoke(self, configuration: FunctionConfiguration, report_success: bool = True) -> Any:
        function_name = configuration.function_name
        try:
            result = await self.invoker.invoke(function_name, dict(configuration.input))
        except Exception as e:
            logger.debug("Invocation of %s failed", function_name, exc_info=True)
            self.log(f"Failed to execute scheduled function: [{function_name}] Error: {e}")
            return None
        if report_success:
            self.log(f"Succesfully invoked scheduled function: [{function_name}]")
        return result

    async def stop(self) -> None:
        """
        Cancel all registered timers.
        """
        timers: List[CronTimer] = list(self.jobs.values())
        await asyncio.gather(*(timer.cancel() for timer in timers))
        self.jobs.clear()


def run_standalone(scheduler: OfflineScheduler) -> None:
    """
    Run ``scheduler`` as its own process until SIGINT/SIGTERM, then exit with status 0.
    """
    asyncio.run(scheduler.schedule_events_standalone())
    sys.exit(0)
