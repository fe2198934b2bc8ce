import os
import signal
from typing import Any, Dict, List

import pytest

from offline_scheduler.domain.configuration import ScheduleConfigOptions
from offline_scheduler.invokers.callable import CallableInvoker
from offline_scheduler.scheduler import OfflineScheduler, run_standalone


def signalling_provider(sig: signal.Signals):
    """
    Provider raising ``sig`` at the current process while events are being scheduled.
    """
    def provide() -> Dict[str, Any]:
        os.kill(os.getpid(), sig)
        return {
            "schedule-function": {
                "events": [{"schedule": {"rate": "rate(1 minute)", "input": {"scheduler": "1-minute"}}}],
            },
        }
    return provide


@pytest.mark.asyncio
@pytest.mark.parametrize("sig", [signal.SIGINT, signal.SIGTERM])
async def test_schedule_events_standalone(sig: signal.Signals) -> None:
    messages: List[str] = []
    scheduler = OfflineScheduler(
        function_provider=signalling_provider(sig),
        invoker=CallableInvoker(lambda name, payload: None),
        config_options=ScheduleConfigOptions(),
        log=messages.append,
    )

    received = await scheduler.schedule_events_standalone()

    assert received == sig.name
    assert messages == [
        "Starting offline-scheduler in standalone process. Press CTRL+C to stop.",
        'Scheduling [schedule-function] cron: [*/1 * * * *] input: {"scheduler":"1-minute"}',
        f"Got {sig.name} signal. Stopping offline-scheduler...",
    ]
    assert scheduler.jobs == {}


def test_run_standalone_exits_successfully() -> None:
    messages: List[str] = []
    scheduler = OfflineScheduler(
        function_provider=signalling_provider(signal.SIGTERM),
        invoker=CallableInvoker(lambda name, payload: None),
        log=messages.append,
    )

    with pytest.raises(SystemExit) as exc_info:
        run_standalone(scheduler)

    assert exc_info.value.code == 0
    assert messages[-1] == "Got SIGTERM signal. Stopping offline-scheduler..."
