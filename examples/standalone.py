from typing import Any, Dict

from offline_scheduler.domain.configuration import ScheduleConfigOptions
from offline_scheduler.invokers.callable import CallableInvoker
from offline_scheduler.providers import static_provider
from offline_scheduler.scheduler import OfflineScheduler, run_standalone

functions = {
    "cleanup": {
        "handler": "src/functions/cleanup.handler",
        "events": [
            {"schedule": {"rate": "rate(1 minute)", "input": {"scope": "tmp"}}},
            {"http": {"path": "cleanup", "method": "post"}},
        ],
    },
    "report": {
        "handler": "src/functions/report.handler",
        "events": [
            {"schedule": {"rate": ["rate(2 hours)", "cron(0 9 ? * MON-FRI *)"]}},
        ],
    },
}

def handler(function_name: str, payload: Dict[str, Any]) -> None:
    print(f"Executing {function_name} with payload: {payload}")

scheduler = OfflineScheduler(
    function_provider=static_provider(functions),
    invoker=CallableInvoker(handler),
    config_options=ScheduleConfigOptions(run_immediately=True),
)

if __name__ == "__main__":
    run_standalone(scheduler)
