import asyncio
import sys

from offline_scheduler.domain.configuration import ScheduleConfigOptions
from offline_scheduler.invokers.serverless import ServerlessInvoker
from offline_scheduler.invokers.http import LambdaHttpInvoker
from offline_scheduler.providers import json_file_provider
from offline_scheduler.scheduler import OfflineScheduler

# Generate the file with: sls print --format json > serverless.json
provider = json_file_provider("serverless.json")

async def main(use_http: bool):
    invoker = LambdaHttpInvoker("http://localhost:3002") if use_http else ServerlessInvoker(stage="dev")
    scheduler = OfflineScheduler(
        function_provider=provider,
        invoker=invoker,
        config_options=ScheduleConfigOptions(skip_functions=["nightly-export"]),
    )
    await scheduler.schedule_events_standalone()

if __name__ == "__main__":
    asyncio.run(main("--http" in sys.argv))
