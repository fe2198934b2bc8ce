"""
Offline Scheduler

Runs the ``schedule`` triggers of serverless functions in a local process.

Core Concepts:

Function:
    A function declared in a serverless project. Its ``schedule`` events carry one
    or more rate expressions (``rate(5 minutes)``) and an input payload.

Function Configuration:
    One schedule event resolved to canonical 5-field cron expressions.

Timer:
    A recurring asyncio timer registered per cron expression. Each firing invokes
    the function through an invoker; a failed invocation is reported and the timer
    keeps running.

Relationships:
    - A Function can produce multiple Function Configurations, one per schedule event.
    - A Function Configuration registers one Timer per cron expression.
"""

from .expressions import InvalidExpression, convert_expression_to_cron
from .domain import FunctionConfiguration, FunctionDefinition, ScheduleConfigOptions, ScheduleEvent
from .invokers import CallableInvoker, InvocationError, Invoker, LambdaHttpInvoker, ServerlessInvoker
from .providers import FunctionProvider, json_file_provider, static_provider
from .resolver import get_function_configurations
from .scheduler import OfflineScheduler, run_standalone
from .timers import CronTimer

__all__ = [
    "InvalidExpression",
    "convert_expression_to_cron",
    "FunctionConfiguration",
    "FunctionDefinition",
    "ScheduleConfigOptions",
    "ScheduleEvent",
    "CallableInvoker",
    "InvocationError",
    "Invoker",
    "LambdaHttpInvoker",
    "ServerlessInvoker",
    "FunctionProvider",
    "json_file_provider",
    "static_provider",
    "get_function_configurations",
    "OfflineScheduler",
    "run_standalone",
    "CronTimer",
]
