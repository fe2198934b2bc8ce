import logging
from typing import Any, List, Mapping

from offline_scheduler.domain.configuration import FunctionConfiguration
from offline_scheduler.domain.function import FunctionDefinition
from offline_scheduler.expressions import convert_expression_to_cron

logger = logging.getLogger(__name__)


def get_function_configurations(functions: Mapping[str, Any]) -> List[FunctionConfiguration]:
    """
    Flatten the schedule triggers of every function into function configurations.

    Functions are visited in mapping order and triggers in declaration order.
    Each trigger yields one configuration whose ``cron`` list keeps the order of
    its rate expressions. Functions without schedule triggers yield nothing.

    Args:
        functions (Mapping[str, Any]): Function name to ``FunctionDefinition`` (or its raw dict).

    Returns:
        List[FunctionConfiguration]: The resolved configurations.

    Raises:
        InvalidExpression: If any expression cannot be converted. Nothing is returned in that case.
        pydantic.ValidationError: If a function definition is malformed.
    """
    configurations: List[FunctionConfiguration] = []

    for function_name, definition in functions.items():
        if not isinstance(definition, FunctionDefinition):
            definition = FunctionDefinition.model_validate(definition)

        for event in definition.schedule_events:
            configurations.append(FunctionConfiguration(
                function_name=function_name,
                cron=[convert_expression_to_cron(rate) for rate in event.rates],
                input=event.input,
            ))

    logger.debug("Resolved %d schedule configuration(s) from %d function(s)", len(configurations), len(functions))
    return configurations
