from typing import Any, Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field


class FunctionConfiguration(BaseModel):
    """
    One schedule trigger of a function, resolved to cron expressions.
    """
    model_config = ConfigDict(frozen=True)

    function_name: str = Field(..., description="Name of the function to invoke")
    cron: List[str] = Field(..., description="Cron expressions, one per source rate expression")
    input: Dict[str, Any] = Field(default_factory=dict, description="Payload passed on every invocation")


class ScheduleConfigOptions(BaseModel):
    """
    Options read from the ``custom.schedule`` block of a serverless project.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    skip_functions: List[str] = Field(default_factory=list, alias="skipFunctions", description="Functions that must not be scheduled")
    run_immediately: bool = Field(default=False, alias="runImmediately", description="Invoke every schedule once before registering it")

    @property
    def skip_set(self) -> FrozenSet[str]:
        return frozenset(self.skip_functions)
