from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ScheduleEvent(BaseModel):
    """
    A ``schedule`` trigger attached to a function.
    """
    model_config = ConfigDict(extra="ignore")

    rate: Union[str, List[str]] = Field(..., description="One or more rate/cron expressions")
    input: Dict[str, Any] = Field(default_factory=dict, description="Payload passed to the function on every firing")
    name: Optional[str] = Field(None, description="Optional name of the schedule")
    description: Optional[str] = Field(None, description="Optional description of the schedule")

    @model_validator(mode="before")
    @classmethod
    def accept_shorthand(cls, data: Any) -> Any:
        # `schedule: rate(10 minutes)` is shorthand for `schedule: {rate: rate(10 minutes)}`
        if isinstance(data, str):
            return {"rate": data}
        return data

    @field_validator("rate")
    @classmethod
    def check_rate(cls, v: Union[str, List[str]]) -> Union[str, List[str]]:
        if isinstance(v, list) and not v:
            raise ValueError("At least one rate expression is required")
        return v

    @field_validator("input", mode="before")
    @classmethod
    def default_input(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def rates(self) -> List[str]:
        return [self.rate] if isinstance(self.rate, str) else list(self.rate)


class FunctionDefinition(BaseModel):
    """
    A function as declared in a serverless project.

    Only ``events`` matter for scheduling; other keys are kept for reference.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, description="Deployed function name")
    handler: Optional[str] = Field(None, description="Handler path, e.g. src/handler.run")
    events: List[Dict[str, Any]] = Field(default_factory=list, description="Event triggers attached to the function")

    @field_validator("events", mode="before")
    @classmethod
    def default_events(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def schedule_events(self) -> List[ScheduleEvent]:
        """
        Triggers carrying a ``schedule`` key, in declaration order.
        """
        return [
            ScheduleEvent.model_validate(event["schedule"])
            for event in self.events
            if isinstance(event, dict) and "schedule" in event
        ]
