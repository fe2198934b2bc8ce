from .function import FunctionDefinition, ScheduleEvent
from .configuration import FunctionConfiguration, ScheduleConfigOptions

__all__ = ["FunctionDefinition", "ScheduleEvent", "FunctionConfiguration", "ScheduleConfigOptions"]
