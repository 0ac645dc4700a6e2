"""dayplan - schedule a day's tasks from one-line descriptions."""

from .exceptions import ConfigError, DayplanError, ParseError, ValidationError
from .models import Task, TaskList, TimeWindow
from .parser import ParseResult, parse_tasks
from .scheduler import (
    BranchAndBoundScheduler,
    ScheduledTask,
    ScheduleStatus,
    SchedulingConfig,
    SchedulingResult,
    SchedulingService,
)

__version__ = "0.1.0"

__all__ = [
    "BranchAndBoundScheduler",
    "ConfigError",
    "DayplanError",
    "ParseError",
    "ParseResult",
    "ScheduleStatus",
    "ScheduledTask",
    "SchedulingConfig",
    "SchedulingResult",
    "SchedulingService",
    "Task",
    "TaskList",
    "TimeWindow",
    "ValidationError",
    "parse_tasks",
]
