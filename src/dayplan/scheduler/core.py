"""Result dataclasses for the scheduling system."""

from dataclasses import dataclass, field
from enum import Enum


class ScheduleStatus(str, Enum):
    """Outcome of a search run."""

    SUCCESS = "success"  # Every task was placed
    INCOMPLETE = "incomplete"  # Some tasks could not be placed


@dataclass(frozen=True)
class ScheduledTask:
    """A placed task, times in seconds since midnight."""

    task_index: int
    start: int
    end: int


def _default_scheduled_list() -> list[ScheduledTask]:
    return []


def _default_int_list() -> list[int]:
    return []


@dataclass
class SchedulingResult:
    """Best schedule found by a search run, with diagnostics."""

    status: ScheduleStatus
    scheduled_tasks: list[ScheduledTask] = field(default_factory=_default_scheduled_list)
    search_steps: int = 0  # States popped from the frontier
    used_duration: int = 0  # Sum of the durations of placed tasks
    total_duration: int = 0  # Horizon of the best schedule minus the global start
    incomplete_tasks: list[int] = field(default_factory=_default_int_list)
    evicted_states: int = 0
    peak_frontier_size: int = 0
    global_start_time: int = 0

    @property
    def utilization(self) -> float:
        """Fraction of the scheduled span spent on tasks (0.0 for an empty span)."""
        if self.total_duration <= 0:
            return 0.0
        return self.used_duration / self.total_duration

    def for_task(self, task_index: int) -> ScheduledTask | None:
        """Placement of one task, or None if it was not scheduled."""
        for scheduled in self.scheduled_tasks:
            if scheduled.task_index == task_index:
                return scheduled
        return None
