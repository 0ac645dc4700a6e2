"""Plain-text rendering of task lists and schedules."""

from __future__ import annotations

from .clock import format_clock
from .models import TaskList
from .parser import SkippedLine
from .scheduler import SchedulingResult

NAME_WIDTH = 30
PATTERN_WIDTH = 20


def format_task_summary(tasks: TaskList, skipped: list[SkippedLine] | None = None) -> str:
    """List every parsed task with its constraints, then any dropped lines."""
    lines = [task.summary() for task in tasks]
    if skipped:
        lines.append("")
        lines.append("Dropped lines:")
        lines.extend(f"  {item.line.strip()}  ({item.reason})" for item in skipped)
    return "\n".join(lines)


def format_schedule(result: SchedulingResult, tasks: TaskList) -> str:
    """Render a schedule the way the ``plan`` command prints it.

    One row per placed task in end-time order, then the tasks that could not
    be placed, then the utilization line.
    """
    lines = [
        f"Start time: {format_clock(result.global_start_time)}",
        f"#steps = {result.search_steps}",
    ]
    for scheduled in result.scheduled_tasks:
        task = tasks[scheduled.task_index]
        lines.append(
            f"{task.name:>{NAME_WIDTH}} [{task.pattern:>{PATTERN_WIDTH}}]   "
            f"{format_clock(scheduled.start)} - {format_clock(scheduled.end)}"
        )

    if result.incomplete_tasks:
        lines.append("Task not yet assigned:")
        lines.extend(tasks[index].name for index in result.incomplete_tasks)

    percent = int(100 * result.utilization)
    lines.append(f"Utility: {result.used_duration}/{result.total_duration} ({percent}%)")
    return "\n".join(lines)
