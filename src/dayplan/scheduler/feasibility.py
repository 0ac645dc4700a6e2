"""Earliest-start computation and the one-task transition between snapshots."""

from __future__ import annotations

from collections.abc import Sequence

from dayplan.models import Task

from .state import PartialSchedule


def earliest_after_dependencies(
    task: Task,
    tasks: Sequence[Task],
    state: PartialSchedule,
    global_start_time: int,
) -> int | None:
    """Earliest start allowed by the horizon and the task's dependencies.

    The horizon is the latest end among placed tasks, or the global start
    when nothing is placed. Each dependency pushes the start to its end plus
    its own cooldown.

    Returns:
        The start time, or None while any dependency is still unplaced
    """
    start = state.horizon(global_start_time)
    for dep in task.dependencies:
        dep_end = state.end_of(dep)
        if dep_end is None:
            return None
        start = max(start, dep_end + tasks[dep].cooldown)
    return start


def earliest_within_constraints(task: Task, start: int) -> int | None:
    """Earliest start at or after ``start`` that meets the deadline and windows.

    Windows are scanned in order and the first one that has not yet closed
    by ``start`` is used, clamping the start up to its opening. The deadline
    is checked both before clamping and against the clamped start.

    Returns:
        The start time, or None if the task can no longer be placed
    """
    if _misses_deadline(task, start):
        return None

    if not task.windows:
        return start

    for window in task.windows:
        if window.reachable_from(start):
            clamped = max(start, window.earliest)
            return None if _misses_deadline(task, clamped) else clamped
    return None


def _misses_deadline(task: Task, start: int) -> bool:
    return task.deadline is not None and start + task.duration > task.deadline


def earliest_feasible_start(
    task: Task,
    tasks: Sequence[Task],
    state: PartialSchedule,
    *,
    global_start_time: int,
    rest_time: int,
) -> int | None:
    """Earliest start for ``task`` given the placed tasks, or None if infeasible."""
    start = earliest_after_dependencies(task, tasks, state, global_start_time)
    if start is None:
        return None
    return earliest_within_constraints(task, start + rest_time)


def extend(
    state: PartialSchedule,
    task: Task,
    tasks: Sequence[Task],
    *,
    global_start_time: int,
    rest_time: int,
) -> PartialSchedule | None:
    """Place ``task`` at its earliest feasible start.

    Returns:
        A new snapshot with the task placed, or None if it cannot be placed
        from ``state``
    """
    start = earliest_feasible_start(
        task, tasks, state, global_start_time=global_start_time, rest_time=rest_time
    )
    if start is None:
        return None
    return state.with_task(task.index, start + task.duration)
