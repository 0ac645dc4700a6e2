"""Ranking heuristic for frontier states."""

from __future__ import annotations

from collections.abc import Sequence

from dayplan.models import Task

from .feasibility import earliest_within_constraints
from .state import PartialSchedule


def estimate(
    state: PartialSchedule,
    tasks: Sequence[Task],
    *,
    rest_time: int,
    global_start_time: int,
) -> int:
    """Optimistic completion cost of ``state``; lower is better.

    Every unplaced task that could still start at the current horizon adds
    its duration plus the rest time. A task that could not (its deadline or
    windows have already passed) adds ``duration * priority`` as a penalty.
    Dependencies and interactions between remaining tasks are ignored, so
    this ranks states rather than bounding them.
    """
    horizon = state.horizon(global_start_time)
    remaining = 0
    for index, end in enumerate(state.end_times):
        if end is not None:
            continue
        task = tasks[index]
        if earliest_within_constraints(task, horizon) is None:
            remaining += task.duration * task.priority
        else:
            remaining += task.duration + rest_time
    return horizon + remaining
