"""Pytest configuration and fixtures for dayplan tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

import pytest

from dayplan.logger import reset_logger
from dayplan.models import Task, TaskList, TimeWindow
from dayplan.scheduler import BranchAndBoundScheduler, SchedulingConfig, SchedulingResult


@pytest.fixture(autouse=True)
def _clean_logger() -> Iterator[None]:
    """Keep verbosity changes made by one test from leaking into the next."""
    yield
    reset_logger()


def make_task(  # noqa: PLR0913 - mirrors the Task fields
    index: int,
    duration: int,
    *,
    name: str | None = None,
    cooldown: int = 0,
    deadline: int | None = None,
    priority: int = 10,
    windows: Sequence[tuple[int, int | None]] = (),
    dependencies: Sequence[int] = (),
) -> Task:
    """Build a task with a default name of ``task<index>``."""
    return Task(
        index=index,
        name=name or f"task{index}",
        duration=duration,
        cooldown=cooldown,
        deadline=deadline,
        priority=priority,
        windows=tuple(TimeWindow(earliest, latest) for earliest, latest in windows),
        dependencies=tuple(dependencies),
    )


@pytest.fixture
def run_search() -> Callable[..., SchedulingResult]:
    """Run the search with explicit parameters."""

    def _run(
        tasks: Sequence[Task],
        *,
        global_start_time: int = 0,
        rest_time: int = 0,
        max_frontier_size: int = 500_000,
    ) -> SchedulingResult:
        config = SchedulingConfig(rest_time=rest_time, max_frontier_size=max_frontier_size)
        scheduler = BranchAndBoundScheduler(TaskList(list(tasks)), global_start_time, config=config)
        return scheduler.schedule()

    return _run


def assert_constraints_hold(
    tasks: Sequence[Task], result: SchedulingResult, global_start_time: int = 0
) -> None:
    """Check every hard constraint on every placed task."""
    placed: dict[int, Any] = {s.task_index: s for s in result.scheduled_tasks}
    for index, scheduled in placed.items():
        task = tasks[index]
        assert scheduled.start >= global_start_time
        assert scheduled.end == scheduled.start + task.duration
        if task.deadline is not None:
            assert scheduled.end <= task.deadline
        if task.windows:
            assert any(w.accepts(scheduled.start) for w in task.windows)
        for dep in task.dependencies:
            assert dep in placed, f"{task.name} placed before its dependency {dep}"
            assert scheduled.start >= placed[dep].end + tasks[dep].cooldown
