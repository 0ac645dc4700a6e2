"""Bounded best-first (branch-and-bound) search over partial schedules."""

from __future__ import annotations

from collections.abc import Sequence

from dayplan.clock import format_clock
from dayplan.logger import checks_enabled, debug_enabled, get_logger
from dayplan.models import Task, TaskList

from .config import SchedulingConfig
from .core import ScheduledTask, ScheduleStatus, SchedulingResult
from .estimator import estimate
from .feasibility import extend
from .heap import IndexedHeap
from .state import PartialSchedule

logger = get_logger()


class BranchAndBoundScheduler:
    """Places as many tasks as possible using a size-bounded best-first search.

    The frontier is an ``IndexedHeap`` of partial schedules ranked by
    ``estimate``. A second heap ordered worst-first holds the same handles;
    whenever the frontier grows past ``max_frontier_size`` the worst entries
    are deleted from the frontier by handle. Popping a state for expansion
    also drops its mirror entry, so both heaps stay within the bound.

    Equal scores favour the newest state, which makes the search dive toward
    complete schedules instead of widening level by level. The most complete
    schedule popped so far is kept as the answer; on a tie the one found
    first stays. The search stops when a schedule covers every task or the
    frontier runs dry.
    """

    def __init__(
        self,
        tasks: TaskList | Sequence[Task],
        global_start_time: int | None = None,
        *,
        config: SchedulingConfig | None = None,
    ):
        """Initialize the scheduler.

        Args:
            tasks: Tasks to schedule, each ``task.index`` matching its position
            global_start_time: Seconds since midnight at which the day starts;
                taken from ``config`` when omitted
            config: Start time, rest time and frontier bound

        Raises:
            ValueError: If neither the argument nor the config gives a start time
        """
        self.tasks = tasks if isinstance(tasks, TaskList) else TaskList.from_tasks(tasks)
        self.config = config or SchedulingConfig()
        if global_start_time is None:
            global_start_time = self.config.global_start_time
        if global_start_time is None:
            raise ValueError("No global start time given")
        self.global_start_time = global_start_time
        self.rest_time = self.config.rest_time
        self.max_frontier_size = self.config.max_frontier_size

        self._frontier: IndexedHeap[PartialSchedule] = IndexedHeap()
        self._worst_first: IndexedHeap[int] = IndexedHeap(reverse=True)
        self._mirrors: dict[int, int] = {}  # Frontier handle -> worst-first handle
        self._evicted = 0

    def schedule(self) -> SchedulingResult:
        """Run the search to completion and return the best schedule found."""
        self._frontier = IndexedHeap()
        self._worst_first = IndexedHeap(reverse=True)
        self._mirrors = {}
        self._evicted = 0

        tasks = self.tasks.tasks
        log_checks = checks_enabled()
        log_debug = debug_enabled()

        root = PartialSchedule.root(len(tasks))
        self._push(root, 0)
        best = root
        steps = 0
        peak = len(self._frontier)

        while self._frontier:
            score, state = self._pop()
            steps += 1
            if log_debug:
                logger.debug(
                    f"Step {steps}: score={score} placed={state.num_scheduled} "
                    f"frontier={len(self._frontier)}"
                )

            if state.num_scheduled > best.num_scheduled:
                best = state
                logger.changes(
                    f"New best at step {steps}: {best.num_scheduled}/{len(tasks)} tasks, "
                    f"ends {format_clock(best.horizon(self.global_start_time))}"
                )

            if best.is_complete:
                break

            for task in tasks:
                if state.is_scheduled(task.index):
                    continue
                successor = extend(
                    state,
                    task,
                    tasks,
                    global_start_time=self.global_start_time,
                    rest_time=self.rest_time,
                )
                if successor is None:
                    if log_checks:
                        logger.checks(f"  Skipping {task.name!r}: not placeable from this state")
                    continue
                self._push(
                    successor,
                    estimate(
                        successor,
                        tasks,
                        rest_time=self.rest_time,
                        global_start_time=self.global_start_time,
                    ),
                )

            peak = max(peak, len(self._frontier))
            self._enforce_bound(log_checks)

        logger.changes(
            f"Search finished after {steps} steps, frontier size {len(self._frontier)}, "
            f"{self._evicted} states evicted"
        )
        return self._build_result(best, steps, peak)

    def _push(self, state: PartialSchedule, score: int) -> None:
        handle = self._frontier.push(score, state)
        self._mirrors[handle] = self._worst_first.push(score, handle)

    def _pop(self) -> tuple[float, PartialSchedule]:
        """Take the best state off the frontier along with its mirror entry."""
        handle = self._frontier.peek_handle()
        self._worst_first.delete(self._mirrors.pop(handle))
        return self._frontier.pop()

    def _enforce_bound(self, log_checks: bool) -> None:
        """Evict the worst frontier entries until the bound holds again."""
        while len(self._frontier) > self.max_frontier_size:
            score, handle = self._worst_first.pop()
            self._mirrors.pop(handle, None)
            if not self._frontier.is_live(handle):
                continue
            self._frontier.delete(handle)
            self._evicted += 1
            if log_checks:
                logger.checks(f"  Evicted state with score {score}")

    def _build_result(self, best: PartialSchedule, steps: int, peak: int) -> SchedulingResult:
        tasks = self.tasks.tasks
        scheduled: list[ScheduledTask] = []
        used = 0
        for index, end in best.placements():
            duration = tasks[index].duration
            scheduled.append(ScheduledTask(task_index=index, start=end - duration, end=end))
            used += duration

        total = 0 if best.frontier_end is None else best.frontier_end - self.global_start_time
        return SchedulingResult(
            status=ScheduleStatus.SUCCESS if best.is_complete else ScheduleStatus.INCOMPLETE,
            scheduled_tasks=scheduled,
            search_steps=steps,
            used_duration=used,
            total_duration=total,
            incomplete_tasks=best.unscheduled(),
            evicted_states=self._evicted,
            peak_frontier_size=peak,
            global_start_time=self.global_start_time,
        )
