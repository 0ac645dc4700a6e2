"""Immutable partial-schedule snapshots explored by the search."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PartialSchedule:
    """Which tasks are placed so far and when each of them ends.

    A snapshot is never modified after creation: ``with_task`` builds a new
    one, so any number of branches may share a common parent. Only the
    read-only task list is shared between snapshots.
    """

    end_times: tuple[int | None, ...]
    num_scheduled: int = 0
    frontier_end: int | None = None  # Latest end time among placed tasks

    @classmethod
    def root(cls, num_tasks: int) -> PartialSchedule:
        """The empty schedule that every search starts from."""
        return cls(end_times=(None,) * num_tasks)

    @property
    def is_complete(self) -> bool:
        return self.num_scheduled == len(self.end_times)

    def is_scheduled(self, index: int) -> bool:
        return self.end_times[index] is not None

    def end_of(self, index: int) -> int | None:
        return self.end_times[index]

    def horizon(self, global_start_time: int) -> int:
        """Earliest moment anything new could begin, before rest time."""
        return global_start_time if self.frontier_end is None else self.frontier_end

    def with_task(self, index: int, end: int) -> PartialSchedule:
        """Return a copy with task ``index`` placed so that it ends at ``end``."""
        if self.end_times[index] is not None:
            raise ValueError(f"Task {index} is already scheduled")
        end_times = list(self.end_times)
        end_times[index] = end
        frontier = end if self.frontier_end is None else max(self.frontier_end, end)
        return PartialSchedule(
            end_times=tuple(end_times),
            num_scheduled=self.num_scheduled + 1,
            frontier_end=frontier,
        )

    def unscheduled(self) -> list[int]:
        return [i for i, end in enumerate(self.end_times) if end is None]

    def placements(self) -> list[tuple[int, int]]:
        """``(index, end)`` for every placed task, sorted by end time, then index."""
        placed = [(end, i) for i, end in enumerate(self.end_times) if end is not None]
        return [(i, end) for end, i in sorted(placed)]

    def order(self) -> list[int]:
        """Scheduled task indices sorted by end time, then index."""
        return [i for i, _ in self.placements()]
