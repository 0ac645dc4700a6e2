"""Data models for dayplan tasks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from functools import total_ordering

from .clock import format_clock
from .exceptions import ValidationError

MIN_PRIORITY = 1
MAX_PRIORITY = 10
DEFAULT_PRIORITY = MAX_PRIORITY


@total_ordering
@dataclass(frozen=True)
class TimeWindow:
    """A closed interval of allowed start times, in seconds since midnight.

    ``latest=None`` leaves the window open-ended.
    """

    earliest: int
    latest: int | None = None

    def __post_init__(self) -> None:
        if self.latest is not None and self.latest < self.earliest:
            raise ValueError(f"Window ends before it starts: [{self.earliest}, {self.latest}]")

    def accepts(self, start: int) -> bool:
        """True if a task may start at ``start`` within this window."""
        return self.earliest <= start and (self.latest is None or start <= self.latest)

    def reachable_from(self, start: int) -> bool:
        """True if a start no earlier than ``start`` can still land in this window."""
        return self.latest is None or start <= self.latest

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeWindow):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[int, float]:
        return (self.earliest, float("inf") if self.latest is None else self.latest)

    def __str__(self) -> str:
        latest = "" if self.latest is None else format_clock(self.latest)
        return f"({format_clock(self.earliest)},{latest})"


@dataclass(frozen=True)
class Task:
    """A schedulable task with its dependencies already resolved to indices.

    Instances are shared read-only by every search state.
    """

    index: int
    name: str
    duration: int
    cooldown: int = 0
    deadline: int | None = None
    priority: int = DEFAULT_PRIORITY
    windows: tuple[TimeWindow, ...] = ()
    dependencies: tuple[int, ...] = ()
    label: str | None = None
    requires: tuple[str, ...] = ()  # Dependency labels as written
    pattern: str = ""  # Normalized time-spec the task was parsed from

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Task {self.name!r}: duration must be >= 0, got {self.duration}")
        if self.cooldown < 0:
            raise ValueError(f"Task {self.name!r}: cooldown must be >= 0, got {self.cooldown}")
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Task {self.name!r}: priority must be in "
                f"{MIN_PRIORITY}-{MAX_PRIORITY}, got {self.priority}"
            )
        # Keep windows ordered so the first-fit scan in feasibility is well defined
        object.__setattr__(self, "windows", tuple(sorted(self.windows)))
        object.__setattr__(self, "dependencies", tuple(sorted(set(self.dependencies))))

    def summary(self) -> str:
        """One-line description of the task's constraints."""
        parts = [f"dur={self.duration}", f"cd={self.cooldown}"]
        if self.deadline is not None:
            parts.append(f"ddl={format_clock(self.deadline)}")
        if self.windows:
            parts.append("int=" + "".join(str(w) for w in self.windows))
        parts.append(f"pr={self.priority}")

        labels = f"#{self.label or ''}" + "".join(f",{req}" for req in self.requires)
        return f"[{self.pattern}]({','.join(parts)})[{labels}] {self.name}"


def _default_task_list() -> list[Task]:
    return []


@dataclass
class TaskList:
    """Ordered collection of tasks, indexed by ``Task.index``."""

    tasks: list[Task] = field(default_factory=_default_task_list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check that indices match positions and dependencies are in range.

        Raises:
            ValidationError: If either check fails
        """
        count = len(self.tasks)
        for position, task in enumerate(self.tasks):
            if task.index != position:
                raise ValidationError(
                    f"Task {task.name!r} has index {task.index} but sits at position {position}"
                )
            for dep in task.dependencies:
                if not 0 <= dep < count:
                    raise ValidationError(
                        f"Task {task.name!r} depends on unknown task index {dep}"
                    )
                if dep == position:
                    raise ValidationError(f"Task {task.name!r} depends on itself")

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def names(self) -> list[str]:
        return [task.name for task in self.tasks]

    def by_label(self) -> dict[str, list[int]]:
        """Map each label to the indices of every task carrying it."""
        result: dict[str, list[int]] = {}
        for task in self.tasks:
            if task.label is not None:
                result.setdefault(task.label, []).append(task.index)
        return result

    def summary(self) -> str:
        return "\n".join(task.summary() for task in self.tasks)

    @classmethod
    def from_tasks(cls, tasks: Sequence[Task]) -> TaskList:
        return cls(list(tasks))
