"""Parser for the one-line-per-task description language.

A task line looks like::

    [1h30m >9a $5p l3][#report,research] Write the quarterly report

The first bracket holds whitespace-separated time tokens, the optional second
bracket holds labels, and the rest of the line is the task name.

Time tokens are an optional command character followed by digits:

- bare ``30m`` / ``2h`` / ``90``: duration (accumulates); ``9:30`` or ``9a``:
  point start time
- ``+``: cooldown before dependents may start
- ``~``: uncertainty around the point start time
- ``>`` / ``<``: earliest / latest allowed start time
- ``=``: additional duration
- ``$``: deadline for the task's end
- ``l``: priority 1-10
- ``x`` / ``c``: exclude the task

Label tokens are ``#name`` for the task's own label and ``,name`` for each
label it depends on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .clock import clock_seconds, duration_seconds
from .exceptions import ParseError
from .logger import get_logger
from .models import DEFAULT_PRIORITY, MAX_PRIORITY, MIN_PRIORITY, Task, TaskList, TimeWindow

logger = get_logger()

LINE_RE = re.compile(r"^\s*\[(.*?)\](?:\[(.*?)\])?\s+(.*?)\s*$")
TOKEN_RE = re.compile(r"^([+~><=$lxc]?)(\d+)(?::(\d+))?([smhap]?)$")
LABEL_RE = re.compile(r"([#,])([A-Za-z0-9\-_]+)")

DURATION_COMMANDS = {"", "+", "~", "="}
CLOCK_COMMANDS = {">", "<", "$"}
EXCLUDE_COMMANDS = {"x", "c"}
DURATION_SUFFIXES = {"", "s", "m", "h"}
CLOCK_SUFFIXES = {"", "a", "p"}


@dataclass
class TimeSpec:
    """Constraints read from a task's time bracket."""

    duration: int = 0
    cooldown: int = 0
    deadline: int | None = None
    priority: int = DEFAULT_PRIORITY
    windows: tuple[TimeWindow, ...] = ()
    excluded: bool = False
    pattern: str = ""


def _default_str_list() -> list[str]:
    return []


@dataclass
class ParsedLine:
    """A task line before its dependency labels are resolved."""

    name: str
    time: TimeSpec
    label: str | None = None
    requires: list[str] = field(default_factory=_default_str_list)


@dataclass(frozen=True)
class SkippedLine:
    """A line that looked like a task but was left out."""

    line: str
    reason: str


def _default_skipped_list() -> list[SkippedLine]:
    return []


@dataclass
class ParseResult:
    """Tasks parsed from a description, plus the lines that were dropped."""

    tasks: TaskList
    skipped: list[SkippedLine] = field(default_factory=_default_skipped_list)


def _read_duration(token: str, amount: str, minutes: str | None, suffix: str) -> int:
    if minutes is not None or suffix not in DURATION_SUFFIXES:
        raise ParseError(f"Expected a duration in token {token!r}")
    return duration_seconds(amount, suffix)


def _read_clock(token: str, amount: str, minutes: str | None, suffix: str) -> int:
    if suffix not in CLOCK_SUFFIXES:
        raise ParseError(f"Expected a clock time in token {token!r}")
    return clock_seconds(amount, minutes, suffix)


def parse_time_spec(text: str) -> TimeSpec:  # noqa: PLR0912 - one branch per command
    """Parse the contents of a time bracket.

    Raises:
        ParseError: If any token is malformed
    """
    spec = TimeSpec()
    tokens = text.split()
    spec.pattern = " ".join(tokens)

    point_start: int | None = None
    uncertainty = 0
    after: int | None = None
    before: int | None = None

    for token in tokens:
        lowered = token.lower()
        if lowered in EXCLUDE_COMMANDS:
            spec.excluded = True
            continue

        match = TOKEN_RE.match(lowered)
        if not match:
            raise ParseError(f"Malformed time token {token!r}")
        command, amount, minutes, suffix = match.groups()

        if command in EXCLUDE_COMMANDS:
            spec.excluded = True
        elif command == "":
            # Bare token: a duration unless it reads as a clock time
            if minutes is None and suffix in DURATION_SUFFIXES:
                spec.duration += duration_seconds(amount, suffix)
            else:
                point_start = _read_clock(token, amount, minutes, suffix)
        elif command == "+":
            spec.cooldown = _read_duration(token, amount, minutes, suffix)
        elif command == "~":
            uncertainty = _read_duration(token, amount, minutes, suffix)
        elif command == "=":
            spec.duration += _read_duration(token, amount, minutes, suffix)
        elif command == ">":
            after = _read_clock(token, amount, minutes, suffix)
        elif command == "<":
            before = _read_clock(token, amount, minutes, suffix)
        elif command == "$":
            spec.deadline = _read_clock(token, amount, minutes, suffix)
        elif command == "l":
            if minutes is not None or suffix:
                raise ParseError(f"Malformed priority token {token!r}")
            priority = int(amount)
            if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
                raise ParseError(
                    f"Priority must be {MIN_PRIORITY}-{MAX_PRIORITY}, got {priority}"
                )
            spec.priority = priority

    try:
        if point_start is not None:
            spec.windows = (
                TimeWindow(max(0, point_start - uncertainty), point_start + uncertainty),
            )
        elif after is not None or before is not None:
            spec.windows = (TimeWindow(after or 0, before),)
    except ValueError as e:
        raise ParseError(str(e)) from e

    return spec


def parse_labels(text: str) -> tuple[str | None, list[str]]:
    """Parse the contents of a label bracket into (own label, dependency labels)."""
    label: str | None = None
    requires: list[str] = []
    for kind, name in LABEL_RE.findall(text):
        if kind == "#":
            label = name
        else:
            requires.append(name)
    return label, requires


def parse_line(line: str) -> ParsedLine | None:
    """Parse a single task line.

    Returns:
        The parsed line, or None if the line is not in task form

    Raises:
        ParseError: If the time bracket is malformed
    """
    match = LINE_RE.match(line)
    if not match:
        return None
    time_text, label_text, name = match.groups()
    label, requires = parse_labels(label_text or "")
    return ParsedLine(name=name, time=parse_time_spec(time_text), label=label, requires=requires)


def resolve_dependencies(lines: list[ParsedLine]) -> TaskList:
    """Turn parsed lines into tasks, replacing dependency labels by indices.

    Every task sharing a label satisfies a dependency on that label. Labels
    nobody carries resolve to nothing and a task never depends on itself.
    """
    label_to_indices: dict[str, list[int]] = {}
    for index, parsed in enumerate(lines):
        if parsed.label is not None:
            label_to_indices.setdefault(parsed.label, []).append(index)

    tasks: list[Task] = []
    for index, parsed in enumerate(lines):
        dependencies = {
            dep
            for req in parsed.requires
            for dep in label_to_indices.get(req, [])
            if dep != index
        }
        spec = parsed.time
        tasks.append(
            Task(
                index=index,
                name=parsed.name,
                duration=spec.duration,
                cooldown=spec.cooldown,
                deadline=spec.deadline,
                priority=spec.priority,
                windows=spec.windows,
                dependencies=tuple(dependencies),
                label=parsed.label,
                requires=tuple(parsed.requires),
                pattern=spec.pattern,
            )
        )
    return TaskList(tasks)


def parse_tasks(text: str) -> ParseResult:
    """Parse a multi-line task description.

    Malformed and excluded lines are dropped and reported in
    ``ParseResult.skipped``; lines that are not in task form are ignored.
    """
    parsed_lines: list[ParsedLine] = []
    skipped: list[SkippedLine] = []

    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            parsed = parse_line(line)
        except ParseError as e:
            logger.checks(f"Dropping line {line.strip()!r}: {e}")
            skipped.append(SkippedLine(line=line, reason=str(e)))
            continue
        if parsed is None:
            logger.debug(f"Ignoring non-task line {line.strip()!r}")
            continue
        if parsed.time.excluded:
            logger.checks(f"Dropping excluded task {parsed.name!r}")
            skipped.append(SkippedLine(line=line, reason="excluded"))
            continue
        parsed_lines.append(parsed)

    return ParseResult(tasks=resolve_dependencies(parsed_lines), skipped=skipped)


def parse_task_file(path: Path | str) -> ParseResult:
    """Read and parse a task description file.

    Raises:
        ParseError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")
    return parse_tasks(path.read_text(encoding="utf-8"))
