"""Command-line interface for dayplan."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .clock import parse_clock, parse_duration
from .exceptions import DayplanError
from .loader import discover_config, load_tasks
from .logger import setup_logger
from .report import format_schedule, format_task_summary
from .scheduler import SchedulingConfig, SchedulingService

app = typer.Typer(
    name="dayplan",
    help="Turn a list of one-line task descriptions into a day schedule",
    add_completion=False,
)

TextArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Task lines (one per line or one per argument); '-' reads stdin"),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Read task lines from this file"),
]


def _join_text(text: list[str] | None) -> str | None:
    if not text:
        return None
    return "\n".join(text)


def _fail(error: Exception) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: dayplan_config.yaml if present)",
        ),
    ] = None,
) -> None:
    """Global options for dayplan commands."""
    setup_logger(verbose)
    ctx.obj = config


@app.command()
def plan(  # noqa: PLR0913 - CLI command needs multiple options
    ctx: typer.Context,
    text: TextArgument = None,
    *,
    file: FileOption = None,
    start: Annotated[
        str | None,
        typer.Option("--start", "-s", help="Start of the day, e.g. 8:30a (default: now)"),
    ] = None,
    rest: Annotated[
        str | None,
        typer.Option("--rest", "-r", help="Rest before each task, e.g. 5m"),
    ] = None,
    max_frontier: Annotated[
        int | None,
        typer.Option("--max-frontier", help="Maximum number of live search states", min=1),
    ] = None,
    show_tasks: Annotated[
        bool,
        typer.Option("--show-tasks", help="Print the parsed tasks before the schedule"),
    ] = False,
) -> None:
    """Schedule the given tasks and print the best plan found."""
    try:
        unified = discover_config(ctx.obj, file)
        config = unified.scheduler if unified else SchedulingConfig()

        overrides: dict[str, int] = {}
        if start is not None:
            overrides["global_start_time"] = parse_clock(start)
        if rest is not None:
            overrides["rest_time"] = parse_duration(rest)
        if max_frontier is not None:
            overrides["max_frontier_size"] = max_frontier
        if overrides:
            config = config.model_copy(update=overrides)

        parsed = load_tasks(_join_text(text), file)
    except DayplanError as e:
        raise _fail(e) from e

    if show_tasks:
        typer.echo(format_task_summary(parsed.tasks, parsed.skipped))
        typer.echo("")

    result = SchedulingService(parsed.tasks, config).schedule()
    typer.echo(format_schedule(result, parsed.tasks))


@app.command()
def tasks(
    text: TextArgument = None,
    *,
    file: FileOption = None,
) -> None:
    """Parse the given tasks and print what was understood."""
    try:
        parsed = load_tasks(_join_text(text), file)
    except DayplanError as e:
        raise _fail(e) from e

    typer.echo(format_task_summary(parsed.tasks, parsed.skipped))


def main() -> None:
    """Entry point for the dayplan command."""
    app()


if __name__ == "__main__":
    main()
