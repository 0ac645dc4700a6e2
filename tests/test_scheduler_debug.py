"""Tests for search and parser output at different verbosity levels."""

import logging
from collections.abc import Callable
from io import StringIO

from dayplan.logger import (
    CHANGES_LEVEL,
    CHECKS_LEVEL,
    Verbosity,
    changes_enabled,
    debug_enabled,
    reset_logger,
    setup_logger,
)
from dayplan.parser import parse_tasks
from tests.conftest import make_task


def _capture(verbosity: int, run: Callable[[], object]) -> str:
    stream = StringIO()
    setup_logger(verbosity, stream=stream)
    try:
        run()
    finally:
        reset_logger()
    return stream.getvalue()


def test_verbosity_0_silent(run_search):
    output = _capture(0, lambda: run_search([make_task(0, 600)]))
    assert output == ""


def test_verbosity_1_shows_best_schedules(run_search):
    tasks = [make_task(0, 600), make_task(1, 600, dependencies=[0])]
    output = _capture(1, lambda: run_search(tasks))

    assert "New best at step" in output
    assert "2/2 tasks" in output
    assert "Search finished after" in output
    assert "Skipping" not in output
    assert "Step 1:" not in output


def test_verbosity_2_shows_skips_and_evictions(run_search):
    tasks = [make_task(0, 600), make_task(1, 600, dependencies=[0]), make_task(2, 300)]
    output = _capture(2, lambda: run_search(tasks, max_frontier_size=1))

    assert "Skipping 'task1'" in output
    assert "Evicted state" in output
    assert "Step 1:" not in output


def test_verbosity_3_shows_every_pop(run_search):
    output = _capture(3, lambda: run_search([make_task(0, 600)]))

    assert "Step 1: score=0 placed=0" in output
    assert "Step 2:" in output


def test_parser_reports_dropped_lines_at_checks_level():
    output = _capture(2, lambda: parse_tasks("[5m bad] Broken\n[5m x] Excluded"))

    assert "Dropping line" in output
    assert "Dropping excluded task 'Excluded'" in output


def test_parser_silent_at_level_1():
    output = _capture(1, lambda: parse_tasks("[5m bad] Broken"))
    assert output == ""


def test_verbosity_maps_to_log_levels():
    assert Verbosity.SILENT.level == logging.ERROR
    assert Verbosity.CHANGES.level == CHANGES_LEVEL
    assert Verbosity.CHECKS.level == CHECKS_LEVEL
    assert Verbosity.DEBUG.level == logging.DEBUG


def test_out_of_range_verbosity_is_clamped():
    stream = StringIO()
    assert setup_logger(7, stream=stream) is Verbosity.DEBUG
    assert debug_enabled()
    assert setup_logger(-1, stream=stream) is Verbosity.SILENT
    assert not changes_enabled()
