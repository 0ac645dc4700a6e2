"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from dayplan.cli import app
from dayplan.unified_config import CONFIG_FILENAME

runner = CliRunner()

DAY = "[30m][#read] Read papers\n[1h][#write,read] Write draft\n"


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a stray dayplan_config.yaml in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


class TestPlanCommand:
    """Test the plan command."""

    def test_plan_from_argument(self) -> None:
        result = runner.invoke(app, ["plan", DAY, "--start", "9a", "--rest", "0"])

        assert result.exit_code == 0
        assert "Start time: 09:00" in result.stdout
        assert "Read papers" in result.stdout
        assert "09:00 - 09:30" in result.stdout
        assert "09:30 - 10:30" in result.stdout
        assert "Utility: 5400/5400 (100%)" in result.stdout
        assert "Task not yet assigned" not in result.stdout

    def test_plan_one_line_per_argument(self) -> None:
        result = runner.invoke(
            app, ["plan", "[30m] A", "[30m] B", "--start", "8:00", "--rest", "5m"]
        )

        assert result.exit_code == 0
        assert "08:05 - 08:35" in result.stdout
        assert "08:40 - 09:10" in result.stdout

    def test_plan_lists_incomplete_tasks(self) -> None:
        result = runner.invoke(
            app, ["plan", "[1h $9a] Too late\n[10m] Fine", "--start", "9a", "--rest", "0"]
        )

        assert result.exit_code == 0
        assert "Task not yet assigned:" in result.stdout
        assert "Too late" in result.stdout.split("Task not yet assigned:")[1]

    def test_plan_from_file(self, tmp_path: Path) -> None:
        task_file = tmp_path / "today.txt"
        task_file.write_text(DAY, encoding="utf-8")

        result = runner.invoke(
            app, ["plan", "--file", str(task_file), "--start", "10a", "--rest", "0"]
        )

        assert result.exit_code == 0
        assert "10:00 - 10:30" in result.stdout

    def test_plan_from_stdin(self) -> None:
        result = runner.invoke(app, ["plan", "--start", "7a", "--rest", "0"], input="[15m] Tea\n")

        assert result.exit_code == 0
        assert "07:00 - 07:15" in result.stdout

    def test_plan_uses_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text(
            "scheduler:\n  global_start_time: '6:00'\n  rest_time: 10m\n", encoding="utf-8"
        )

        result = runner.invoke(app, ["--config", str(config), "plan", "[15m] Run"])

        assert result.exit_code == 0
        assert "06:10 - 06:25" in result.stdout

    def test_options_override_config_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            "scheduler:\n  global_start_time: '6:00'\n  rest_time: 10m\n", encoding="utf-8"
        )

        result = runner.invoke(app, ["plan", "[15m] Run", "--rest", "0"])

        assert result.exit_code == 0
        assert "06:00 - 06:15" in result.stdout

    def test_show_tasks(self) -> None:
        result = runner.invoke(
            app, ["plan", DAY + "[5m nope] Broken", "--start", "9a", "--show-tasks"]
        )

        assert result.exit_code == 0
        assert "(dur=1800,cd=0,pr=10)" in result.stdout
        assert "Dropped lines:" in result.stdout
        assert "Broken" in result.stdout

    def test_bad_start_time(self) -> None:
        result = runner.invoke(app, ["plan", DAY, "--start", "noon"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "none.yaml"), "plan", DAY])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_missing_task_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["plan", "--file", str(tmp_path / "none.txt")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_verbose_reports_search(self) -> None:
        result = runner.invoke(app, ["--verbose", "1", "plan", DAY, "--start", "9a"])

        assert result.exit_code == 0
        assert "Search finished" in result.output


class TestTasksCommand:
    """Test the tasks command."""

    def test_tasks_prints_summary(self) -> None:
        result = runner.invoke(app, ["tasks", DAY])

        assert result.exit_code == 0
        assert "[30m](dur=1800,cd=0,pr=10)[#read] Read papers" in result.stdout
        assert "[1h](dur=3600,cd=0,pr=10)[#write,read] Write draft" in result.stdout

    def test_tasks_reports_dropped_lines(self) -> None:
        result = runner.invoke(app, ["tasks", "[5m x] Skip me\n[5m] Keep"])

        assert result.exit_code == 0
        assert "Dropped lines:" in result.stdout
        assert "(excluded)" in result.stdout
