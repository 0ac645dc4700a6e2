"""Task loading with config discovery."""

from __future__ import annotations

import sys
from pathlib import Path

from .parser import ParseResult, parse_task_file, parse_tasks
from .unified_config import CONFIG_FILENAME, UnifiedConfig, load_unified_config


def discover_config(
    config_path: Path | None = None,
    task_file: Path | None = None,
) -> UnifiedConfig | None:
    """Find and load the configuration file, if any.

    Search order:
    1. Explicit config_path argument (must exist)
    2. Task file directory / dayplan_config.yaml
    3. Current directory / dayplan_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    if task_file is not None:
        dir_config = task_file.parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_unified_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return None


def load_tasks(text: str | None = None, task_file: Path | None = None) -> ParseResult:
    """Parse tasks from a file, from text, or from stdin.

    ``task_file`` wins over ``text``; a missing text or ``"-"`` reads stdin.
    """
    if task_file is not None:
        return parse_task_file(task_file)
    if text is None or text == "-":
        text = sys.stdin.read()
    return parse_tasks(text)
