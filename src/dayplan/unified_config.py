"""Configuration file loader.

A single YAML file (``dayplan_config.yaml``) carries the scheduler settings::

    scheduler:
      global_start_time: "8:30a"
      rest_time: 5m
      max_frontier_size: 200000
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "dayplan_config.yaml"


class UnifiedConfig(BaseModel):
    """Top-level configuration file contents."""

    model_config = ConfigDict(extra="forbid")

    scheduler: SchedulingConfig = SchedulingConfig()


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated configuration; an empty file yields the defaults

    Raises:
        ConfigError: If the file is missing, is not valid YAML or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML in {config_path}: {e}") from e

    if data is None:
        return UnifiedConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: YAML must contain a mapping at the root level")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
