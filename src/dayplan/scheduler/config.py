"""Configuration for the scheduling search."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from dayplan.clock import parse_clock, parse_duration
from dayplan.exceptions import ParseError

DEFAULT_REST_TIME = 300
DEFAULT_MAX_FRONTIER_SIZE = 500_000


class SchedulingConfig(BaseModel):
    """Parameters of one search run.

    In YAML the start time may be written as a clock (``"8:30a"``) and the
    rest time as a duration (``"5m"``); plain integers are seconds.
    """

    # Seconds since midnight; None means "now", resolved by SchedulingService
    global_start_time: int | None = Field(default=None, ge=0)
    # Gap inserted before every task start
    rest_time: int = Field(default=DEFAULT_REST_TIME, ge=0)
    # Frontier entries kept alive before the worst ones are evicted
    max_frontier_size: int = Field(default=DEFAULT_MAX_FRONTIER_SIZE, ge=1)

    @field_validator("global_start_time", mode="before")
    @classmethod
    def parse_start_time(cls, v: Any) -> Any:
        """Accept clock strings for the start time."""
        if isinstance(v, str):
            try:
                return parse_clock(v)
            except ParseError as e:
                raise ValueError(str(e)) from e
        return v

    @field_validator("rest_time", mode="before")
    @classmethod
    def parse_rest_time(cls, v: Any) -> Any:
        """Accept duration strings for the rest time."""
        if isinstance(v, str):
            try:
                return parse_duration(v)
            except ParseError as e:
                raise ValueError(str(e)) from e
        return v
