"""Time-of-day and duration helpers.

All times are integer seconds since local midnight and all durations are
integer seconds.
"""

from __future__ import annotations

import re
from datetime import datetime

from .exceptions import ParseError

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
HOURS_PER_HALF_DAY = 12
HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60

_DURATION_UNITS = {"": 1, "s": 1, "m": SECONDS_PER_MINUTE, "h": SECONDS_PER_HOUR}

_DURATION_RE = re.compile(r"^(\d+)([smh]?)$")
_CLOCK_RE = re.compile(r"^(\d+)(?::(\d+))?([ap]?)$")


def duration_seconds(amount: str, unit: str = "") -> int:
    """Convert a digit string and unit suffix (``s``, ``m``, ``h`` or empty) to seconds."""
    if unit not in _DURATION_UNITS:
        raise ParseError(f"Unknown duration unit: {unit!r}")
    return int(amount) * _DURATION_UNITS[unit]


def clock_seconds(hours: str, minutes: str | None = None, meridiem: str = "") -> int:
    """Convert clock components to seconds since midnight.

    Args:
        hours: Hour digits
        minutes: Minute digits, or None for ``HH`` on its own
        meridiem: ``a``, ``p`` or empty for a 24-hour clock

    Raises:
        ParseError: If the hour or minute is out of range
    """
    hour = int(hours)
    minute = int(minutes) if minutes else 0

    if minute >= MINUTES_PER_HOUR:
        raise ParseError(f"Minute out of range: {hours}:{minutes}")

    if meridiem:
        if not 1 <= hour <= HOURS_PER_HALF_DAY:
            raise ParseError(f"Hour out of range for 12-hour clock: {hours}{meridiem}")
        hour %= HOURS_PER_HALF_DAY
        if meridiem == "p":
            hour += HOURS_PER_HALF_DAY
    elif hour >= HOURS_PER_DAY:
        raise ParseError(f"Hour out of range: {hours}")

    return hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE


def parse_duration(text: str) -> int:
    """Parse a duration such as ``"90"``, ``"45m"`` or ``"2h"`` into seconds."""
    match = _DURATION_RE.match(text.strip().lower())
    if not match:
        raise ParseError(f"Invalid duration: {text!r}")
    amount, unit = match.groups()
    return duration_seconds(amount, unit)


def parse_clock(text: str) -> int:
    """Parse a clock time such as ``"9"``, ``"9:30a"`` or ``"21:15"`` into seconds."""
    match = _CLOCK_RE.match(text.strip().lower())
    if not match:
        raise ParseError(f"Invalid clock time: {text!r}")
    hours, minutes, meridiem = match.groups()
    return clock_seconds(hours, minutes, meridiem)


def format_clock(seconds: int) -> str:
    """Format seconds since midnight as ``HH:MM``.

    Times past midnight keep counting hours (``25:00``) rather than wrapping.
    """
    hours, remainder = divmod(seconds, SECONDS_PER_HOUR)
    minutes = remainder // SECONDS_PER_MINUTE
    return f"{hours:02d}:{minutes:02d}"


def format_duration(seconds: int) -> str:
    """Format a duration compactly, e.g. ``1h30m``, ``45m`` or ``20s``."""
    if seconds == 0:
        return "0m"
    hours, remainder = divmod(seconds, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)
    parts: list[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return "".join(parts)


def seconds_since_midnight(moment: datetime) -> int:
    """Return the time of day of ``moment`` in seconds."""
    return moment.hour * SECONDS_PER_HOUR + moment.minute * SECONDS_PER_MINUTE + moment.second
