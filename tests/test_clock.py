"""Tests for clock and duration helpers."""

from datetime import datetime

import pytest

from dayplan.clock import (
    format_clock,
    format_duration,
    parse_clock,
    parse_duration,
    seconds_since_midnight,
)
from dayplan.exceptions import ParseError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("9", 9 * 3600),
        ("9:30", 9 * 3600 + 1800),
        ("21:15", 21 * 3600 + 900),
        ("9a", 9 * 3600),
        ("9:30p", 21 * 3600 + 1800),
        ("12a", 0),
        ("12p", 12 * 3600),
        ("12:45a", 45 * 60),
        ("0", 0),
    ],
)
def test_parse_clock(text: str, expected: int):
    assert parse_clock(text) == expected


@pytest.mark.parametrize("text", ["24", "9:60", "0a", "13p", "nine", "9:3x", ""])
def test_parse_clock_rejects_bad_input(text: str):
    with pytest.raises(ParseError):
        parse_clock(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("90", 90), ("45s", 45), ("45m", 2700), ("2h", 7200), ("5M", 300)],
)
def test_parse_duration(text: str, expected: int):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "5d", "1h30m", "-5m", "m"])
def test_parse_duration_rejects_bad_input(text: str):
    with pytest.raises(ParseError):
        parse_duration(text)


def test_format_clock():
    assert format_clock(0) == "00:00"
    assert format_clock(9 * 3600 + 5 * 60 + 59) == "09:05"
    assert format_clock(25 * 3600) == "25:00"


def test_format_duration():
    assert format_duration(0) == "0m"
    assert format_duration(5400) == "1h30m"
    assert format_duration(2700) == "45m"
    assert format_duration(3620) == "1h20s"


def test_seconds_since_midnight():
    assert seconds_since_midnight(datetime(2025, 3, 1, 8, 30, 15)) == 8 * 3600 + 30 * 60 + 15
