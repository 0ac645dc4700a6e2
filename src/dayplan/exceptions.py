"""Custom exceptions for dayplan."""


class DayplanError(Exception):
    """Base exception for all dayplan errors."""

    pass


class ParseError(DayplanError):
    """Raised when a task line, clock time or duration cannot be parsed."""

    pass


class ValidationError(DayplanError):
    """Raised when a task list violates its structural invariants."""

    pass


class ConfigError(DayplanError):
    """Raised when a configuration file is missing or invalid."""

    pass
