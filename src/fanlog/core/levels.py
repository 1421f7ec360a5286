"""Severity levels for log entries."""

from enum import IntEnum

from fanlog.core.errors import InvalidLevelError


class Level(IntEnum):
    """Ordered log severity. Higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name


_ALIASES = {
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARNING": Level.WARNING,
    "WARN": Level.WARNING,
    "ERROR": Level.ERROR,
    "ERR": Level.ERROR,
}


def format_level(value: int) -> str:
    """Return the canonical name of a level.

    Integers outside the known range render as ``UNKNOWN(<n>)``. That form
    is diagnostic only and does not parse back.
    """
    try:
        return Level(value).name
    except ValueError:
        return f"UNKNOWN({int(value)})"


def parse_level(text: str) -> Level:
    """Parse a level name, case-insensitively.

    Accepts the canonical names plus the short aliases ``WARN`` and ``ERR``.

    Raises:
        InvalidLevelError: If the text names no known level.
    """
    level = _ALIASES.get(text.upper()) if isinstance(text, str) else None
    if level is None:
        raise InvalidLevelError(f"unknown log level: {text}")
    return level
