"""Console driver writing to stdout and stderr."""

import sys
from collections.abc import Mapping
from typing import Any, TextIO

from fanlog.adapters.drivers.options import (
    _parse_bool_option,
    _parse_min_level,
    _parse_str_option,
)
from fanlog.core.encoding.text import format_attributes, format_timestamp
from fanlog.core.levels import Level, format_level
from fanlog.core.models import LogEntry
from fanlog.core.registry import register

CONSOLE_DRIVER_NAME = "console"

_RESET = "\033[0m"
_LEVEL_COLORS = {
    Level.DEBUG: "\033[34m",
    Level.INFO: "\033[32m",
    Level.WARNING: "\033[33m",
    Level.ERROR: "\033[31m",
}


class ConsoleDriver:
    """Driver that prints entries to the console.

    Entries at ERROR or above go to stderr, everything else to stdout.
    When no stream is injected the current ``sys.stdout``/``sys.stderr`` is
    looked up on every write. No locking is done here; the process streams
    handle their own thread-safety.

    Args:
        min_level: Lowest level that is printed.
        time_format: strftime pattern for the timestamp. Default is RFC 3339
            to the second with a +HH:MM offset.
        colorized: Wrap the level name in ANSI color codes.
        stdout: Stream for entries below ERROR.
        stderr: Stream for ERROR entries.
    """

    def __init__(
        self,
        min_level: Level = Level.DEBUG,
        time_format: str | None = None,
        colorized: bool = True,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.min_level = min_level
        self.time_format = time_format
        self.colorized = colorized
        self._stdout = stdout
        self._stderr = stderr

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ConsoleDriver":
        """Build a console driver from a configuration mapping.

        Recognized keys: ``min_level``, ``time_format``, ``colorized``.
        Values of the wrong type are ignored.
        """
        return cls(
            min_level=_parse_min_level(options, Level.DEBUG),
            time_format=_parse_str_option(options, "time_format", None) or None,
            colorized=_parse_bool_option(options, "colorized", True),
        )

    def log(self, entry: LogEntry) -> None:
        """Print the entry to the stream for its level."""
        if entry.level < self.min_level:
            return
        if entry.level >= Level.ERROR:
            out = self._stderr or sys.stderr
        else:
            out = self._stdout or sys.stdout
        out.write(self.format(entry) + "\n")

    def close(self) -> None:
        """Nothing to release; the streams are not owned by the driver."""

    def format(self, entry: LogEntry) -> str:
        """Render an entry as a single console line (no newline)."""
        level = format_level(entry.level)
        if self.colorized and entry.level in _LEVEL_COLORS:
            level = f"{_LEVEL_COLORS[Level(entry.level)]}{level}{_RESET}"
        timestamp = format_timestamp(
            entry.timestamp, self.time_format, timespec="seconds"
        )
        parts = [f"{timestamp} [{level}]"]
        if entry.transaction_id:
            parts.append(f" (tx: {entry.transaction_id})")
        if entry.attributes:
            parts.append(f" [{format_attributes(entry.attributes)}]")
        parts.append(f" {entry.message}")
        return "".join(parts)


register(CONSOLE_DRIVER_NAME, ConsoleDriver.from_options)
