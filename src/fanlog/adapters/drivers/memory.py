"""In-memory driver that keeps entries for later inspection.

Useful in tests and for processes that want to show recent log entries
without writing them anywhere. With ``max_size`` the driver behaves as a
ring buffer and evicts the oldest entry when full.
"""

import threading
from collections import deque
from collections.abc import Mapping
from typing import Any

from fanlog.adapters.drivers.options import _parse_min_level
from fanlog.core.errors import DriverClosedError, DriverConfigError
from fanlog.core.levels import Level
from fanlog.core.models import LogEntry
from fanlog.core.registry import register

MEMORY_DRIVER_NAME = "memory"


class MemoryDriver:
    """Driver that stores entries in memory.

    Args:
        min_level: Lowest level that is stored.
        max_size: Maximum number of entries to keep. None keeps everything.
    """

    def __init__(self, min_level: Level = Level.DEBUG, max_size: int | None = None) -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.min_level = min_level
        self._buffer: deque[LogEntry] = deque(maxlen=max_size)
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "MemoryDriver":
        """Build a memory driver from a configuration mapping.

        Recognized keys: ``min_level``, ``max_size``.

        Raises:
            DriverConfigError: If max_size is given but is not a positive int.
        """
        max_size = options.get("max_size")
        if max_size is not None and (
            isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0
        ):
            raise DriverConfigError(f"max_size must be a positive integer, got {max_size!r}")
        return cls(min_level=_parse_min_level(options, Level.DEBUG), max_size=max_size)

    def log(self, entry: LogEntry) -> None:
        """Store the entry.

        Raises:
            DriverClosedError: If the driver was closed.
        """
        if entry.level < self.min_level:
            return
        with self._lock:
            if self._closed:
                raise DriverClosedError("driver is closed")
            self._buffer.append(entry)

    def close(self) -> None:
        """Stop accepting entries. Stored entries stay readable."""
        with self._lock:
            self._closed = True

    def entries(self) -> list[LogEntry]:
        """Return stored entries, oldest first."""
        with self._lock:
            return list(self._buffer)

    def clear(self) -> None:
        """Drop all stored entries."""
        with self._lock:
            self._buffer.clear()


register(MEMORY_DRIVER_NAME, MemoryDriver.from_options)
