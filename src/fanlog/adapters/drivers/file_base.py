"""Base class for drivers that append to a file."""

import threading
from pathlib import Path
from typing import TextIO

from fanlog.core.errors import DriverClosedError
from fanlog.core.levels import Level
from fanlog.core.models import LogEntry


class FileDriverBase:
    """Appends rendered entries to a file opened at construction.

    Missing parent directories are created and the file is opened in
    append-create mode. A per-instance lock serializes ``log`` and ``close``
    since every call shares the one open handle.

    Subclasses implement ``_render`` to turn an entry into text.
    """

    def __init__(self, file_path: str | Path, min_level: Level = Level.DEBUG) -> None:
        self.file_path = Path(file_path)
        self.min_level = min_level
        self._lock = threading.Lock()
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = open(self.file_path, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        """True once the file handle has been released."""
        return self._file is None

    def _render(self, entry: LogEntry) -> str:
        """Render an entry, trailing newline included.

        Must be overridden by subclasses.
        """
        raise NotImplementedError

    def log(self, entry: LogEntry) -> None:
        """Append the entry to the file.

        Raises:
            DriverClosedError: If the driver was closed.
            OSError: If the write fails.
        """
        if entry.level < self.min_level:
            return
        with self._lock:
            if self._file is None:
                raise DriverClosedError("driver is closed")
            self._file.write(self._render(entry))
            self._file.flush()

    def close(self) -> None:
        """Close the file. Closing again is a no-op."""
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.close()
            finally:
                self._file = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_path={str(self.file_path)!r})"
