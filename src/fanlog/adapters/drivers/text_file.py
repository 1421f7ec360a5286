"""Plain text file driver."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fanlog.adapters.drivers.file_base import FileDriverBase
from fanlog.adapters.drivers.options import (
    _parse_min_level,
    _parse_str_option,
    _require_file_path,
)
from fanlog.core.encoding.text import format_attributes, format_timestamp
from fanlog.core.errors import DriverConfigError
from fanlog.core.levels import Level, format_level
from fanlog.core.models import LogEntry
from fanlog.core.registry import register

TEXT_FILE_DRIVER_NAME = "text_file"


class TextFileDriver(FileDriverBase):
    """Driver that appends one readable line per entry.

    Line shape: ``<timestamp> [<LEVEL>] <message> {k=v, ...} (txn: <id>)``,
    where the attribute and transaction parts only appear when set.

    Args:
        file_path: File to append to.
        min_level: Lowest level that is written.
        time_format: strftime pattern. Default is ISO-8601 with milliseconds.
    """

    def __init__(
        self,
        file_path: str | Path,
        min_level: Level = Level.DEBUG,
        time_format: str | None = None,
    ) -> None:
        super().__init__(file_path, min_level)
        self.time_format = time_format

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "TextFileDriver":
        """Build a text file driver from a configuration mapping.

        Recognized keys: ``file_path`` (required), ``min_level``,
        ``time_format``.

        Raises:
            DriverConfigError: If file_path is missing or the file cannot be
                opened.
        """
        file_path = _require_file_path(options)
        try:
            return cls(
                file_path,
                min_level=_parse_min_level(options, Level.DEBUG),
                time_format=_parse_str_option(options, "time_format", None) or None,
            )
        except OSError as exc:
            raise DriverConfigError(f"failed to open file: {exc}") from exc

    def _render(self, entry: LogEntry) -> str:
        line = (
            f"{format_timestamp(entry.timestamp, self.time_format)} "
            f"[{format_level(entry.level)}] {entry.message}"
        )
        if entry.attributes:
            line += f" {{{format_attributes(entry.attributes)}}}"
        if entry.transaction_id:
            line += f" (txn: {entry.transaction_id})"
        return line + "\n"


register(TEXT_FILE_DRIVER_NAME, TextFileDriver.from_options)
