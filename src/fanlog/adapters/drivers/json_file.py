"""JSON file driver writing one JSON object per line."""

from collections.abc import Mapping
from typing import Any

from fanlog.adapters.drivers.file_base import FileDriverBase
from fanlog.adapters.drivers.options import _parse_min_level, _require_file_path
from fanlog.core.encoding.ndjson import encode_entry
from fanlog.core.errors import DriverConfigError
from fanlog.core.levels import Level
from fanlog.core.models import LogEntry
from fanlog.core.registry import register

JSON_FILE_DRIVER_NAME = "json_file"


class JSONFileDriver(FileDriverBase):
    """Driver that appends NDJSON records to a file.

    Each line holds ``timestamp``, ``level``, ``message`` and, when present,
    ``attributes`` and ``transaction_id``.
    """

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "JSONFileDriver":
        """Build a JSON file driver from a configuration mapping.

        Recognized keys: ``file_path`` (required), ``min_level``.

        Raises:
            DriverConfigError: If file_path is missing or the file cannot be
                opened.
        """
        file_path = _require_file_path(options)
        try:
            return cls(file_path, min_level=_parse_min_level(options, Level.DEBUG))
        except OSError as exc:
            raise DriverConfigError(f"failed to open file: {exc}") from exc

    def _render(self, entry: LogEntry) -> str:
        return encode_entry(entry)


register(JSON_FILE_DRIVER_NAME, JSONFileDriver.from_options)
