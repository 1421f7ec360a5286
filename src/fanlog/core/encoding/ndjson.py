"""NDJSON encoder for log entries."""

import json
from typing import Any

from fanlog.core.encoding.text import format_timestamp
from fanlog.core.levels import format_level
from fanlog.core.models import LogEntry


def to_record(entry: LogEntry) -> dict[str, Any]:
    """Build the JSON record for an entry.

    ``attributes`` and ``transaction_id`` are left out when empty.
    """
    record: dict[str, Any] = {
        "timestamp": format_timestamp(entry.timestamp),
        "level": format_level(entry.level),
        "message": entry.message,
    }
    if entry.attributes:
        record["attributes"] = dict(entry.attributes)
    if entry.transaction_id:
        record["transaction_id"] = entry.transaction_id
    return record


def encode_entry(entry: LogEntry) -> str:
    """Encode one entry as a single JSON line, newline included."""
    return json.dumps(to_record(entry), ensure_ascii=False) + "\n"
