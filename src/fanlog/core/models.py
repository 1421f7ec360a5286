"""Core domain models for log records."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from fanlog.core.levels import Level

Attributes = Mapping[str, str]


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        timestamp: Unix timestamp in seconds, captured when the entry is built.
        level: Severity of the entry.
        message: The log message.
        attributes: Additional structured fields. Empty means none.
        transaction_id: Identifier grouping related entries. Empty means none.
    """

    timestamp: float
    level: Level
    message: str
    attributes: dict[str, str] = field(default_factory=dict)
    transaction_id: str = ""
