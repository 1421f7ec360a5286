"""Python logging handler adapter for fanlog.

This adapter bridges Python's standard library logging module to a fanlog
Logger, so records from third-party libraries reach the same drivers as
direct fanlog calls.
"""

import logging
import traceback

from fanlog.core.levels import Level
from fanlog.core.logger import Logger

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]

# fanlog's own diagnostics are never fed back into fanlog
_INTERNAL_LOGGER_PREFIX = "fanlog"


def _to_level(levelno: int) -> Level:
    """Map a stdlib level number to the nearest fanlog level at or below it."""
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


class FanlogHandler(logging.Handler):
    """Logging handler that forwards log records to a fanlog Logger.

    Attribute values are converted to strings. CRITICAL records are logged
    at ERROR. Driver failures are reported through ``handleError``.

    Example:
        ```python
        from fanlog import ConsoleDriver, FanlogHandler, Logger

        handler = FanlogHandler(Logger(ConsoleDriver()))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        target: Logger,
        include_attrs: list[str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a fanlog Logger.

        Args:
            target: Logger whose drivers receive the records.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno"]. "logger" selects the
                logger name.
            level: Handler threshold, as for any logging.Handler.
        """
        super().__init__(level)
        self._target = target
        self._include_attrs = include_attrs or _DEFAULT_INCLUDE_ATTRS

    def emit(self, record: logging.LogRecord) -> None:
        """Forward a log record to the fanlog Logger.

        Args:
            record: The log record to emit.
        """
        if record.name.split(".")[0] == _INTERNAL_LOGGER_PREFIX:
            return
        try:
            self._target.log(
                _to_level(record.levelno), record.getMessage(), self._attributes(record)
            )
        except Exception:
            self.handleError(record)

    def _attributes(self, record: logging.LogRecord) -> dict[str, str]:
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, object] = {
            "logger": record.name,
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        attributes = {
            key: str(attr_mapping[key])
            for key in self._include_attrs
            if key in attr_mapping
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = str(value)

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exc_type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exc_message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )
        return attributes
