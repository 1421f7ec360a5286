"""Logger: fans each log call out to every attached driver."""

import logging
import time
from collections.abc import Iterable
from types import TracebackType
from typing import TYPE_CHECKING

from fanlog.core.errors import DispatchError
from fanlog.core.levels import Level
from fanlog.core.models import Attributes, LogEntry
from fanlog.core.ports import DriverPort

if TYPE_CHECKING:
    from fanlog.core.transaction import Transaction

logger = logging.getLogger(__name__)


def build_entry(
    level: Level,
    message: str,
    attributes: Attributes | None = None,
    transaction_id: str = "",
) -> LogEntry:
    """Create a log entry stamped with the current time."""
    return LogEntry(
        timestamp=time.time(),
        level=level,
        message=message,
        attributes=dict(attributes) if attributes else {},
        transaction_id=transaction_id,
    )


def dispatch(drivers: Iterable[DriverPort], entry: LogEntry) -> None:
    """Send entry to each driver in order.

    A failing driver does not stop the others.

    Raises:
        DispatchError: After the fan-out, if any driver raised.
    """
    errors: list[BaseException] = []
    for driver in drivers:
        try:
            driver.log(entry)
        except Exception as exc:
            errors.append(exc)
    if errors:
        raise DispatchError(errors) from errors[-1]


class Logger:
    """Dispatches log calls to a fixed, ordered set of drivers.

    The logger applies no level filtering of its own; each driver decides
    what it keeps. The logger is not synchronized. Callers sharing one
    logger across threads must serialize calls themselves if they need a
    consistent order.

    Example:
        ```python
        from fanlog import ConsoleDriver, Logger

        with Logger(ConsoleDriver()) as log:
            log.info("server started", {"port": "8080"})
        ```
    """

    def __init__(self, *drivers: DriverPort) -> None:
        self._drivers = tuple(drivers)

    @property
    def drivers(self) -> tuple[DriverPort, ...]:
        """Drivers in dispatch order."""
        return self._drivers

    def log(
        self, level: Level, message: str, attributes: Attributes | None = None
    ) -> None:
        """Log a message at the given level.

        Raises:
            DispatchError: If any driver failed.
        """
        dispatch(self._drivers, build_entry(level, message, attributes))

    def debug(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.DEBUG, message, attributes)

    def info(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.INFO, message, attributes)

    def warning(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.WARNING, message, attributes)

    def error(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.ERROR, message, attributes)

    def transaction(self, transaction_id: str) -> "Transaction":
        """Return a view whose entries all carry transaction_id."""
        from fanlog.core.transaction import Transaction

        return Transaction(self, transaction_id)

    def close(self) -> None:
        """Close every driver in order, continuing past failures.

        Call this once. Closing twice is left to each driver.

        Raises:
            DispatchError: If any driver failed to close.
        """
        errors: list[BaseException] = []
        for driver in self._drivers:
            try:
                driver.close()
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise DispatchError(errors) from errors[-1]

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_value is None:
            self.close()
            return
        # The body's exception propagates; close failures are only logged
        try:
            self.close()
        except DispatchError:
            logger.warning(
                "Failed to close drivers while handling %r", exc_value, exc_info=True
            )
