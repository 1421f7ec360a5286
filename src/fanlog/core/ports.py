"""Port interface for log drivers.

Drivers are the output side of fanlog. The dispatch engine depends only on
this protocol, never on a concrete driver.
"""

from typing import Protocol, runtime_checkable

from fanlog.core.models import LogEntry


@runtime_checkable
class DriverPort(Protocol):
    """Port for a log output backend.

    Examples: ConsoleDriver, JSONFileDriver, TextFileDriver, MemoryDriver.
    """

    def log(self, entry: LogEntry) -> None:
        """Process one log entry.

        Entries below the driver's own threshold are ignored. Failures are
        raised as exceptions.
        """
        ...

    def close(self) -> None:
        """Release any resources held by the driver."""
        ...
