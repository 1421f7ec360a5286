"""Exception types raised by fanlog."""


class FanlogError(Exception):
    """Base class for all fanlog errors."""


class InvalidLevelError(FanlogError, ValueError):
    """Raised by parse_level for text that names no known level."""


class DriverNotFoundError(FanlogError, LookupError):
    """Raised when no driver constructor is registered under a name."""


class DriverConfigError(FanlogError, ValueError):
    """Raised when a driver cannot be built from its options."""


class DriverClosedError(FanlogError):
    """Raised when an entry is sent to a driver that was already closed."""


class DispatchError(FanlogError):
    """One or more drivers failed during a fan-out.

    Every driver still received the call. ``errors`` keeps each failure in
    dispatch order and ``last`` is the final one, which is also chained as
    ``__cause__``.
    """

    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = list(errors)
        self.last = self.errors[-1]
        if len(self.errors) == 1:
            message = f"driver failed: {self.last}"
        else:
            message = f"{len(self.errors)} drivers failed, last: {self.last}"
        super().__init__(message)
