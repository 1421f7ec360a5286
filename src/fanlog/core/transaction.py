"""Transaction: a logger view that tags entries with an identifier."""

from typing import TYPE_CHECKING

from fanlog.core.levels import Level
from fanlog.core.logger import build_entry, dispatch
from fanlog.core.models import Attributes

if TYPE_CHECKING:
    from fanlog.core.logger import Logger


class Transaction:
    """Logs through a Logger, stamping every entry with a transaction id.

    A transaction owns nothing. Its drivers belong to the logger it was
    created from, so it has no close method. Any number of transactions may
    share one logger; their entries differ only in transaction_id.
    """

    def __init__(self, logger: "Logger", transaction_id: str) -> None:
        self._logger = logger
        self._id = transaction_id

    @property
    def id(self) -> str:
        return self._id

    def log(
        self, level: Level, message: str, attributes: Attributes | None = None
    ) -> None:
        """Log a message at the given level under this transaction.

        Raises:
            DispatchError: If any driver failed.
        """
        entry = build_entry(level, message, attributes, self._id)
        dispatch(self._logger.drivers, entry)

    def debug(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.DEBUG, message, attributes)

    def info(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.INFO, message, attributes)

    def warning(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.WARNING, message, attributes)

    def error(self, message: str, attributes: Attributes | None = None) -> None:
        self.log(Level.ERROR, message, attributes)

    def __repr__(self) -> str:
        return f"Transaction(id={self._id!r})"
