"""fanlog: structured logging fanned out to pluggable drivers."""

from fanlog.adapters.drivers import (
    ConsoleDriver,
    JSONFileDriver,
    MemoryDriver,
    TextFileDriver,
)
from fanlog.adapters.logging import FanlogHandler
from fanlog.core.errors import (
    DispatchError,
    DriverClosedError,
    DriverConfigError,
    DriverNotFoundError,
    FanlogError,
    InvalidLevelError,
)
from fanlog.core.levels import Level, format_level, parse_level
from fanlog.core.logger import Logger
from fanlog.core.models import Attributes, LogEntry
from fanlog.core.ports import DriverPort
from fanlog.core.registry import DriverRegistry, create, register
from fanlog.core.transaction import Transaction

__all__ = [
    "Attributes",
    "ConsoleDriver",
    "DispatchError",
    "DriverClosedError",
    "DriverConfigError",
    "DriverNotFoundError",
    "DriverPort",
    "DriverRegistry",
    "FanlogError",
    "FanlogHandler",
    "InvalidLevelError",
    "JSONFileDriver",
    "Level",
    "LogEntry",
    "Logger",
    "MemoryDriver",
    "TextFileDriver",
    "Transaction",
    "create",
    "format_level",
    "parse_level",
    "register",
]
