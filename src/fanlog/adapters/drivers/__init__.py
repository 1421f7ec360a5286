"""Built-in drivers.

Importing this package registers every built-in driver with the
process-wide registry.
"""

from fanlog.adapters.drivers.console import CONSOLE_DRIVER_NAME, ConsoleDriver
from fanlog.adapters.drivers.json_file import JSON_FILE_DRIVER_NAME, JSONFileDriver
from fanlog.adapters.drivers.memory import MEMORY_DRIVER_NAME, MemoryDriver
from fanlog.adapters.drivers.text_file import TEXT_FILE_DRIVER_NAME, TextFileDriver

__all__ = [
    "CONSOLE_DRIVER_NAME",
    "JSON_FILE_DRIVER_NAME",
    "MEMORY_DRIVER_NAME",
    "TEXT_FILE_DRIVER_NAME",
    "ConsoleDriver",
    "JSONFileDriver",
    "MemoryDriver",
    "TextFileDriver",
]
