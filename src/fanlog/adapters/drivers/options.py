"""Shared option parsing for driver constructors.

Driver options arrive as an untyped mapping, usually straight from a
configuration file. Cosmetic options with the wrong type are ignored and
the driver keeps its default. Only required options raise.
"""

from collections.abc import Mapping
from typing import Any

from fanlog.core.errors import DriverConfigError, InvalidLevelError
from fanlog.core.levels import Level, parse_level


def _parse_min_level(options: Mapping[str, Any], default: Level) -> Level:
    """Parse the 'min_level' option.

    Returns:
        The parsed level, or default if the option is missing, not a string,
        or not a known level name.
    """
    value = options.get("min_level")
    if not isinstance(value, str):
        return default
    try:
        return parse_level(value)
    except InvalidLevelError:
        return default


def _parse_str_option(options: Mapping[str, Any], key: str, default: str | None) -> str | None:
    """Return options[key] if it is a string, else default."""
    value = options.get(key)
    return value if isinstance(value, str) else default


def _parse_bool_option(options: Mapping[str, Any], key: str, default: bool) -> bool:
    """Return options[key] if it is a bool, else default."""
    value = options.get(key)
    return value if isinstance(value, bool) else default


def _require_file_path(options: Mapping[str, Any]) -> str:
    """Return the required 'file_path' option.

    Raises:
        DriverConfigError: If the option is missing, empty, or not a string.
    """
    file_path = options.get("file_path")
    if not isinstance(file_path, str) or not file_path:
        raise DriverConfigError("file_path is required")
    return file_path
