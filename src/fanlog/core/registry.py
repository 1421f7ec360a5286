"""Name-keyed registry of driver constructors.

Driver modules register a constructor under a stable name when they are
imported. Configuration code then builds drivers by name without knowing
their concrete types.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from fanlog.core.errors import DriverNotFoundError
from fanlog.core.ports import DriverPort

logger = logging.getLogger(__name__)

DriverConstructor = Callable[[Mapping[str, Any]], DriverPort]


class DriverRegistry:
    """Maps driver type names to constructor functions."""

    def __init__(self) -> None:
        self._constructors: dict[str, DriverConstructor] = {}

    def register(self, name: str, constructor: DriverConstructor) -> None:
        """Register a constructor under name.

        A later registration for the same name replaces the earlier one.

        Raises:
            TypeError: If constructor is not callable.
        """
        if not callable(constructor):
            raise TypeError(f"constructor must be callable, got {type(constructor)}")
        if name in self._constructors:
            logger.debug("Replacing driver constructor %r", name)
        self._constructors[name] = constructor

    def lookup(self, name: str) -> DriverConstructor | None:
        """Return the constructor registered under name, or None."""
        return self._constructors.get(name)

    def names(self) -> list[str]:
        """Return registered driver names, sorted."""
        return sorted(self._constructors)

    def create(self, name: str, options: Mapping[str, Any] | None = None) -> DriverPort:
        """Build a driver by name.

        Exceptions raised by the constructor itself propagate unchanged.

        Raises:
            DriverNotFoundError: If nothing is registered under name.
        """
        constructor = self._constructors.get(name)
        if constructor is None:
            raise DriverNotFoundError(f"driver not found: {name}")
        logger.debug("Creating driver %r", name)
        return constructor(options if options is not None else {})


default_registry = DriverRegistry()


def register(name: str, constructor: DriverConstructor) -> None:
    """Register a constructor in the process-wide registry."""
    default_registry.register(name, constructor)


def create(name: str, options: Mapping[str, Any] | None = None) -> DriverPort:
    """Build a driver from the process-wide registry."""
    return default_registry.create(name, options)
