"""Configuration-driven logger construction.

A configuration names a list of drivers by their registry type and gives
each an options mapping. Files may be YAML or JSON; both are read with
``yaml.safe_load``.

Example file:

    default_level: info
    drivers:
      - type: console
        min_level: info
      - type: text_file
        min_level: debug
        options:
          file_path: logs/app.log
"""

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fanlog.core.errors import DriverConfigError
from fanlog.core.logger import Logger
from fanlog.core.ports import DriverPort
from fanlog.core.registry import DriverRegistry, default_registry

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "FANLOG_CONFIG_PATH"

DEFAULT_CONFIG_LOCATIONS = (
    "config/logging.json",
    "/etc/fanlog/config.json",
)


@dataclass
class DriverConfig:
    """Configuration for one driver.

    Attributes:
        type: Registry name of the driver, e.g. "console".
        min_level: Threshold passed as the ``min_level`` option when
            ``options`` does not set one.
        options: Driver-specific options.
    """

    type: str
    min_level: str = ""
    options: dict[str, Any] = field(default_factory=dict)

    def build_options(self) -> dict[str, Any]:
        """Return the options to hand to the driver constructor."""
        options = dict(self.options)
        if self.min_level and "min_level" not in options:
            options["min_level"] = self.min_level
        return options


@dataclass
class LoggingConfig:
    """Top-level logging configuration."""

    default_level: str = "info"
    drivers: list[DriverConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggingConfig":
        """Build a configuration from parsed YAML/JSON data.

        Raises:
            DriverConfigError: If the data has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise DriverConfigError("configuration must be a mapping")
        drivers = []
        for item in data.get("drivers") or []:
            if not isinstance(item, Mapping) or not item.get("type"):
                raise DriverConfigError(f"driver entry needs a 'type': {item!r}")
            options = item.get("options") or {}
            if not isinstance(options, Mapping):
                raise DriverConfigError(f"driver options must be a mapping: {options!r}")
            drivers.append(
                DriverConfig(
                    type=str(item["type"]),
                    min_level=str(item.get("min_level") or ""),
                    options=dict(options),
                )
            )
        return cls(
            default_level=str(data.get("default_level") or "info"),
            drivers=drivers,
        )

    @classmethod
    def default(cls) -> "LoggingConfig":
        """Configuration used when no file is found: console at debug."""
        return cls(
            default_level="info",
            drivers=[DriverConfig(type="console", min_level="debug")],
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def create_logger(self, registry: DriverRegistry | None = None) -> Logger:
        """Build every configured driver and return a Logger over them.

        Drivers keep the configured order. If one fails, those already built
        are closed before the error is raised.

        Raises:
            DriverConfigError: If a driver cannot be created.
        """
        registry = registry or default_registry
        built: list[DriverPort] = []
        for driver_config in self.drivers:
            try:
                built.append(
                    registry.create(driver_config.type, driver_config.build_options())
                )
            except Exception as exc:
                for driver in built:
                    try:
                        driver.close()
                    except Exception:
                        logger.warning(
                            "Failed to close driver %r after configuration error",
                            driver,
                            exc_info=True,
                        )
                raise DriverConfigError(
                    f"failed to create driver '{driver_config.type}': {exc}"
                ) from exc
        logger.debug("Created logger with drivers %s", [d.type for d in self.drivers])
        return Logger(*built)

    def save(self, path: str | Path) -> None:
        """Write the configuration as indented JSON, creating parent dirs."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")


def load_config(path: str | Path) -> LoggingConfig:
    """Read a YAML or JSON configuration file.

    Raises:
        DriverConfigError: If the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DriverConfigError(f"failed to read config file: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DriverConfigError(f"failed to parse config file: {exc}") from exc
    logger.info("Loaded logging configuration from %s", path)
    return LoggingConfig.from_dict(data or {})


def load_default() -> LoggingConfig:
    """Find and load the configuration from the standard locations.

    The path in ``FANLOG_CONFIG_PATH`` wins. Otherwise the first existing
    file in DEFAULT_CONFIG_LOCATIONS is used, and failing that the built-in
    console configuration.
    """
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return load_config(env_path)
    for location in DEFAULT_CONFIG_LOCATIONS:
        if Path(location).is_file():
            return load_config(location)
    logger.debug("No logging configuration found, using console default")
    return LoggingConfig.default()


def load_logger(path: str | Path, registry: DriverRegistry | None = None) -> Logger:
    """Load a configuration file and build its Logger."""
    return load_config(path).create_logger(registry)
