"""Unit tests for DriverRegistry."""

from collections.abc import Mapping
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from tests.doubles import RecordingDriver

import fanlog
from fanlog.core.errors import DriverConfigError, DriverNotFoundError
from fanlog.core.registry import DriverRegistry, default_registry


def _recording(options: Mapping[str, Any]) -> RecordingDriver:
    return RecordingDriver(str(options.get("name", "recording")))


class TestDriverRegistryRegister:
    """Tests for DriverRegistry.register()."""

    @pytest.mark.tra("Core.Registry.Register")
    @pytest.mark.tier(0)
    def test_register_callable_constructor(self, registry: DriverRegistry) -> None:
        registry.register("recording", _recording)
        assert registry.lookup("recording") is _recording

    @pytest.mark.tra("Core.Registry.Register.NonCallable")
    @pytest.mark.tier(0)
    def test_register_non_callable_raises_typeerror(self, registry: DriverRegistry) -> None:
        with pytest.raises(TypeError, match="constructor must be callable"):
            registry.register("recording", "not a callable")  # type: ignore[arg-type]

    @pytest.mark.tra("Core.Registry.Register.Overwrite")
    @pytest.mark.tier(0)
    def test_last_registration_wins(self, registry: DriverRegistry) -> None:
        """Registering a name twice replaces the first constructor."""

        def other(options: Mapping[str, Any]) -> RecordingDriver:
            return RecordingDriver("other")

        registry.register("recording", _recording)
        registry.register("recording", other)

        assert registry.lookup("recording") is other
        assert registry.names() == ["recording"]


class TestDriverRegistryCreate:
    """Tests for DriverRegistry.create()."""

    @pytest.mark.tra("Core.Registry.Create")
    @pytest.mark.tier(0)
    def test_create_passes_options_to_constructor(self, registry: DriverRegistry) -> None:
        registry.register("recording", _recording)
        driver = registry.create("recording", {"name": "from-config"})
        assert isinstance(driver, RecordingDriver)
        assert driver.name == "from-config"

    @pytest.mark.tra("Core.Registry.Create.NoOptions")
    @pytest.mark.tier(0)
    def test_create_without_options_passes_empty_mapping(
        self, registry: DriverRegistry
    ) -> None:
        seen: list[Mapping[str, Any]] = []

        def constructor(options: Mapping[str, Any]) -> RecordingDriver:
            seen.append(options)
            return RecordingDriver()

        registry.register("recording", constructor)
        registry.create("recording")
        assert seen == [{}]

    @pytest.mark.tra("Core.Registry.Create.NotFound")
    @pytest.mark.tier(0)
    def test_unknown_name_raises_driver_not_found(self, registry: DriverRegistry) -> None:
        with pytest.raises(DriverNotFoundError, match="driver not found: syslog"):
            registry.create("syslog", {})

    @pytest.mark.tra("Core.Registry.Create.ConstructorError")
    @pytest.mark.tier(0)
    def test_constructor_errors_propagate_unchanged(
        self, registry: DriverRegistry
    ) -> None:
        """A construction failure is not turned into a lookup failure."""
        error = DriverConfigError("file_path is required")

        def broken(options: Mapping[str, Any]) -> RecordingDriver:
            raise error

        registry.register("broken", broken)
        with pytest.raises(DriverConfigError) as exc_info:
            registry.create("broken", {})
        assert exc_info.value is error
        assert not isinstance(exc_info.value, DriverNotFoundError)

    @pytest.mark.tra("Core.Registry.Lookup.NotFound")
    @pytest.mark.tier(0)
    def test_lookup_returns_none_for_unregistered(self, registry: DriverRegistry) -> None:
        assert registry.lookup("unknown") is None


class TestDefaultRegistry:
    """Tests for the process-wide registry."""

    @pytest.mark.tra("Core.Registry.BuiltinDrivers")
    @pytest.mark.tier(0)
    def test_builtin_drivers_are_registered_on_import(self) -> None:
        assert {"console", "json_file", "text_file", "memory"} <= set(
            default_registry.names()
        )

    @pytest.mark.tra("Core.Registry.ModuleHelpers")
    @pytest.mark.tier(0)
    def test_module_level_create_uses_default_registry(self) -> None:
        driver = fanlog.create("memory", {"min_level": "error"})
        assert isinstance(driver, fanlog.MemoryDriver)
        assert driver.min_level is fanlog.Level.ERROR


class TestDriverRegistryPropertyBased:
    """Property-based tests for DriverRegistry."""

    @pytest.mark.tra("Core.Registry.Property.Roundtrip")
    @pytest.mark.tier(0)
    @given(name=st.text(min_size=1, max_size=100))
    def test_register_lookup_roundtrip(self, name: str) -> None:
        """Any name can be registered and looked up by exact match."""
        registry = DriverRegistry()
        registry.register(name, _recording)

        assert registry.lookup(name) is _recording
        assert registry.lookup(name + "x") is None
