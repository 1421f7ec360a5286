"""Shared test fixtures for all test modules."""

from pathlib import Path

import pytest
from tests.doubles import FailingDriver, RecordingDriver

from fanlog.core.registry import DriverRegistry


@pytest.fixture
def calls() -> list[str]:
    """Shared call log for ordering checks."""
    return []


@pytest.fixture
def recording_driver(calls: list[str]) -> RecordingDriver:
    return RecordingDriver("recording", calls)


@pytest.fixture
def failing_driver(calls: list[str]) -> FailingDriver:
    return FailingDriver("failing", calls)


@pytest.fixture
def registry() -> DriverRegistry:
    """Fresh registry isolated from the process-wide one."""
    return DriverRegistry()


@pytest.fixture
def json_log_path(tmp_path: Path) -> Path:
    """Provide a temporary path for JSON file driver tests."""
    return tmp_path / "logs" / "app.json"


@pytest.fixture
def text_log_path(tmp_path: Path) -> Path:
    """Provide a temporary path for text file driver tests."""
    return tmp_path / "logs" / "app.log"
