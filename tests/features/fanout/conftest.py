"""BDD step definitions for fan-out features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when
from tests.doubles import FailingDriver, RecordingDriver

from fanlog.core.errors import DispatchError
from fanlog.core.levels import Level
from fanlog.core.logger import Logger


@dataclass
class FanoutScenarioContext:
    """State shared between the steps of one scenario."""

    names: list[str] = field(default_factory=list)
    drivers: dict[str, RecordingDriver] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    logger: Logger | None = None
    error: DispatchError | None = None

    def build_logger(self) -> Logger:
        if self.logger is None:
            self.logger = Logger(*(self.drivers[name] for name in self.names))
        return self.logger


def _split(names: str) -> list[str]:
    return [name.strip() for name in names.split(",")]


@pytest.fixture
def ctx() -> FanoutScenarioContext:
    """Fresh scenario context for each test."""
    return FanoutScenarioContext()


# === Given ===
@given(parsers.parse('a logger with drivers "{names}"'))
def step_logger_with_drivers(ctx: FanoutScenarioContext, names: str) -> None:
    ctx.names = _split(names)
    ctx.drivers = {name: RecordingDriver(name, ctx.calls) for name in ctx.names}


@given(parsers.parse('driver "{name}" always fails'))
def step_driver_fails(ctx: FanoutScenarioContext, name: str) -> None:
    ctx.drivers[name] = FailingDriver(name, ctx.calls)


# === When ===
@when(parsers.re(r'an? (?P<level>\w+) entry "(?P<message>[^"]*)" is logged'))
def step_log_entry(ctx: FanoutScenarioContext, level: str, message: str) -> None:
    try:
        ctx.build_logger().log(Level[level.upper()], message)
    except DispatchError as exc:
        ctx.error = exc


@when(
    parsers.re(
        r'a transaction "(?P<tx_id>[^"]+)" logs an? (?P<level>\w+) entry "(?P<message>[^"]*)"'
    )
)
def step_transaction_entry(
    ctx: FanoutScenarioContext, tx_id: str, level: str, message: str
) -> None:
    ctx.build_logger().transaction(tx_id).log(Level[level.upper()], message)


@when("the logger is closed")
def step_close(ctx: FanoutScenarioContext) -> None:
    ctx.build_logger().close()


# === Then ===
@then(parsers.parse('the drivers were called in order "{names}"'))
def step_called_in_order(ctx: FanoutScenarioContext, names: str) -> None:
    assert ctx.calls == _split(names)


@then("the call succeeded")
def step_call_succeeded(ctx: FanoutScenarioContext) -> None:
    assert ctx.error is None


@then(parsers.parse('the call failed with the error of driver "{name}"'))
def step_call_failed(ctx: FanoutScenarioContext, name: str) -> None:
    driver = ctx.drivers[name]
    assert isinstance(driver, FailingDriver)
    assert ctx.error is not None
    assert ctx.error.last is driver.error


@then(parsers.parse("{count:d} driver errors were collected"))
def step_error_count(ctx: FanoutScenarioContext, count: int) -> None:
    assert ctx.error is not None
    assert len(ctx.error.errors) == count


@then(parsers.parse('every driver saw transaction "{tx_id}"'))
def step_every_driver_saw_transaction(ctx: FanoutScenarioContext, tx_id: str) -> None:
    for driver in ctx.drivers.values():
        assert [e.transaction_id for e in driver.entries] == [tx_id]


@then("each driver was closed exactly once")
def step_closed_once(ctx: FanoutScenarioContext) -> None:
    assert all(driver.close_count == 1 for driver in ctx.drivers.values())
