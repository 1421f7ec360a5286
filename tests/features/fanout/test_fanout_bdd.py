"""BDD tests for fan-out logging features."""

import pytest
from pytest_bdd import scenarios

# Load all fan-out feature scenarios
scenarios("fanout.feature")

pytestmark = [
    pytest.mark.tier(1),
    pytest.mark.tra("Core.Logger.FanOut"),
]
