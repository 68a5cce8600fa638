"""Shared fixtures for the ExpenseHedge test suite."""

import os
import tempfile
from pathlib import Path

# Loggers are configured at import time; keep test logs out of the working tree
os.environ.setdefault(
    "EXPENSEHEDGE_LOG_FILE", str(Path(tempfile.gettempdir()) / "expensehedge-tests.log")
)

import pytest

from expensehedge.models.scenario import HedgeMode, ScenarioParameters


class ScriptedSource:
    """Uniform source that replays fixed draws, cycling when exhausted."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def __call__(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_source():
    """Factory for scripted uniform sources."""
    return ScriptedSource


@pytest.fixture
def recurring_scenario():
    """Monthly expense of 100 that jumps to 180 a third of the time."""
    return ScenarioParameters(
        baseline_value=100,
        adverse_value=180,
        event_probability=0.35,
        period_count=1,
        fee_rate=0.01,
    )


@pytest.fixture
def severe_scenario():
    """Low probability, severe expense spike over a year."""
    return ScenarioParameters(
        baseline_value=100,
        adverse_value=300,
        event_probability=0.2,
        period_count=12,
        fee_rate=0.01,
    )


@pytest.fixture
def consolation_scenario():
    """A $50 ticket with a wish for $100 if the team loses."""
    return ScenarioParameters(
        baseline_value=50,
        adverse_value=100,
        event_probability=0.4,
        fee_rate=0.02,
        mode=HedgeMode.CONSOLATION,
    )
