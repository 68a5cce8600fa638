"""Monte Carlo simulation of hedged vs. unhedged outcomes.

Each trial is ``period_count`` independent Bernoulli draws. The quote is
computed once per call: only the draws vary across periods and trials.
"""

from typing import Callable, Optional

import numpy as np

from expensehedge.logger import get_logger
from expensehedge.models.scenario import HedgeMode, ScenarioParameters
from expensehedge.models.statistics import ComparisonResults
from expensehedge.services.economics import outcome_branches, quote_scenario

logger = get_logger(__name__)

# Draws a uniform float in [0, 1)
UniformSource = Callable[[], float]

DEFAULT_RUNS = 5000

_PROCESS_RNG = np.random.default_rng()


def default_source() -> UniformSource:
    """The process-wide, unseeded uniform source."""
    return _PROCESS_RNG.random


def seeded_source(seed: int) -> UniformSource:
    """A reproducible uniform source."""
    return np.random.default_rng(seed).random


def periods_for(scenario: ScenarioParameters) -> int:
    """Number of periods in one trial; a consolation hedge covers a single event."""
    if scenario.mode == HedgeMode.CONSOLATION:
        return 1
    return scenario.period_count


def run_comparison_simulation(
    scenario: ScenarioParameters,
    hedge_ratio: float,
    runs: int = DEFAULT_RUNS,
    draw: Optional[UniformSource] = None,
) -> ComparisonResults:
    """Simulate ``runs`` independent trials with and without the hedge.

    Returns paired sequences: ``hedged[i]`` and ``unhedged[i]`` come from the
    same draws.
    """
    draw = draw or default_source()
    probability = scenario.event_probability
    periods = periods_for(scenario)

    hedged_true, hedged_false, unhedged_true, unhedged_false = outcome_branches(
        quote_scenario(scenario, hedge_ratio)
    )

    hedged_results = []
    unhedged_results = []

    for _ in range(runs):
        hedged_total = 0.0
        unhedged_total = 0.0

        for _ in range(periods):
            if draw() < probability:
                hedged_total += hedged_true
                unhedged_total += unhedged_true
            else:
                hedged_total += hedged_false
                unhedged_total += unhedged_false

        hedged_results.append(hedged_total)
        unhedged_results.append(unhedged_total)

    logger.debug(
        f"Simulated {runs} runs x {periods} periods at ratio {hedge_ratio:.2f} "
        f"({scenario.mode.value} mode)"
    )

    return ComparisonResults(hedged=hedged_results, unhedged=unhedged_results)


def run_monte_carlo_simulation(
    scenario: ScenarioParameters,
    hedge_ratio: float,
    runs: int = DEFAULT_RUNS,
    draw: Optional[UniformSource] = None,
) -> list[float]:
    """Hedged totals only."""
    return run_comparison_simulation(scenario, hedge_ratio, runs, draw).hedged
