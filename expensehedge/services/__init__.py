"""Risk engine services for ExpenseHedge."""

from expensehedge.services.statistics import EmptySampleError, calculate_stats, percentile
from expensehedge.services.economics import (
    calculate_emotional_hedging,
    calculate_hedging,
    quote_scenario,
)
from expensehedge.services.simulator import (
    run_comparison_simulation,
    run_monte_carlo_simulation,
    seeded_source,
)
from expensehedge.services.optimizer import (
    find_optimal_emotional_hedge_ratio,
    find_optimal_hedge_ratio,
)
from expensehedge.services.report import build_simulation_report

__all__ = [
    "EmptySampleError",
    "calculate_stats",
    "percentile",
    "calculate_emotional_hedging",
    "calculate_hedging",
    "quote_scenario",
    "run_comparison_simulation",
    "run_monte_carlo_simulation",
    "seeded_source",
    "find_optimal_emotional_hedge_ratio",
    "find_optimal_hedge_ratio",
    "build_simulation_report",
]
