"""Single-ratio simulation report: quote, statistics and a combined histogram."""

from typing import Optional

import numpy as np

from expensehedge.logger import get_logger
from expensehedge.models.scenario import ScenarioParameters
from expensehedge.models.statistics import HistogramBin, SimulationReport
from expensehedge.services.economics import quote_scenario
from expensehedge.services.simulator import DEFAULT_RUNS, UniformSource, run_comparison_simulation
from expensehedge.services.statistics import calculate_stats

logger = get_logger(__name__)

DEFAULT_HISTOGRAM_BINS = 20


def build_histogram(
    hedged: list[float], unhedged: list[float], bins: int = DEFAULT_HISTOGRAM_BINS
) -> list[HistogramBin]:
    """Equal-width bins over both samples; the last bin includes its upper edge."""
    hedged_values = np.asarray(hedged, dtype=float)
    unhedged_values = np.asarray(unhedged, dtype=float)
    combined = np.concatenate([hedged_values, unhedged_values])

    if combined.size == 0:
        return []

    low = float(combined.min())
    high = float(combined.max())

    if low == high:
        return [
            HistogramBin(
                start=low,
                end=high,
                hedged_count=int(hedged_values.size),
                unhedged_count=int(unhedged_values.size),
            )
        ]

    width = (high - low) / bins
    histogram = []
    for i in range(bins):
        last = i == bins - 1
        start = low + i * width
        end = high if last else low + (i + 1) * width

        histogram.append(
            HistogramBin(
                start=start,
                end=end,
                hedged_count=_count_in(hedged_values, start, end, closed=last),
                unhedged_count=_count_in(unhedged_values, start, end, closed=last),
            )
        )

    return histogram


def _count_in(values: np.ndarray, start: float, end: float, closed: bool) -> int:
    below_end = values <= end if closed else values < end
    return int(np.count_nonzero((values >= start) & below_end))


def build_simulation_report(
    scenario: ScenarioParameters,
    hedge_ratio: float,
    runs: int = DEFAULT_RUNS,
    draw: Optional[UniformSource] = None,
    bins: int = DEFAULT_HISTOGRAM_BINS,
) -> SimulationReport:
    """Run one comparison simulation and summarize it for presentation."""
    logger.info(f"Building simulation report at ratio {hedge_ratio:.2f} with {runs} runs")

    quote = quote_scenario(scenario, hedge_ratio)
    results = run_comparison_simulation(scenario, hedge_ratio, runs, draw)

    hedged = np.asarray(results.hedged, dtype=float)
    unhedged = np.asarray(results.unhedged, dtype=float)

    hedged_stats = calculate_stats(hedged)
    unhedged_stats = calculate_stats(unhedged)

    return SimulationReport(
        hedge_ratio=hedge_ratio,
        quote=quote,
        hedged_stats=hedged_stats,
        unhedged_stats=unhedged_stats,
        hedged_better=float(np.count_nonzero(hedged > unhedged) / hedged.size),
        average_improvement=float(np.mean(hedged - unhedged)),
        worst_case_improvement=hedged_stats.worst_case_10 - unhedged_stats.worst_case_10,
        histogram=build_histogram(results.hedged, results.unhedged, bins),
    )
