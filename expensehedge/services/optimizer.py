"""Search for the hedge ratio with the best composite risk score.

Every candidate ratio gets its own fresh comparison simulation. Only the
worst-case improvement is measured against the single unhedged baseline
drawn once per search; win percentage, volatility and drawdown reduction and
the sharpe excess return compare the hedged sequence with the unhedged
sequence paired with it. Candidates are evaluated in ascending order; on
equal scores the lower ratio wins.
"""

from functools import reduce
from typing import Iterable, Optional

import numpy as np

from expensehedge.logger import get_logger
from expensehedge.models.optimization import (
    CONSOLATION_WEIGHTS,
    RECURRING_WEIGHTS,
    CandidateMetrics,
    OptimizationResult,
    RiskWeights,
)
from expensehedge.models.scenario import HedgeMode, ScenarioParameters
from expensehedge.models.statistics import ComparisonResults, SampleStatistics
from expensehedge.services.economics import quote_scenario
from expensehedge.services.simulator import (
    DEFAULT_RUNS,
    UniformSource,
    default_source,
    run_comparison_simulation,
)
from expensehedge.services.statistics import calculate_stats

logger = get_logger(__name__)

DEFAULT_STEPS = 20

# Below this hedged standard deviation the sharpe ratio is reported as 0
MIN_SHARPE_STD_DEV = 0.01

CONSOLATION_MIN_RATIO = 0.10
CONSOLATION_MAX_RATIO = 1.00
CONSOLATION_RATIO_STEP = 0.05


def _percent_reduction(before: float, after: float) -> float:
    """Reduction from ``before`` to ``after`` in percent, floored at 0."""
    if before <= 0:
        return 0.0
    return max(0.0, (before - after) / before * 100)


def composite_score(
    weights: RiskWeights,
    worst_case_improvement_pct: float,
    volatility_reduction: float,
    max_drawdown_reduction: float,
    sharpe_ratio: float = 0.0,
    premium_pct: float = 0.0,
) -> float:
    """Weighted risk score; see ``RiskWeights`` for the formula."""
    return (
        worst_case_improvement_pct * weights.worst_case
        + volatility_reduction * weights.volatility
        + max_drawdown_reduction * weights.drawdown
        + sharpe_ratio * weights.risk_adjusted_return
        - premium_pct * weights.premium_penalty
    )


def evaluate_candidate(
    scenario: ScenarioParameters,
    ratio: float,
    results: ComparisonResults,
    baseline: SampleStatistics,
    weights: RiskWeights,
) -> CandidateMetrics:
    """Score one hedge ratio from its paired simulation against the baseline."""
    hedged = np.asarray(results.hedged, dtype=float)
    unhedged = np.asarray(results.unhedged, dtype=float)

    hedged_stats = calculate_stats(hedged)
    unhedged_stats = calculate_stats(unhedged)

    win_percentage = float(np.count_nonzero(hedged > unhedged) / len(hedged) * 100)

    # Outcomes are costs (negative), so a higher 10th percentile is an improvement
    worst_case_improvement = hedged_stats.worst_case_10 - baseline.worst_case_10
    if abs(baseline.worst_case_10) > 0:
        worst_case_improvement_pct = worst_case_improvement / abs(baseline.worst_case_10) * 100
    else:
        worst_case_improvement_pct = 0.0

    hedged_std = float(np.std(hedged))
    unhedged_std = float(np.std(unhedged))
    volatility_reduction = _percent_reduction(unhedged_std, hedged_std)

    if hedged_std > MIN_SHARPE_STD_DEV:
        sharpe_ratio = (hedged_stats.mean - unhedged_stats.mean) / hedged_std
    else:
        sharpe_ratio = 0.0

    max_drawdown_reduction = _percent_reduction(float(np.ptp(unhedged)), float(np.ptp(hedged)))

    premium = quote_scenario(scenario, ratio).premium
    if scenario.baseline_value != 0:
        premium_pct = premium / abs(scenario.baseline_value) * 100
    else:
        premium_pct = 0.0

    risk_score = composite_score(
        weights,
        worst_case_improvement_pct,
        volatility_reduction,
        max_drawdown_reduction,
        sharpe_ratio,
        premium_pct,
    )

    logger.debug(
        f"ratio={ratio:.2f}: score={risk_score:.2f}, win={win_percentage:.1f}%, "
        f"worst_case={worst_case_improvement:.2f}, vol={volatility_reduction:.1f}%, "
        f"drawdown={max_drawdown_reduction:.1f}%, sharpe={sharpe_ratio:.3f}"
    )

    return CandidateMetrics(
        ratio=ratio,
        win_percentage=win_percentage,
        worst_case_improvement=worst_case_improvement,
        volatility_reduction=volatility_reduction,
        sharpe_ratio=sharpe_ratio,
        max_drawdown_reduction=max_drawdown_reduction,
        risk_score=risk_score,
    )


def _keep_better(best: CandidateMetrics, candidate: CandidateMetrics) -> CandidateMetrics:
    return candidate if candidate.risk_score > best.risk_score else best


def sweep_hedge_ratios(
    scenario: ScenarioParameters,
    ratios: Iterable[float],
    runs_per_step: int,
    weights: RiskWeights,
    draw: Optional[UniformSource] = None,
) -> OptimizationResult:
    """Evaluate ``ratios`` in order and return the best-scoring one."""
    draw = draw or default_source()

    baseline = calculate_stats(run_comparison_simulation(scenario, 0.0, runs_per_step, draw).unhedged)

    candidates = [
        evaluate_candidate(
            scenario,
            ratio,
            run_comparison_simulation(scenario, ratio, runs_per_step, draw),
            baseline,
            weights,
        )
        for ratio in ratios
    ]
    best = reduce(_keep_better, candidates)

    logger.info(
        f"Optimal hedge ratio {best.ratio:.2f} of {len(candidates)} candidates "
        f"(score={best.risk_score:.2f})"
    )

    return OptimizationResult(
        optimal_ratio=best.ratio,
        candidates=candidates,
        **best.model_dump(exclude={"ratio"}),
    )


def find_optimal_hedge_ratio(
    scenario: ScenarioParameters,
    steps: int = DEFAULT_STEPS,
    runs_per_step: int = DEFAULT_RUNS,
    draw: Optional[UniformSource] = None,
    weights: RiskWeights = RECURRING_WEIGHTS,
) -> OptimizationResult:
    """Sweep ``steps + 1`` evenly spaced ratios over [0, 1] for a recurring expense.

    steps=20 tests 0%, 5%, ..., 100%.
    """
    scenario = scenario.model_copy(update={"mode": HedgeMode.RECURRING})
    logger.info(
        f"Optimizing recurring hedge: baseline={scenario.baseline_value}, "
        f"adverse={scenario.adverse_value}, p={scenario.event_probability}, "
        f"periods={scenario.period_count}, steps={steps}, runs={runs_per_step}"
    )
    ratios = [i / steps for i in range(steps + 1)]
    return sweep_hedge_ratios(scenario, ratios, runs_per_step, weights, draw)


def consolation_ratios() -> list[float]:
    """0.10, 0.15, ..., 1.00."""
    count = round((CONSOLATION_MAX_RATIO - CONSOLATION_MIN_RATIO) / CONSOLATION_RATIO_STEP) + 1
    return [round(CONSOLATION_MIN_RATIO + CONSOLATION_RATIO_STEP * i, 2) for i in range(count)]


def find_optimal_emotional_hedge_ratio(
    scenario: ScenarioParameters,
    runs_per_step: int = DEFAULT_RUNS,
    draw: Optional[UniformSource] = None,
    weights: RiskWeights = CONSOLATION_WEIGHTS,
) -> OptimizationResult:
    """Pick how much of the desired consolation to buy for a single event."""
    scenario = scenario.model_copy(update={"mode": HedgeMode.CONSOLATION})
    logger.info(
        f"Optimizing consolation hedge: entry_cost={scenario.baseline_value}, "
        f"consolation={scenario.adverse_value}, p={scenario.event_probability}, "
        f"runs={runs_per_step}"
    )
    return sweep_hedge_ratios(scenario, consolation_ratios(), runs_per_step, weights, draw)
