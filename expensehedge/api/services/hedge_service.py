"""Turn validated requests into risk engine calls."""

import time
from typing import Optional

from expensehedge.api.schemas.request import (
    ConsolationOptimizationRequest,
    ConsolationQuoteRequest,
    HedgeQuoteRequest,
    OptimizationRequest,
    SimulationRequest,
)
from expensehedge.api.schemas.response import ConsolationResponse, HedgeQuoteResponse
from expensehedge.config import Settings
from expensehedge.logger import get_logger
from expensehedge.models.optimization import OptimizationResult
from expensehedge.models.statistics import SimulationReport
from expensehedge.services.economics import calculate_hedging
from expensehedge.services.optimizer import (
    find_optimal_emotional_hedge_ratio,
    find_optimal_hedge_ratio,
)
from expensehedge.services.report import build_simulation_report
from expensehedge.services.simulator import UniformSource, seeded_source

logger = get_logger(__name__)


def _source_for(seed: Optional[int]) -> Optional[UniformSource]:
    return seeded_source(seed) if seed is not None else None


class HedgeService:
    """Orchestrate quotes, simulations and optimizations with configured defaults."""

    def __init__(self, settings: Settings):
        self.settings = settings
        logger.info("HedgeService initialized")

    def quote(self, request: HedgeQuoteRequest) -> HedgeQuoteResponse:
        """Deterministic per-month economics of a recurring hedge."""
        scenario = request.to_scenario(self.settings.default_fee_rate)
        quote = calculate_hedging(
            scenario.baseline_value,
            scenario.adverse_value,
            request.hedge_ratio,
            scenario.share_price,
            scenario.fee_rate,
        )
        return HedgeQuoteResponse(quote=quote, total_premium=quote.premium * scenario.period_count)

    def simulate(self, request: SimulationRequest) -> SimulationReport:
        """Simulate a recurring hedge at a fixed ratio."""
        start_time = time.time()
        scenario = request.to_scenario(self.settings.default_fee_rate)

        report = build_simulation_report(
            scenario,
            request.hedge_ratio,
            runs=request.runs or self.settings.default_runs,
            draw=_source_for(request.seed),
            bins=self.settings.histogram_bins,
        )

        logger.info(f"Simulation complete in {time.time() - start_time:.2f}s")
        return report

    def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        """Find the recurring hedge ratio with the best risk score."""
        start_time = time.time()
        scenario = request.to_scenario(self.settings.default_fee_rate)

        result = find_optimal_hedge_ratio(
            scenario,
            steps=request.steps or self.settings.default_steps,
            runs_per_step=request.runs or self.settings.default_runs,
            draw=_source_for(request.seed),
        )

        logger.info(f"Optimization complete in {time.time() - start_time:.2f}s")
        return result

    def consolation(self, request: ConsolationQuoteRequest) -> ConsolationResponse:
        """Quote and simulate a single-event consolation hedge."""
        scenario = request.to_scenario(self.settings.default_fee_rate)
        report = build_simulation_report(
            scenario,
            request.hedge_ratio,
            runs=request.runs or self.settings.default_runs,
            draw=_source_for(request.seed),
            bins=self.settings.histogram_bins,
        )
        return ConsolationResponse(quote=report.quote, report=report)

    def optimize_consolation(self, request: ConsolationOptimizationRequest) -> OptimizationResult:
        """Find how much consolation to buy."""
        start_time = time.time()
        scenario = request.to_scenario(self.settings.default_fee_rate)

        result = find_optimal_emotional_hedge_ratio(
            scenario,
            runs_per_step=request.runs or self.settings.default_runs,
            draw=_source_for(request.seed),
        )

        logger.info(f"Consolation optimization complete in {time.time() - start_time:.2f}s")
        return result
