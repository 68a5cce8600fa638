"""Data models for ExpenseHedge."""

from expensehedge.models.scenario import HedgeMode, ScenarioParameters
from expensehedge.models.hedge import HedgeQuote, ConsolationQuote
from expensehedge.models.statistics import (
    ComparisonResults,
    HistogramBin,
    SampleStatistics,
    SimulationReport,
)
from expensehedge.models.optimization import (
    CandidateMetrics,
    OptimizationResult,
    RiskMetrics,
    RiskWeights,
    RECURRING_WEIGHTS,
    CONSOLATION_WEIGHTS,
)

__all__ = [
    "HedgeMode",
    "ScenarioParameters",
    "HedgeQuote",
    "ConsolationQuote",
    "ComparisonResults",
    "HistogramBin",
    "SampleStatistics",
    "SimulationReport",
    "CandidateMetrics",
    "OptimizationResult",
    "RiskMetrics",
    "RiskWeights",
    "RECURRING_WEIGHTS",
    "CONSOLATION_WEIGHTS",
]
