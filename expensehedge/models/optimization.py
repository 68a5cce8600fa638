"""Hedge-ratio optimization data models."""

from pydantic import BaseModel, ConfigDict, Field


class RiskWeights(BaseModel):
    """Weight vector for the composite risk score.

    score = worst_case * worst-case improvement (% of baseline)
          + volatility * volatility reduction (%)
          + drawdown * range reduction (%)
          + risk_adjusted_return * sharpe ratio
          - premium_penalty * premium (% of baseline value)
    """

    model_config = ConfigDict(frozen=True)

    worst_case: float = 0.0
    volatility: float = 0.0
    drawdown: float = 0.0
    risk_adjusted_return: float = 0.0
    premium_penalty: float = 0.0


# Worst-case protection dominates: insurance, not investment
RECURRING_WEIGHTS = RiskWeights(worst_case=0.70, volatility=0.20, drawdown=0.10)

CONSOLATION_WEIGHTS = RiskWeights(
    worst_case=0.40,
    volatility=0.30,
    drawdown=0.20,
    risk_adjusted_return=0.10,
    premium_penalty=0.05,
)


class RiskMetrics(BaseModel):
    """Comparative metrics of a hedged sample against its unhedged pair."""

    model_config = ConfigDict(frozen=True)

    win_percentage: float = Field(ge=0, le=100, description="Share of trials where hedged beat unhedged")
    worst_case_improvement: float = Field(description="Change in 10th percentile vs. the unhedged baseline")
    volatility_reduction: float = Field(ge=0, description="Percent reduction in standard deviation")
    sharpe_ratio: float = Field(description="Mean improvement per unit of hedged standard deviation")
    max_drawdown_reduction: float = Field(ge=0, description="Percent reduction in outcome range")
    risk_score: float = Field(description="Weighted composite score")


class CandidateMetrics(RiskMetrics):
    """Metrics for one swept hedge ratio."""

    ratio: float = Field(description="Candidate hedge ratio")


class OptimizationResult(RiskMetrics):
    """Best hedge ratio found by a sweep, plus the whole sweep."""

    optimal_ratio: float = Field(ge=0, le=1, description="Hedge ratio with the greatest risk score")
    candidates: list[CandidateMetrics] = Field(
        default_factory=list, description="Every evaluated candidate, ascending by ratio"
    )
