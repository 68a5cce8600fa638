"""Simulation output data models."""

from pydantic import BaseModel, ConfigDict, Field

from expensehedge.models.hedge import ConsolationQuote, HedgeQuote


class ComparisonResults(BaseModel):
    """Paired hedged/unhedged trial totals; index i of both lists is one trial."""

    model_config = ConfigDict(frozen=True)

    hedged: list[float] = Field(description="Total net outcome per trial with the hedge")
    unhedged: list[float] = Field(description="Total net outcome per trial without the hedge")


class SampleStatistics(BaseModel):
    """Summary statistics of a sample of simulated outcomes."""

    model_config = ConfigDict(frozen=True)

    mean: float = Field(description="Arithmetic mean")
    median: float = Field(description="50th percentile")
    worst_case_10: float = Field(description="10th percentile (exceeded by 90% of outcomes)")
    probability_positive: float = Field(ge=0, le=1, description="Fraction of outcomes above zero")


class HistogramBin(BaseModel):
    """One bin of the combined hedged/unhedged outcome histogram."""

    model_config = ConfigDict(frozen=True)

    start: float
    end: float
    hedged_count: int = Field(ge=0)
    unhedged_count: int = Field(ge=0)


class SimulationReport(BaseModel):
    """Everything needed to present a single-ratio simulation."""

    model_config = ConfigDict(frozen=True)

    hedge_ratio: float = Field(description="Hedge ratio the report was computed for")
    quote: HedgeQuote | ConsolationQuote = Field(description="Deterministic per-period economics")
    hedged_stats: SampleStatistics
    unhedged_stats: SampleStatistics
    hedged_better: float = Field(ge=0, le=1, description="Fraction of trials where hedging did better")
    average_improvement: float = Field(description="Mean of hedged minus unhedged per trial")
    worst_case_improvement: float = Field(description="Hedged minus unhedged 10th percentile")
    histogram: list[HistogramBin] = Field(default_factory=list)
