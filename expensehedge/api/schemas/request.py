"""API request models.

These carry the input validation the risk engine leaves to its callers.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from expensehedge.models.scenario import HedgeMode, ScenarioParameters
from expensehedge.services.optimizer import DEFAULT_STEPS
from expensehedge.services.simulator import DEFAULT_RUNS

MAX_MONTHS = 600
MAX_RUNS = 100_000
MAX_STEPS = 200

# Upper bound on Bernoulli draws a single request may trigger
MAX_SIMULATED_DRAWS = 20_000_000


def check_draw_budget(draws: int) -> None:
    """Reject requests whose simulation would tie up a worker for minutes."""
    if draws > MAX_SIMULATED_DRAWS:
        raise ValueError(
            f"request needs {draws:,} simulated draws (limit {MAX_SIMULATED_DRAWS:,}); "
            "reduce runs, steps or months"
        )


class ExpenseScenarioRequest(BaseModel):
    """A recurring expense that jumps when an event occurs."""

    baseline_expense: float = Field(..., gt=0, description="Monthly expense when the event does not occur")
    adverse_expense: float = Field(..., gt=0, description="Monthly expense when the event occurs")
    event_probability: float = Field(..., gt=0, lt=1, description="Chance the event occurs in a month")
    price: Optional[float] = Field(
        default=None, gt=0, lt=1, description="YES share price (defaults to the event probability)"
    )
    months: int = Field(default=12, ge=1, le=MAX_MONTHS, description="Months to hedge")
    fee_rate: Optional[float] = Field(
        default=None, ge=0, lt=1, description="Market fee rate (defaults to the configured rate)"
    )

    @model_validator(mode="after")
    def check_adverse_above_baseline(self):
        if self.adverse_expense <= self.baseline_expense:
            raise ValueError("adverse_expense must be higher than baseline_expense")
        return self

    def to_scenario(self, default_fee_rate: float) -> ScenarioParameters:
        return ScenarioParameters(
            baseline_value=self.baseline_expense,
            adverse_value=self.adverse_expense,
            event_probability=self.event_probability,
            period_count=self.months,
            fee_rate=default_fee_rate if self.fee_rate is None else self.fee_rate,
            price=self.price,
            mode=HedgeMode.RECURRING,
        )


class HedgeQuoteRequest(ExpenseScenarioRequest):
    """Request model for a recurring-expense quote."""

    hedge_ratio: float = Field(default=0.8, ge=0, le=1, description="Fraction of the extra expense to cover")


class SimulationRequest(HedgeQuoteRequest):
    """Request model for a recurring-expense simulation."""

    runs: Optional[int] = Field(default=None, ge=1, le=MAX_RUNS, description="Monte Carlo trials")
    seed: Optional[int] = Field(default=None, ge=0, description="Seed for reproducible draws")

    @model_validator(mode="after")
    def check_simulation_size(self):
        check_draw_budget((self.runs or DEFAULT_RUNS) * self.months)
        return self


class OptimizationRequest(ExpenseScenarioRequest):
    """Request model for a recurring-expense hedge-ratio search."""

    steps: Optional[int] = Field(default=None, ge=1, le=MAX_STEPS, description="Ratio steps over [0, 1]")
    runs: Optional[int] = Field(default=None, ge=1, le=MAX_RUNS, description="Trials per candidate ratio")
    seed: Optional[int] = Field(default=None, ge=0, description="Seed for reproducible draws")

    @model_validator(mode="after")
    def check_sweep_size(self):
        # One baseline simulation plus steps + 1 candidates
        candidates = (self.steps or DEFAULT_STEPS) + 2
        check_draw_budget(candidates * (self.runs or DEFAULT_RUNS) * self.months)
        return self


class ConsolationRequest(BaseModel):
    """A single event you already paid into and want a consolation for."""

    entry_cost: float = Field(..., gt=0, description="Cost sunk regardless of the outcome")
    desired_consolation: float = Field(..., gt=0, description="Payout wanted if the event goes badly")
    event_probability: float = Field(..., gt=0, lt=1, description="Chance of the adverse outcome")
    price: Optional[float] = Field(
        default=None, gt=0, lt=1, description="YES share price (defaults to the event probability)"
    )
    fee_rate: Optional[float] = Field(default=None, ge=0, lt=1, description="Market fee rate")

    def to_scenario(self, default_fee_rate: float) -> ScenarioParameters:
        return ScenarioParameters(
            baseline_value=self.entry_cost,
            adverse_value=self.desired_consolation,
            event_probability=self.event_probability,
            period_count=1,
            fee_rate=default_fee_rate if self.fee_rate is None else self.fee_rate,
            price=self.price,
            mode=HedgeMode.CONSOLATION,
        )


class ConsolationQuoteRequest(ConsolationRequest):
    """Request model for a consolation quote."""

    hedge_ratio: float = Field(default=1.0, ge=0, le=1, description="Fraction of the consolation to buy")
    runs: Optional[int] = Field(default=None, ge=1, le=MAX_RUNS, description="Monte Carlo trials")
    seed: Optional[int] = Field(default=None, ge=0)


class ConsolationOptimizationRequest(ConsolationRequest):
    """Request model for a consolation hedge-ratio search."""

    runs: Optional[int] = Field(default=None, ge=1, le=MAX_RUNS, description="Trials per candidate ratio")
    seed: Optional[int] = Field(default=None, ge=0)
