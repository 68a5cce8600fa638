"""Scenario data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HedgeMode(str, Enum):
    """Which payoff algebra a scenario uses."""

    RECURRING = "recurring"
    CONSOLATION = "consolation"


class ScenarioParameters(BaseModel):
    """Inputs describing one hedging scenario.

    Ranges are deliberately unconstrained here; callers validate at the
    boundary (see ``expensehedge.api.schemas.request``).
    """

    model_config = ConfigDict(frozen=True)

    baseline_value: float = Field(
        description="Amount incurred when the event does not occur (entry cost in consolation mode)"
    )
    adverse_value: float = Field(
        description="Amount incurred when the event occurs (desired payout in consolation mode)"
    )
    event_probability: float = Field(description="Probability the hedged event occurs per period")
    period_count: int = Field(default=1, description="Number of independent periods per trial")
    fee_rate: float = Field(default=0.01, description="Fraction of notional kept by the market on settlement")
    price: float | None = Field(
        default=None, description="YES share price; defaults to the event probability"
    )
    mode: HedgeMode = Field(default=HedgeMode.RECURRING, description="Payoff algebra to apply")

    @property
    def share_price(self) -> float:
        """Price paid per YES share (market-implied when not given)."""
        return self.event_probability if self.price is None else self.price
