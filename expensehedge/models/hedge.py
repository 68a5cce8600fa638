"""Hedge quote data models."""

from pydantic import BaseModel, ConfigDict, Field


class HedgeQuote(BaseModel):
    """Deterministic economics of a recurring-expense hedge for one period."""

    model_config = ConfigDict(frozen=True)

    shares: float = Field(description="YES shares to buy (negative for inverted inputs)")
    premium: float = Field(description="Up-front cost of the shares")
    hedged_outcome_if_event_true: float = Field(description="Net outcome when hedged and the event occurs")
    hedged_outcome_if_event_false: float = Field(description="Net outcome when hedged and the event does not occur")
    unhedged_outcome_if_event_true: float = Field(description="Net outcome without a hedge when the event occurs")
    unhedged_outcome_if_event_false: float = Field(description="Net outcome without a hedge when the event does not occur")


class ConsolationQuote(BaseModel):
    """Deterministic economics of a single-event consolation hedge."""

    model_config = ConfigDict(frozen=True)

    shares: float = Field(description="YES shares to buy on the adverse outcome")
    premium: float = Field(description="Up-front cost of the shares")
    outcome_if_adverse_event: float = Field(description="Net outcome when hedged and the adverse event happens")
    outcome_if_favorable_event: float = Field(description="Net outcome when hedged and the favorable event happens")
    unhedged_outcome_if_adverse_event: float = Field(description="Net outcome without a hedge, adverse event")
    unhedged_outcome_if_favorable_event: float = Field(description="Net outcome without a hedge, favorable event")
