"""API response models."""

from pydantic import BaseModel, Field

from expensehedge.models.hedge import ConsolationQuote, HedgeQuote
from expensehedge.models.statistics import SimulationReport


class HedgeQuoteResponse(BaseModel):
    """Response model for a recurring-expense quote."""

    quote: HedgeQuote
    total_premium: float = Field(..., description="Premium over all hedged months")


class ConsolationResponse(BaseModel):
    """Response model for a consolation quote with its simulation."""

    quote: ConsolationQuote
    report: SimulationReport


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(default="1.0.0", description="API version")
