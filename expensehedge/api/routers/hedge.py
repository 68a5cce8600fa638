"""Recurring-expense hedge endpoints."""

from fastapi import APIRouter, HTTPException, Depends

from expensehedge.api.schemas.request import HedgeQuoteRequest, OptimizationRequest, SimulationRequest
from expensehedge.api.schemas.response import HedgeQuoteResponse
from expensehedge.api.services.hedge_service import HedgeService
from expensehedge.config import Settings, get_settings
from expensehedge.logger import get_logger
from expensehedge.models.optimization import OptimizationResult
from expensehedge.models.statistics import SimulationReport

logger = get_logger(__name__)
router = APIRouter()


def get_hedge_service(settings: Settings = Depends(get_settings)) -> HedgeService:
    """Dependency to get HedgeService instance."""
    return HedgeService(settings)


@router.post("/quote", response_model=HedgeQuoteResponse)
def quote_hedge(request: HedgeQuoteRequest, service: HedgeService = Depends(get_hedge_service)):
    """
    Shares, premium and per-month outcomes for a recurring expense hedge.

    - **baseline_expense**: Monthly expense when the event does not occur
    - **adverse_expense**: Monthly expense when it does
    - **hedge_ratio**: Fraction of the extra expense to cover
    """
    try:
        return service.quote(request)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error quoting hedge: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/simulate", response_model=SimulationReport)
def simulate_hedge(request: SimulationRequest, service: HedgeService = Depends(get_hedge_service)):
    """
    Monte Carlo comparison of hedged vs. unhedged totals over the hedged months.

    - **runs**: Number of trials (default from settings)
    - **seed**: Optional seed for reproducible results
    """
    try:
        logger.info(f"Received simulation request: ratio={request.hedge_ratio}, months={request.months}")
        return service.simulate(request)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error simulating hedge: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/optimize", response_model=OptimizationResult)
def optimize_hedge(request: OptimizationRequest, service: HedgeService = Depends(get_hedge_service)):
    """
    Sweep hedge ratios and return the one with the best composite risk score.

    - **steps**: Ratio steps over [0, 1] (default 20 = 0%, 5%, ..., 100%)
    - **runs**: Trials per candidate ratio
    """
    try:
        logger.info(f"Received optimization request: months={request.months}, steps={request.steps}")
        return service.optimize(request)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error optimizing hedge: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
