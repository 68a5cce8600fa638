"""Single-event consolation hedge endpoints."""

from fastapi import APIRouter, HTTPException, Depends

from expensehedge.api.routers.hedge import get_hedge_service
from expensehedge.api.schemas.request import ConsolationOptimizationRequest, ConsolationQuoteRequest
from expensehedge.api.schemas.response import ConsolationResponse
from expensehedge.api.services.hedge_service import HedgeService
from expensehedge.logger import get_logger
from expensehedge.models.optimization import OptimizationResult

logger = get_logger(__name__)
router = APIRouter()


@router.post("/quote", response_model=ConsolationResponse)
def quote_consolation(
    request: ConsolationQuoteRequest, service: HedgeService = Depends(get_hedge_service)
):
    """
    Quote and simulate buying a consolation payout on a single event.

    - **entry_cost**: What you already paid, win or lose
    - **desired_consolation**: Payout wanted if the event goes badly
    """
    try:
        return service.consolation(request)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error quoting consolation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/optimize", response_model=OptimizationResult)
def optimize_consolation(
    request: ConsolationOptimizationRequest, service: HedgeService = Depends(get_hedge_service)
):
    """Sweep consolation ratios from 10% to 100% in 5% steps."""
    try:
        return service.optimize_consolation(request)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error optimizing consolation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
