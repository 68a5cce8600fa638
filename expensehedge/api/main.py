"""FastAPI application for ExpenseHedge."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expensehedge.api.routers import consolation, hedge
from expensehedge.api.schemas.response import HealthResponse
from expensehedge.config import get_settings
from expensehedge.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="ExpenseHedge API",
    description="Hedge expense volatility with binary prediction-market shares",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# No origins by default; set EXPENSEHEDGE_CORS_ORIGINS to serve a browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hedge.router, prefix="/api/hedge", tags=["hedge"])
app.include_router(consolation.router, prefix="/api/consolation", tags=["consolation"])


@app.get("/", response_model=HealthResponse)
async def root():
    """Root endpoint with basic API information."""
    return HealthResponse(status="running", version="1.0.0")


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version="1.0.0")
