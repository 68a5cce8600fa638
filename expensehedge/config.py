"""Environment configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Market settings
    default_fee_rate: float = 0.01  # Fraction of notional kept on settlement

    # Simulation settings
    default_runs: int = 5000
    default_steps: int = 20
    histogram_bins: int = 20

    # API
    cors_origins: list[str] = []  # Browser origins allowed to call the API

    # Logging
    log_file: str = "expensehedge.log"
    log_level: str = "DEBUG"

    model_config = {
        "env_prefix": "EXPENSEHEDGE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
