"""Logging configuration for ExpenseHedge."""

import logging
from pathlib import Path

from expensehedge.config import get_settings


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        settings = get_settings()
        logger.setLevel(settings.log_level)

        file_handler = logging.FileHandler(Path(settings.log_file), mode="a")
        file_handler.setLevel(settings.log_level)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # Keep engine chatter out of the console
        logger.propagate = False

    return logger
