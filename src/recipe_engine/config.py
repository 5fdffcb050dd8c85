from __future__ import annotations
import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Serving bounds used by validate_serving_size and the suggestion filter
MIN_SERVINGS: float = float(os.getenv("RECIPE_MIN_SERVINGS", "0.25"))
MAX_SERVINGS: float = float(os.getenv("RECIPE_MAX_SERVINGS", "50"))

# Pantry items expiring within this many days are flagged
EXPIRY_WINDOW_DAYS: int = int(os.getenv("RECIPE_EXPIRY_WINDOW_DAYS", "3"))

# Absolute tolerance when snapping a remainder to a kitchen fraction
FRACTION_TOLERANCE: float = float(os.getenv("RECIPE_FRACTION_TOLERANCE", "0.02"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
