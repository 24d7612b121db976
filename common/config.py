# common/config.py

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# --- Market Simulation Defaults ---
DEFAULT_HISTORY_DAYS = 30
DEFAULT_HISTORY_VOLATILITY_SCALE = 0.5  # History uses half the live volatility
DEFAULT_PRICE_FLOOR_RATIO = 0.5  # Prices never drop below 50% of base
DEFAULT_TREND_RATE = 0.001  # ~0.1% drift per day of recency
DEFAULT_SEASONAL_AMPLITUDE = 0.05  # +/-5% over one full cycle

# Presentation layer re-generates the snapshot on this interval
DEFAULT_REFRESH_INTERVAL_SECONDS = 30

# --- Analytics Defaults ---
DEFAULT_SHORT_MA_PERIOD = 7
DEFAULT_LONG_MA_PERIOD = 30

# Volatility thresholds are in KES (standard deviation of prices)
DEFAULT_VOLATILITY_LOW_THRESHOLD = 200.0
DEFAULT_VOLATILITY_HIGH_THRESHOLD = 400.0
DEFAULT_EFFICIENCY_HIGH_THRESHOLD = 0.8
DEFAULT_EFFICIENCY_MODERATE_THRESHOLD = 0.6

# --- Display ---
DEFAULT_CURRENCY = "KES"

# --- Environment Overrides ---
DEFAULT_LOG_LEVEL = os.getenv("MARKET_SIM_LOG_LEVEL", "INFO").upper()


def get_random_seed() -> Optional[int]:
    """Returns the seed from MARKET_SIM_SEED, or None when unset or invalid."""
    raw = os.getenv("MARKET_SIM_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer MARKET_SIM_SEED value: {raw!r}")
        return None
