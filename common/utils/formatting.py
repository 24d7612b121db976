import logging
from typing import Optional

from common.config import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)


def format_currency(value: Optional[float], currency: str = DEFAULT_CURRENCY) -> str:
    """Formats an optional price as whole currency units, e.g. 'KES 4,500'."""
    if value is None:
        return "N/A"
    try:
        return f"{currency} {value:,.0f}"
    except (TypeError, ValueError) as e:
        logger.warning(f"Could not format {value!r} as currency: {e}")
        return "N/A"


def format_percent(value: float, decimals: int = 1) -> str:
    """Formats a signed percent change, e.g. '+2.4%'."""
    return f"{value:+.{decimals}f}%"
