# common/logging_config.py

import logging
from typing import Optional, Union

from common.config import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configures root logging for a host application.

    Args:
        level: Logging level name or number. Defaults to MARKET_SIM_LOG_LEVEL
            (INFO when unset).
    """
    resolved = level if level is not None else DEFAULT_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level or DEFAULT_LOG_LEVEL}")
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(
        f"Logging configured at {logging.getLevelName(resolved)}"
    )
