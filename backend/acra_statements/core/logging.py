"""
logging.py — Application-Wide Logging Configuration

Purpose:
- Configure a standardized logging format for the validator, projector and API.
- Keep log lines uniform: timestamp | level | module | message

This module does NOT:
- Ship logs to an external collector.
- Configure per-module handlers (modules only ask for a named logger).
"""

import logging
from typing import Optional

from acra_statements.core.config import settings

# -----------------------------------------------------------------------------
# Log Format
# -----------------------------------------------------------------------------

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

# -----------------------------------------------------------------------------
# Root Logger Initialization
# -----------------------------------------------------------------------------

def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging settings.

    Parameters:
        level (str): "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL".
            Defaults to settings.LOG_LEVEL.

    Behavior:
    - Sets logging format globally.
    - Should be called ONCE, in `main.py` or at the top of a script.

    Example Call:
        configure_logging("DEBUG")
    """
    if level is None:
        level = settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )

    logging.getLogger(__name__).info("Logging initialized with level %s", level)

# -----------------------------------------------------------------------------
# Logger Access Helper
# -----------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
    """
    Return a logger instance to be used in any module.

    In any module:
        from acra_statements.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("something happened")
    """
    return logging.getLogger(name)
