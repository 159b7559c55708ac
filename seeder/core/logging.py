"""
Logging setup shared by the seeder entry points.
"""
import logging
from typing import Optional

from seeder.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging and return the seeder logger.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)

    Returns:
        logging.Logger: The "seeder" logger
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    # pymongo is chatty at DEBUG
    if not settings.DEBUG:
        logging.getLogger("pymongo").setLevel(logging.WARNING)
    return logging.getLogger("seeder")
