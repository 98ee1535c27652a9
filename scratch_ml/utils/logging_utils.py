"""Logging setup for the command line and runners."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def init_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the root handler and return the package logger.
    
    Args:
        level: Logging level name or number
    
    Returns:
        The ``scratch_ml`` logger
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(format=LOG_FORMAT, level=level)

    logger = logging.getLogger("scratch_ml")
    logger.setLevel(level)
    return logger
