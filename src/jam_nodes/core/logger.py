"""Logging utilities for jam-nodes."""

import logging
import sys
from typing import Optional, Union

from .config import get_settings


def get_logger(
    name: Optional[str] = None,
    level: Optional[Union[int, str]] = None,
) -> logging.Logger:
    """Get a configured logger instance.

    Args:
        name: Logger name (defaults to the package logger)
        level: Logging level, as an int or a name such as "DEBUG"
            (defaults to JAM_NODES_LOG_LEVEL)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name or "jam_nodes")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if level is None:
            level = get_settings().log_level
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
