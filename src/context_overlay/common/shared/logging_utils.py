"""Shared logging utilities for consistent logging across the package."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with standardized formatting.
    
    Args:
        name: Logger name (typically __name__).
        level: Optional logging level (default: INFO).
    
    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    
    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        
        if level is not None:
            logger.setLevel(level)
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)
    
    return logger


def set_package_log_level(log_level: str, package: str = "context_overlay") -> None:
    """Apply a level name such as ``"DEBUG"`` to every logger of ``package``."""
    level = getattr(logging, log_level.upper())
    for name, logger in logging.root.manager.loggerDict.items():
        if (name == package or name.startswith(package + ".")) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
