"""Logging configuration for the ray tracer."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def setup_logging(name: str = "raytracer", level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        name: Logger name. Modules log through ``logging.getLogger(__name__)``,
            so pass ``""`` to configure the root logger for all of them.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only one console handler per logger, however often this is called.
    if not any(getattr(h, "_raytracer_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._raytracer_console = True
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logger
