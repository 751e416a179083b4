"""
Logging configuration for hosts that want the validator's traces on the console.
The library itself only emits records through module loggers.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "payload_contract"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Logging level name or number; defaults to PAYLOAD_CONTRACT_LOG_LEVEL, then INFO

    Returns:
        The configured package logger
    """
    if level is None:
        level = os.environ.get("PAYLOAD_CONTRACT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger
