"""
Logging for the solver modules.

stdout carries the solution report and nothing else, so it can be piped or
diffed as-is. Progress and diagnostic messages therefore go to stderr.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "descriptor_pairs"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger(level: int = logging.INFO) -> logging.Logger:
    """Return the `descriptor_pairs` logger, attaching a stderr handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
