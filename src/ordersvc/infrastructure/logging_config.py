"""Logging setup for the command-line entry point.

Library modules only call ``logging.getLogger(__name__)``; the handler is
attached here, on the package logger.  Calling ``configure_logging`` again
swaps the handler instead of stacking a second one.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "ordersvc"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _CliHandler(logging.StreamHandler):
    pass


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, _CliHandler):
            logger.removeHandler(handler)

    handler = _CliHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
