"""Named loggers for EIRSCOPE."""

from __future__ import annotations

import logging
import sys

import config

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the EIRSCOPE handler and configured level attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger


app_logger = get_logger('eirscope')
bluetooth_logger = get_logger('eirscope.bluetooth')
routes_logger = get_logger('eirscope.routes')
