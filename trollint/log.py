# trollint/log.py

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install one stream handler on the trollint logger.
    Safe to call more than once: an existing handler is reused.
    """
    logger = logging.getLogger("trollint")
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
