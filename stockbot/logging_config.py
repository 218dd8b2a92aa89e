"""Logging setup for the command line tool."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``stockbot`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("stockbot")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(h, "_stockbot_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._stockbot_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.propagate = False
    return logger
