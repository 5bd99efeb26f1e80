"""Logging setup."""

import logging

LOG_FORMAT = "%(levelname)s : %(asctime)s | %(name)s  | %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the dashguard logger."""
    logger = logging.getLogger("dashguard")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
