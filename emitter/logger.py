"""
Logger utility.
"""
import logging
import os

LEVEL_ENV = "EMITTER_LOG_LEVEL"


def get_level(default=logging.INFO):
    """Resolve the log level from EMITTER_LOG_LEVEL, falling back to *default*."""
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def get_logger(name=None):
    """Retrieve a configured logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s] [%(name)s] %(levelname)s: %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(get_level())
    return logger
