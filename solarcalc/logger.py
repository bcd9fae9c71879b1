"""
Logging for SolarCalc.

All modules log through children of the "solarcalc" logger
("solarcalc.sun", ...). Handlers live on the package logger only:
DEBUG and INFO go to stdout, WARNING and above to stderr.
The package level comes from LOG_LEVEL.
"""

import logging
import sys
from solarcalc.config import LOG_LEVEL

PACKAGE_LOGGER = "solarcalc"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LevelFilter(logging.Filter):
    """Pass only records with level_min <= level <= level_max."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def _stream_handler(stream, level: int, level_max: int | None = None) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    if level_max is not None:
        handler.addFilter(LevelFilter(level, level_max))
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    (Re)build the handlers of the package logger.

    Safe to call more than once; previous handlers are replaced.

    Args:
        level: Level name, e.g. "DEBUG" to see no-solution events

    Returns:
        The "solarcalc" logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    package_logger.handlers.clear()

    package_logger.addHandler(_stream_handler(sys.stdout, logging.DEBUG, logging.INFO))
    package_logger.addHandler(_stream_handler(sys.stderr, logging.WARNING))
    return package_logger


def get_logger(module: str) -> logging.Logger:
    """Child logger for a solarcalc module, e.g. get_logger("sun")."""
    return logging.getLogger(PACKAGE_LOGGER).getChild(module)


logger = setup_logging()
