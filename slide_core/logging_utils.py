from __future__ import annotations
from typing import Optional
import logging
import sys

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.INFO


def get_level_from_string(level_str: str) -> int:
    return LOG_LEVELS.get(level_str.lower(), DEFAULT_LEVEL)


def setup_logging(level: int = DEFAULT_LEVEL, log_file: Optional[str] = None, log_format: str = DEFAULT_FORMAT) -> None:
    """Routes the solver's loggers ("search", "slide_core") to stdout and optionally a file."""
    formatter = logging.Formatter(log_format)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))
    for name in ("search", "slide_core"):
        logger = logging.getLogger(name)
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.setLevel(level)
        for h in handlers:
            h.setFormatter(formatter)
            logger.addHandler(h)
        logger.propagate = False
