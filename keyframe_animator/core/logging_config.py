"""
Logging configuration for the keyframe animator.

The library only attaches a NullHandler; applications opt in to output with
``configure_logging``.
"""

import functools
import logging
import time
from typing import Optional

ROOT_LOGGER_NAME = "keyframe_animator"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Module names already inside the package are used as is, anything else
    is nested below ``keyframe_animator``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                      fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Configure package logging.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional file path for logging output
        fmt: Log record format

    Returns:
        The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root


class LogContext:
    """
    Temporarily change a logger's level.

    Usage:
        with LogContext("keyframe_animator.animation", logging.DEBUG):
            composite.animate(0.1)
    """

    def __init__(self, name: str = ROOT_LOGGER_NAME, level: int = logging.DEBUG):
        self.logger = get_logger(name)
        self.level = level
        self._previous: Optional[int] = None

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._previous is not None:
            self.logger.setLevel(self._previous)


def log_performance(func):
    """Decorator logging the wall time of a call at debug level."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__qualname__} took {elapsed_ms:.3f}ms")
        return result

    return wrapper


__all__ = [
    "get_logger",
    "configure_logging",
    "LogContext",
    "log_performance",
]
