"""Logging setup shared by every Diophant module."""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "diophant"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handlers: list[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``diophant`` namespace."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Configure the ``diophant`` logger.

    Calling this more than once replaces the handlers installed by the
    previous call instead of stacking new ones.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    _handlers.append(stream_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for handler in _handlers:
        logger.addHandler(handler)
    logger.propagate = False
    return logger
