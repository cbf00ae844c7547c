"""Logging utilities for autoforge."""

import logging
from typing import Optional

_LOGGER_NAME = "autoforge"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the autoforge hierarchy.

    Args:
        name: Module name. Names already under ``autoforge.`` are used as-is.

    Returns:
        The logger.
    """
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the autoforge logger with a stderr handler.

    Args:
        verbose: Log DEBUG messages when True, WARNING and above otherwise.

    Returns:
        The configured root autoforge logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[autoforge] %(levelname)s %(message)s"))
    logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
