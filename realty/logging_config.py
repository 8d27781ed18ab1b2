"""Centralized logging configuration for the realty package."""

import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure the "realty" logger once.

    Args:
        level: Logging level. Defaults to the LOG_LEVEL environment
            variable, or INFO.
        format_string: Custom format string (optional).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("realty")

    # Configure once; handlers on ancestor loggers do not count
    if logger.handlers:
        return logger

    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the "realty" namespace.

    Args:
        name: Module name (usually __name__)
    """
    if name == "realty" or name.startswith("realty."):
        return logging.getLogger(name)
    return logging.getLogger(f"realty.{name}")
