"""Logging setup for the chug command line and embedding applications.

The library modules only ever obtain loggers with ``logging.getLogger(__name__)``
and never install handlers. Applications that want chug's diagnostics call
:func:`configure_logging` once at start-up.

Console output goes to stderr by default so stdout stays free for ETA lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Root of the package logger hierarchy
PACKAGE_LOGGER_NAME: Final[str] = "chug"

VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def resolve_log_level(log_level: str) -> int:
    """Convert a level name to its numeric logging level.

    Args:
        log_level: Level name, case-insensitive

    Returns:
        Numeric logging level

    Raises:
        ValueError: If the name is not a known level
    """
    normalized = log_level.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        valid = ", ".join(sorted(VALID_LOG_LEVELS))
        raise ValueError(f'Invalid log level "{log_level}". Valid options: {valid}')
    return logging.getLevelNamesMapping()[normalized]


def configure_logging(
    *,
    log_level: str = "WARNING",
    log_format: str = DEFAULT_LOG_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Calling this again replaces the handler installed by the previous call,
    so repeated configuration never duplicates output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``logging.Formatter`` format string
        stream: Destination stream (default: sys.stderr)

    Returns:
        The configured package logger

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = get_logger(__name__)
        >>> logger.debug("Estimator created")
    """
    level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(console_handler)

    # Records are handled here; the root logger should not print them again
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
