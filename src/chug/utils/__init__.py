"""Shared utility modules.

This package provides:
- Pure formatting functions for presenting estimates
- Logging setup for applications embedding the estimator
"""

from chug.utils.formatting import (
    UNKNOWN_ETA,
    format_duration,
    format_eta,
    format_progress,
)
from chug.utils.logging import (
    configure_logging,
    get_logger,
    resolve_log_level,
)

__all__ = [
    # Formatting utilities
    "UNKNOWN_ETA",
    "format_duration",
    "format_eta",
    "format_progress",
    # Logging
    "configure_logging",
    "get_logger",
    "resolve_log_level",
]
