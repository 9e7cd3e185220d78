"""Pure formatting utilities for presenting estimates.

This module provides stateless formatting functions for turning estimator
output into human-readable strings. All functions are pure with no side
effects; the estimator itself never formats anything.
"""

from __future__ import annotations

from datetime import timedelta

# Time unit constants, in milliseconds
_SECOND_MS = 1000
_MINUTE_MS = _SECOND_MS * 60  # 60,000
_HOUR_MS = _MINUTE_MS * 60  # 3,600,000
_DAY_MS = _HOUR_MS * 24  # 86,400,000

UNKNOWN_ETA = "ETA: None"


def _whole_milliseconds(duration: timedelta) -> int:
    return duration // timedelta(milliseconds=1)


def format_eta(eta: timedelta | None) -> str:
    """Render an estimate the way the tick loop prints it.

    Args:
        eta: Estimated time remaining, or None when no estimate is available

    Returns:
        ``"ETA: <seconds>.<millis>s"`` with milliseconds zero-padded to three
        digits, or ``"ETA: None"``.

    Examples:
        >>> format_eta(timedelta(milliseconds=4950))
        'ETA: 4.950s'
        >>> format_eta(timedelta(seconds=12, milliseconds=7))
        'ETA: 12.007s'
        >>> format_eta(None)
        'ETA: None'
    """
    if eta is None:
        return UNKNOWN_ETA

    total_ms = _whole_milliseconds(eta)
    if total_ms < 0:
        msg = "eta must be non-negative"
        raise ValueError(msg)

    seconds, millis = divmod(total_ms, _SECOND_MS)
    return f"ETA: {seconds}.{millis:03d}s"


def format_duration(duration: timedelta) -> str:
    """Convert a duration to a compact human-readable string.

    Shows the two most significant units once the duration reaches a
    minute, and milliseconds only for sub-second values.

    Args:
        duration: Duration to format (must be non-negative)

    Returns:
        - Days: "Xd Yh"
        - Hours: "Xh Ym"
        - Minutes: "Xm Ys"
        - Seconds: "Xs"
        - Below one second: "Xms"

    Examples:
        >>> format_duration(timedelta(milliseconds=450))
        '450ms'
        >>> format_duration(timedelta(seconds=90))
        '1m 30s'
        >>> format_duration(timedelta(hours=25))
        '1d 1h'

    Note:
        Rounds down to whole units and omits a trailing zero unit,
        so 3600 seconds is "1h" rather than "1h 0m".
    """
    total_ms = _whole_milliseconds(duration)
    if total_ms < 0:
        msg = "duration must be non-negative"
        raise ValueError(msg)

    if total_ms < _SECOND_MS:
        return f"{total_ms}ms"

    if total_ms >= _DAY_MS:
        days, rest = divmod(total_ms, _DAY_MS)
        hours = rest // _HOUR_MS
        return f"{days}d {hours}h" if hours else f"{days}d"

    if total_ms >= _HOUR_MS:
        hours, rest = divmod(total_ms, _HOUR_MS)
        minutes = rest // _MINUTE_MS
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"

    if total_ms >= _MINUTE_MS:
        minutes, rest = divmod(total_ms, _MINUTE_MS)
        seconds = rest // _SECOND_MS
        return f"{minutes}m {seconds}s" if seconds else f"{minutes}m"

    return f"{total_ms // _SECOND_MS}s"


def format_progress(completed: int, total: int) -> str:
    """Render a unit count as ``completed/total``.

    Examples:
        >>> format_progress(3, 10)
        '3/10'
    """
    if completed < 0 or total < 0:
        msg = "counts must be non-negative"
        raise ValueError(msg)
    return f"{completed}/{total}"
