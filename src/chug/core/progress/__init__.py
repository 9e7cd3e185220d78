"""Progress estimation module for computing time-remaining estimates from completion ticks."""

from __future__ import annotations

from .window import TimestampWindow
from .estimator import (
    Chug,
    Clock,
    EtaReport,
    EtaStatus,
    ProgressEstimator,
)

__all__ = [
    "TimestampWindow",
    "Chug",
    "Clock",
    "EtaReport",
    "EtaStatus",
    "ProgressEstimator",
]
