"""Time-remaining estimation from a rolling window of completion ticks."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from .window import TimestampWindow

logger = logging.getLogger(__name__)

# Nanoseconds per millisecond; intervals are truncated to whole milliseconds
_NS_PER_MS = 1_000_000

# Largest duration a timedelta can hold, in whole milliseconds
_MAX_ETA_MS = (timedelta.max.days * 86_400 + timedelta.max.seconds) * 1000 + timedelta.max.microseconds // 1000

Clock = Callable[[], int]


class EtaStatus(Enum):
    """Observable regimes of an estimator."""
    WARMING_UP = "warming_up"
    ESTIMATING = "estimating"
    COMPLETE = "complete"
    OVERRUN = "overrun"


@dataclass(frozen=True)
class EtaReport:
    """Estimate together with the reason it is (or is not) available."""
    status: EtaStatus
    eta: timedelta | None
    completed: int
    total: int


class ProgressEstimator:
    """Estimate the time remaining until ``total`` units of work are done.

    The caller invokes :meth:`tick` once per completed unit. The estimate is
    the mean gap between the most recent ``window_capacity`` ticks multiplied
    by the number of units still outstanding.

    Example:
        >>> estimator = ProgressEstimator(10, 100)
        >>> for _ in range(100):
        ...     do_work()
        ...     estimator.tick()
        ...     print(format_eta(estimator.eta()))
    """

    _window: TimestampWindow
    _completed: int
    _total: int
    _clock: Clock
    _last_status: EtaStatus

    def __init__(
        self,
        window_capacity: int,
        total: int,
        *,
        clock: Clock = time.monotonic_ns,
    ) -> None:
        """Initialize the estimator.

        Args:
            window_capacity: Number of most recent ticks to average over
            total: Total number of units of work to be completed
            clock: Monotonic clock returning integer nanoseconds

        Raises:
            ValueError: If window_capacity or total is negative
        """
        if total < 0:
            raise ValueError("Total work cannot be negative")

        self._window = TimestampWindow(window_capacity)
        self._completed = 0
        self._total = total
        self._clock = clock
        self._last_status = self._classify()

    def tick(self) -> None:
        """Record that one unit of work has been completed."""
        now = self._clock()
        self._completed += 1
        self._window.insert(now)

        status = self._classify()
        if status is not self._last_status:
            logger.debug(
                "Estimator moved from %s to %s at %d/%d",
                self._last_status.value,
                status.value,
                self._completed,
                self._total,
            )
            self._last_status = status

    def eta(self) -> timedelta | None:
        """Estimate the time remaining until the work is completed.

        Returns:
            None while fewer than two ticks are in the window, once the work
            is complete, or after it has overrun ``total``. Otherwise the
            estimated remaining time, in whole milliseconds.
        """
        mean_ms = self.mean_interval_ms()
        if mean_ms is None:
            return None

        if self._completed > self._total:
            return None

        remaining = self._total - self._completed
        if remaining == 0:
            return None

        return self._to_duration(mean_ms * remaining)

    def report(self) -> EtaReport:
        """Return the current estimate along with the regime that produced it."""
        return EtaReport(
            status=self._classify(),
            eta=self.eta(),
            completed=self._completed,
            total=self._total,
        )

    def mean_interval_ms(self) -> int | None:
        """Mean gap between ticks in the window, in whole milliseconds.

        The summed gaps are divided by the number of timestamps held, not by
        the number of gaps, so the result is ``(n - 1) / n`` of the true mean.
        Existing consumers depend on these numbers, so the divisor stays.

        Returns:
            None if the window holds fewer than two timestamps
        """
        count = len(self._window)
        if count < 2:
            return None

        total_ms = 0
        previous: int | None = None
        for timestamp in self._window:
            if previous is not None:
                # A clock that steps backwards contributes a zero-length gap
                total_ms += max(timestamp - previous, 0) // _NS_PER_MS
            previous = timestamp

        return total_ms // count

    @property
    def completed(self) -> int:
        """Units of work completed so far."""
        return self._completed

    @property
    def total(self) -> int:
        """Units of work expected in total."""
        return self._total

    @property
    def remaining(self) -> int:
        """Units of work left, never negative."""
        return max(self._total - self._completed, 0)

    @property
    def window(self) -> TimestampWindow:
        return self._window

    @property
    def is_finished(self) -> bool:
        """True once completed has reached or passed total."""
        return self._completed >= self._total

    def _classify(self) -> EtaStatus:
        if self._completed > self._total:
            return EtaStatus.OVERRUN
        if self._completed == self._total:
            return EtaStatus.COMPLETE
        if len(self._window) < 2:
            return EtaStatus.WARMING_UP
        return EtaStatus.ESTIMATING

    def _to_duration(self, eta_ms: int) -> timedelta:
        if eta_ms > _MAX_ETA_MS:
            logger.warning(
                "Estimate of %d ms exceeds the largest representable duration, saturating",
                eta_ms,
            )
            return timedelta.max
        return timedelta(milliseconds=eta_ms)

    def __repr__(self) -> str:
        return (
            f"ProgressEstimator(window_capacity={self._window.capacity}, "
            f"completed={self._completed}, total={self._total})"
        )


# Short name used by the command line and in examples
Chug = ProgressEstimator
