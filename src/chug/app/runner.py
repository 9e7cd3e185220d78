"""Loops that drive a ProgressEstimator for the command line."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import TextIO

from chug.core.progress import ProgressEstimator
from chug.utils.formatting import UNKNOWN_ETA, format_duration, format_eta, format_progress

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]
Sleep = Callable[[float], None]


def _print_line(line: str) -> None:
    print(line, flush=True)


class DemoRunner:
    """Simulated work loop printing an ETA before every unit.

    Each iteration prints the current estimate, sleeps for the configured
    interval to stand in for real work, and then ticks.
    """

    estimator: ProgressEstimator
    interval_ms: int

    def __init__(
        self,
        estimator: ProgressEstimator,
        interval_ms: int = 50,
        *,
        echo: Echo = _print_line,
        sleep: Sleep = time.sleep,
    ) -> None:
        if interval_ms < 0:
            raise ValueError("Interval cannot be negative")

        self.estimator = estimator
        self.interval_ms = interval_ms
        self._echo = echo
        self._sleep = sleep

    def run(self) -> ProgressEstimator:
        """Run one iteration per unit of total work.

        Returns:
            The estimator, after ``total`` ticks
        """
        total = self.estimator.total
        logger.info("Starting demo: %d units, %d ms each", total, self.interval_ms)

        for _ in range(total):
            self._echo(format_eta(self.estimator.eta()))
            self._sleep(self.interval_ms / 1000)
            self.estimator.tick()

        logger.info("Demo finished after %d units", self.estimator.completed)
        return self.estimator


class StreamTracker:
    """Count lines of a stream as completed units and report the ETA.

    Every line read is one tick. Status lines go to ``status_stream`` so that
    echoed input on stdout stays clean for the next command in a pipeline.
    """

    estimator: ProgressEstimator
    echo_input: bool
    human: bool

    def __init__(
        self,
        estimator: ProgressEstimator,
        *,
        echo_input: bool = False,
        human: bool = False,
        output_stream: TextIO | None = None,
        status_stream: TextIO | None = None,
    ) -> None:
        self.estimator = estimator
        self.echo_input = echo_input
        self.human = human
        self._output = output_stream if output_stream is not None else sys.stdout
        self._status = status_stream if status_stream is not None else sys.stderr

    def status_line(self) -> str:
        """Render progress and the current estimate as one line."""
        progress = format_progress(self.estimator.completed, self.estimator.total)
        return f"[{progress}] {self._render(self.estimator.eta())}"

    def track(self, lines: Iterable[str]) -> int:
        """Tick once per line.

        Args:
            lines: Input lines, each one completed unit

        Returns:
            Number of lines consumed
        """
        consumed = 0
        for line in lines:
            self.estimator.tick()
            consumed += 1

            if self.echo_input:
                _ = self._output.write(line if line.endswith("\n") else f"{line}\n")
                self._output.flush()

            _ = self._status.write(f"{self.status_line()}\n")
            self._status.flush()

        if self.estimator.completed > self.estimator.total:
            logger.warning(
                "Read %d units but only %d were expected",
                self.estimator.completed,
                self.estimator.total,
            )
        return consumed

    def _render(self, eta: timedelta | None) -> str:
        if not self.human:
            return format_eta(eta)
        if eta is None:
            return UNKNOWN_ETA
        return f"ETA: {format_duration(eta)}"
