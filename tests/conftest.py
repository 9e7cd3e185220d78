"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator

import pytest

from chug.core.progress import ProgressEstimator
from tests.fixtures.clocks import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    """Provide a fake clock starting at one second."""
    return FakeClock()


@pytest.fixture
def make_estimator(clock: FakeClock) -> Callable[[int, int], ProgressEstimator]:
    """Build estimators driven by the shared fake clock."""

    def factory(window_capacity: int, total: int) -> ProgressEstimator:
        return ProgressEstimator(window_capacity, total, clock=clock)

    return factory


@pytest.fixture
def tick_every(clock: FakeClock) -> Callable[[ProgressEstimator, int, float], None]:
    """Tick an estimator ``count`` times, advancing the clock before each tick."""

    def run(estimator: ProgressEstimator, count: int, spacing_ms: float) -> None:
        for _ in range(count):
            clock.advance(spacing_ms)
            estimator.tick()

    return run


@pytest.fixture(autouse=True)
def clean_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after every test that configures it."""
    package_logger = logging.getLogger("chug")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    saved_propagate = package_logger.propagate
    try:
        yield package_logger
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        for handler in saved_handlers:
            package_logger.addHandler(handler)
        package_logger.setLevel(saved_level)
        package_logger.propagate = saved_propagate
