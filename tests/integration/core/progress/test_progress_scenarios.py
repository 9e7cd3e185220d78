"""Scenario tests driving the estimator through realistic batch runs."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

from chug.core.progress import EtaStatus, ProgressEstimator
from chug.utils.formatting import format_eta
from tests.fixtures.clocks import FakeClock

MakeEstimator = Callable[[int, int], ProgressEstimator]


class TestProgressScenarios:
    """Batch runs with changing work speed."""

    def test_estimate_follows_speed_change(self, make_estimator: MakeEstimator, clock: FakeClock) -> None:
        """Test the window forgets a slow start once enough fast units arrive."""
        estimator = make_estimator(5, 40)

        for _ in range(10):
            clock.advance(500)
            estimator.tick()
        slow = estimator.eta()

        for _ in range(5):
            clock.advance(50)
            estimator.tick()
        fast = estimator.eta()

        # 4 * 500 // 5 = 400 ms over 30 units, then 4 * 50 // 5 = 40 ms over 25 units
        assert slow == timedelta(milliseconds=12_000)
        assert fast == timedelta(milliseconds=1_000)

    def test_pause_inflates_then_recovers(self, make_estimator: MakeEstimator, clock: FakeClock) -> None:
        """Test a single long stall only matters while it is inside the window."""
        estimator = make_estimator(3, 20)

        for _ in range(3):
            clock.advance(100)
            estimator.tick()
        steady = estimator.eta()

        clock.advance(3_000)
        estimator.tick()
        stalled = estimator.eta()

        for _ in range(3):
            clock.advance(100)
            estimator.tick()
        recovered = estimator.eta()

        assert steady == timedelta(milliseconds=(200 // 3) * 17)
        assert stalled == timedelta(milliseconds=(3_100 // 3) * 16)
        assert recovered == timedelta(milliseconds=(200 // 3) * 13)

    def test_full_run_printed_like_the_tick_loop(self, make_estimator: MakeEstimator, clock: FakeClock) -> None:
        """Test a complete run: unknown, counting down, then unknown again."""
        estimator = make_estimator(10, 10)
        printed: list[str] = []
        statuses: list[EtaStatus] = []

        for _ in range(10):
            printed.append(format_eta(estimator.eta()))
            statuses.append(estimator.report().status)
            clock.advance(20)
            estimator.tick()

        printed.append(format_eta(estimator.eta()))
        statuses.append(estimator.report().status)

        assert printed[:2] == ["ETA: None", "ETA: None"]
        assert printed[-1] == "ETA: None"
        assert all(line != "ETA: None" for line in printed[2:-1])
        assert statuses[0] is EtaStatus.WARMING_UP
        assert set(statuses[2:-1]) == {EtaStatus.ESTIMATING}
        assert statuses[-1] is EtaStatus.COMPLETE
