"""Fixed-capacity window of completion timestamps."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class TimestampWindow:
    """Leaky bucket holding the most recent ``capacity`` timestamps.

    Timestamps are kept oldest first. Once the window is full, every insert
    evicts exactly the oldest timestamp. A capacity of zero is legal and
    produces a window that discards everything it is given.
    """

    _timestamps: deque[int]
    _capacity: int

    def __init__(self, capacity: int) -> None:
        """Initialize an empty window.

        Args:
            capacity: Maximum number of timestamps to retain

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError("Window capacity cannot be negative")

        self._capacity = capacity
        self._timestamps = deque(maxlen=capacity)

    def insert(self, timestamp: int) -> None:
        """Append a timestamp, evicting the oldest one when full.

        Args:
            timestamp: Monotonic time point in nanoseconds
        """
        # deque(maxlen=...) drops from the left on overflow
        self._timestamps.append(timestamp)

    def items(self) -> tuple[int, ...]:
        """Return the retained timestamps, oldest first."""
        return tuple(self._timestamps)

    @property
    def capacity(self) -> int:
        """Maximum number of timestamps the window retains."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._timestamps) == self._capacity

    @property
    def oldest(self) -> int | None:
        return self._timestamps[0] if self._timestamps else None

    @property
    def newest(self) -> int | None:
        return self._timestamps[-1] if self._timestamps else None

    def __len__(self) -> int:
        return len(self._timestamps)

    def __iter__(self) -> Iterator[int]:
        return iter(self._timestamps)

    def __repr__(self) -> str:
        return f"TimestampWindow(capacity={self._capacity}, len={len(self._timestamps)})"
