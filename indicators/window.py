"""Rolling minimum and maximum over a fixed-size window."""

from __future__ import annotations

from collections import deque


class RollingMinMax:
    """Tracks the minimum and maximum of the last ``size`` values in O(1) amortised."""

    def __init__(self, size: int) -> None:
        size = int(size)
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._buffer = [0.0] * size
        self._mins: deque[float] = deque()
        self._maxs: deque[float] = deque()
        self.count = 0

    def push(self, value: float) -> None:
        """Add a value, dropping the oldest once the window is full."""
        if self.count:
            while self._mins and self._mins[-1] > value:
                self._mins.pop()
            while self._maxs and self._maxs[-1] < value:
                self._maxs.pop()

        pos = self.count % self.size
        if self.count >= self.size:
            outgoing = self._buffer[pos]
            if self._mins and self._mins[0] == outgoing:
                self._mins.popleft()
            if self._maxs and self._maxs[0] == outgoing:
                self._maxs.popleft()

        self._buffer[pos] = value
        self._maxs.append(value)
        self._mins.append(value)
        self.count += 1

    def min(self) -> float:
        """Smallest value in the current window."""
        if not self._mins:
            raise ValueError("window is empty")
        return self._mins[0]

    def max(self) -> float:
        """Largest value in the current window."""
        if not self._maxs:
            raise ValueError("window is empty")
        return self._maxs[0]