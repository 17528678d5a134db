"""Simple and exponential moving averages over a stream of values."""

from __future__ import annotations


class SMA:
    """Simple moving average over a fixed number of periods.

    Until the window has been filled once, missing slots count as zero.
    """

    def __init__(self, periods: int) -> None:
        periods = int(periods)
        if periods < 1:
            raise ValueError("periods must be at least 1")
        self.periods = periods
        self._values = [0.0] * periods
        self._index = 0
        self._sum = 0.0
        self.ready = False

    def push(self, value: float) -> bool:
        """Add a value; return True only on the tick the window first fills."""
        self._sum -= self._values[self._index]
        self._values[self._index] = value
        self._sum += value
        self._index = (self._index + 1) % self.periods
        if not self.ready and self._index == 0:
            self.ready = True
            return True
        return False

    def value(self) -> float:
        """Current average: the running sum divided by the period count."""
        return self._sum / self.periods


class EMA:
    """Exponential moving average seeded with the SMA of its first periods."""

    def __init__(self, periods: int) -> None:
        self._sma: SMA | None = SMA(periods)
        self.periods = int(periods)
        self.alpha = 2.0 / (self.periods + 1)
        self.prev = 0.0
        self.curr = 0.0
        self.ready = False

    def push(self, value: float) -> bool:
        """Add a value; return True only on the tick the average becomes ready."""
        if not self.ready:
            assert self._sma is not None
            if self._sma.push(value):
                seed = self._sma.value()
                self._sma = None
                self.ready = True
                self.prev = seed
                self.curr = seed
            return self.ready
        self.prev = self.curr
        self.curr = value * self.alpha + self.prev * (1 - self.alpha)
        return False

    def value(self) -> float:
        """Current average, zero until ready."""
        return self.curr