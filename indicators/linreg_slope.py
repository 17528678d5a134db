"""Slope of a rolling least-squares regression line."""

from __future__ import annotations

import math

DEFAULT_LINEAR_REG_SLOPE_PERIODS = 14


class LinRegSlope:
    """Slope of the regression line through the last ``periods`` values.

    The values are placed at times 1 to ``periods``, oldest first.
    """

    def __init__(self, periods: int = DEFAULT_LINEAR_REG_SLOPE_PERIODS) -> None:
        periods = int(periods)
        if periods < 1:
            raise ValueError("periods must be at least 1")
        self.periods = periods
        self._prices = [0.0] * periods
        self._index = 0
        self._prices_sum = 0.0
        self._weighted_sum = 0.0
        times = range(1, periods + 1)
        self._time_sum = sum(times)
        self._time_sq_sum = sum(t * t for t in times)
        self.ready = False

    def push(self, value: float) -> bool:
        """Add a value; return True only on the tick the window first fills."""
        oldest = self._prices[self._index]
        if oldest != 0:
            # Every remaining value moves one time step back.
            self._weighted_sum -= self._prices_sum
            self._prices_sum -= oldest

        self._prices[self._index] = value
        self._prices_sum += value
        if self.ready:
            self._weighted_sum += value * self.periods
        self._index = (self._index + 1) % self.periods

        if not self.ready and self._index == 0:
            self._weighted_sum += sum(
                price * t for t, price in enumerate(self._prices, start=1)
            )
            self.ready = True
            return True
        return False

    def value(self) -> float:
        """Current slope; NaN when a single period leaves it undefined."""
        n = self.periods
        denominator = n * self._time_sq_sum - self._time_sum * self._time_sum
        if denominator == 0:
            return math.nan
        numerator = n * self._weighted_sum - self._time_sum * self._prices_sum
        return numerator / denominator