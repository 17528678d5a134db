"""Money flow index."""

from __future__ import annotations

DEFAULT_MFI_LOOKBACK_PERIOD = 14


class MFI:
    """Money flow index over a rolling window of signed raw money flows."""

    def __init__(self, lookback_periods: int = DEFAULT_MFI_LOOKBACK_PERIOD) -> None:
        lookback_periods = int(lookback_periods)
        if lookback_periods < 1:
            raise ValueError("lookback_periods must be at least 1")
        self.lookback_periods = lookback_periods
        self._flows = [0.0] * lookback_periods
        self._ptr = 0
        self.positive_sum = 0.0
        self.negative_sum = 0.0
        self.prev_tp = 0.0

    def push(self, high: float, low: float, close: float, volume: float) -> None:
        """Add one bar."""
        typical = (high + low + close) / 3
        outgoing = self._flows[self._ptr]
        if outgoing > 0:
            self.positive_sum -= outgoing
        else:
            # Negative flows are stored negated, so adding removes them.
            self.negative_sum += outgoing

        raw_flow = typical * volume
        if typical == self.prev_tp:
            self._flows[self._ptr] = 0.0
        elif typical > self.prev_tp:
            self.positive_sum += raw_flow
            self._flows[self._ptr] = raw_flow
        else:
            self.negative_sum += raw_flow
            self._flows[self._ptr] = -raw_flow

        self.prev_tp = typical
        self._ptr = (self._ptr + 1) % self.lookback_periods

    def value(self) -> float:
        """Current index, 100 while there is no negative flow."""
        if self.negative_sum == 0:
            return 100.0
        return 100 - (100 / (1 + (self.positive_sum / self.negative_sum)))