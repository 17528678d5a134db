"""Average true range."""

from __future__ import annotations

from .moving_average import EMA

DEFAULT_ATR_LOOKBACK_PERIOD = 14


class ATR:
    """Average true range, smoothed with an exponential moving average."""

    def __init__(self, lookback_periods: int = DEFAULT_ATR_LOOKBACK_PERIOD) -> None:
        self._ema = EMA(int(lookback_periods))
        self.prev_close: float | None = None
        self.ready = False

    def push(self, high: float, low: float, close: float) -> None:
        """Add one bar."""
        true_range = high - low
        if self.prev_close is not None:
            true_range = max(
                true_range,
                abs(high - self.prev_close),
                abs(low - self.prev_close),
            )
        self._ema.push(true_range)
        self.prev_close = close
        if not self.ready:
            self.ready = self._ema.ready

    def value(self) -> float:
        """Current average true range, zero until ready."""
        return self._ema.value()