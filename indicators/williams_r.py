"""Williams %R."""

from __future__ import annotations

from .window import RollingMinMax

DEFAULT_WILLIAMS_R_LOOKBACK_PERIOD = 14


class WilliamsR:
    """Williams %R of closes over a rolling window, from -100 to 0."""

    def __init__(self, lookback_periods: int = DEFAULT_WILLIAMS_R_LOOKBACK_PERIOD) -> None:
        self.lookback_periods = int(lookback_periods)
        self._window = RollingMinMax(self.lookback_periods)
        self.r = 0.0
        self._count = 0
        self.ready = False

    def push(self, close: float) -> None:
        """Add a close; %R is computed from the tick after the window fills."""
        self._window.push(close)
        if not self.ready:
            self._count += 1
            if self._count >= self.lookback_periods:
                self.ready = True
            return

        low = self._window.min()
        high = self._window.max()
        self.r = -50.0 if high == low else (high - close) / (high - low) * -100