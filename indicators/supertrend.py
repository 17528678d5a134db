"""SuperTrend indicator."""

from __future__ import annotations

from enum import IntEnum

from .atr import ATR

DEFAULT_SUPERTREND_MULTIPLIER = 3
DEFAULT_SUPERTREND_LOOKBACK = 14


class Trend(IntEnum):
    """Direction reported by the SuperTrend."""

    UP = 0
    DOWN = 1
    UNDEFINED = 2


class SuperTrend:
    """Trailing band around the bar midpoint, a multiple of the ATR away."""

    def __init__(
        self,
        lookback_periods: int = DEFAULT_SUPERTREND_LOOKBACK,
        multiplier: float = DEFAULT_SUPERTREND_MULTIPLIER,
    ) -> None:
        self._atr = ATR(lookback_periods)
        self.multiplier = multiplier
        self.value = 0.0
        self.trend = Trend.UNDEFINED
        self.prev_close = 0.0
        self.prev_upper = 0.0
        self.prev_lower = 0.0
        self.ready = False

    def _bands(self, high: float, low: float) -> tuple[float, float]:
        mid = (high + low) / 2
        width = self.multiplier * self._atr.value()
        return mid + width, mid - width

    def push(self, high: float, low: float, close: float) -> None:
        """Add one bar."""
        if not self.ready:
            self.prev_close = close
            self._atr.push(high, low, close)
            if self._atr.ready:
                upper, lower = self._bands(high, low)
                if close > upper:
                    self.trend = Trend.UP
                    self.value = lower
                else:
                    self.trend = Trend.DOWN
                    self.value = upper
                self.ready = True
            return

        upper, lower = self._bands(high, low)
        if upper < self.prev_upper or self.prev_close > self.prev_upper:
            new_upper = upper
        else:
            new_upper = self.prev_upper
        if lower > self.prev_lower or self.prev_close < self.prev_lower:
            new_lower = lower
        else:
            new_lower = self.prev_lower

        if self.trend == Trend.DOWN:
            self.trend = Trend.UP if close > new_upper else Trend.DOWN
        else:
            self.trend = Trend.DOWN if close < new_lower else Trend.UP
        self.value = new_lower if self.trend == Trend.UP else new_upper

        self.prev_close = close
        self.prev_lower = new_lower
        self.prev_upper = new_upper
        self._atr.push(high, low, close)