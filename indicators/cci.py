"""Commodity channel index."""

from __future__ import annotations

import math

from .moving_average import SMA

DEFAULT_CCI_SMA_PERIOD = 20

_LAMBERT_CONSTANT = 0.015


class CCI:
    """Commodity channel index over the typical price."""

    def __init__(self, sma_periods: int = DEFAULT_CCI_SMA_PERIOD) -> None:
        self._sma = SMA(sma_periods)
        self._mad = SMA(sma_periods)
        self.cci = 0.0
        self.ready = False

    def push(self, high: float, low: float, close: float) -> None:
        """Add one bar."""
        typical = (high + low + close) / 3
        self._sma.push(typical)
        if not self.ready:
            if not self._sma.ready:
                return
            self._mad.push(abs(typical - self._sma.value()))
            self.ready = self._mad.ready
            return
        mean = self._sma.value()
        self._mad.push(abs(typical - mean))
        deviation = typical - mean
        denominator = _LAMBERT_CONSTANT * self._mad.value()
        if denominator == 0:
            self.cci = math.nan if deviation == 0 else math.copysign(math.inf, deviation)
        else:
            self.cci = deviation / denominator

    def value(self) -> float:
        """Current index value, zero until computed."""
        return self.cci