"""Bollinger bands."""

from __future__ import annotations

import math

from .moving_average import SMA

DEFAULT_BOLLINGER_MULTIPLIER = 2
DEFAULT_BOLLINGER_LOOKBACK_PERIODS = 20


class BollingerBands:
    """Bands a multiple of the population standard deviation around an SMA."""

    def __init__(
        self,
        lookback_periods: int = DEFAULT_BOLLINGER_LOOKBACK_PERIODS,
        multiplier: float = DEFAULT_BOLLINGER_MULTIPLIER,
    ) -> None:
        self._price = SMA(int(lookback_periods))
        self._price_sq = SMA(int(lookback_periods))
        self.multiplier = multiplier
        self.std = 0.0
        self.ready = False

    def push(self, price: float) -> None:
        """Add a price; the deviation is updated from the tick after the window fills."""
        self._price.push(price)
        self._price_sq.push(price * price)
        if not self.ready:
            self.ready = self._price.ready
            return
        mean = self._price.value()
        # Rounding can push a zero variance slightly negative.
        variance = max(self._price_sq.value() - mean * mean, 0.0)
        self.std = math.sqrt(variance)

    def middle(self) -> float:
        """Moving average the bands are centred on."""
        return self._price.value()

    def lower(self) -> float:
        """Lower band."""
        return self._price.value() - self.std * self.multiplier

    def upper(self) -> float:
        """Upper band."""
        return self._price.value() + self.std * self.multiplier