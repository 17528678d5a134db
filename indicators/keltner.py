"""Keltner channel."""

from __future__ import annotations

from .atr import ATR
from .moving_average import EMA

DEFAULT_KELTNER_EMA_PERIOD = 20
DEFAULT_KELTNER_ATR_PERIOD = 10
DEFAULT_KELTNER_MULTIPLIER = 2


class KeltnerChannel:
    """Channel around an EMA of closes, a multiple of the ATR wide on each side."""

    def __init__(
        self,
        ema_periods: int = DEFAULT_KELTNER_EMA_PERIOD,
        atr_periods: int = DEFAULT_KELTNER_ATR_PERIOD,
        multiplier: float = DEFAULT_KELTNER_MULTIPLIER,
    ) -> None:
        self._ema = EMA(ema_periods)
        self._atr = ATR(atr_periods)
        self.multiplier = multiplier
        self.ready = False

    def push(self, high: float, low: float, close: float) -> None:
        """Add one bar."""
        self._ema.push(close)
        self._atr.push(high, low, close)
        if not self.ready:
            self.ready = self._ema.ready and self._atr.ready

    def middle(self) -> float:
        """Middle line: the EMA of closes."""
        return self._ema.value()

    def upper(self) -> float:
        """Upper line."""
        return self._ema.value() + self.multiplier * self._atr.value()

    def lower(self) -> float:
        """Lower line."""
        return self._ema.value() - self.multiplier * self._atr.value()