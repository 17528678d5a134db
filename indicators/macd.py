"""Moving average convergence divergence."""

from __future__ import annotations

from .moving_average import EMA

DEFAULT_MACD_FIRST_EMA_PERIODS = 12
DEFAULT_MACD_SECOND_EMA_PERIODS = 26
DEFAULT_MACD_SIGNAL_PERIODS = 9


class MACD:
    """MACD line, signal line and histogram."""

    def __init__(
        self,
        signal_periods: int = DEFAULT_MACD_SIGNAL_PERIODS,
        fast_ema_periods: int = DEFAULT_MACD_FIRST_EMA_PERIODS,
        slow_ema_periods: int = DEFAULT_MACD_SECOND_EMA_PERIODS,
    ) -> None:
        self._signal = EMA(int(signal_periods))
        self._fast = EMA(int(fast_ema_periods))
        self._slow = EMA(int(slow_ema_periods))
        self.macd = 0.0
        self.histogram = 0.0
        self.ready = False
        self.ema_ready = False

    def push(self, value: float) -> None:
        """Add a value; the MACD line starts on the tick after both EMAs are ready."""
        self._fast.push(value)
        self._slow.push(value)
        if not self.ema_ready:
            self.ema_ready = self._fast.ready and self._slow.ready
            return
        self.macd = self._fast.value() - self._slow.value()
        self._signal.push(self.macd)
        self.histogram = self.macd - self._signal.value()
        if not self.ready:
            self.ready = self._signal.ready

    def signal(self) -> float:
        """Current signal line value."""
        return self._signal.value()