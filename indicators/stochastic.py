"""Stochastic oscillator."""

from __future__ import annotations

from .moving_average import SMA
from .window import RollingMinMax

DEFAULT_STOCHASTIC_LOOKBACK_PERIOD = 14
DEFAULT_STOCHASTIC_MOD_D_PERIODS = 3


class Stochastic:
    """%K of closes over a rolling window, with %D as its simple moving average."""

    def __init__(
        self,
        lookback_periods: int = DEFAULT_STOCHASTIC_LOOKBACK_PERIOD,
        mod_d_periods: int = DEFAULT_STOCHASTIC_MOD_D_PERIODS,
    ) -> None:
        self.lookback_periods = int(lookback_periods)
        self._mod_d = SMA(int(mod_d_periods))
        self._window = RollingMinMax(self.lookback_periods)
        self.k = 0.0
        self._count = 0
        self.ready = False

    def push(self, close: float) -> None:
        """Add a close; %K is computed once the lookback window is full."""
        self._window.push(close)
        if not self.ready:
            self._count += 1
            if self._count < self.lookback_periods:
                return

        low = self._window.min()
        high = self._window.max()
        self.k = 50.0 if high == low else (close - low) / (high - low) * 100
        self._mod_d.push(self.k)
        if not self.ready:
            self.ready = self._mod_d.ready

    def d(self) -> float:
        """Current %D: the moving average of %K."""
        return self._mod_d.value()