"""Relative strength index."""

from __future__ import annotations

from .moving_average import SMA

DEFAULT_RSI_PERIODS = 14


class RSI:
    """Relative strength index of per-bar relative changes, Wilder-smoothed."""

    def __init__(self, periods: int = DEFAULT_RSI_PERIODS) -> None:
        self.periods = int(periods)
        self._gains: SMA | None = SMA(self.periods)
        self._losses: SMA | None = SMA(self.periods)
        self.avg_gain = 0.0
        self.avg_loss = 0.0
        self.value = 0.0
        self.ready = False

    def push(self, open: float, close: float) -> None:
        """Add one bar; the index is computed from the tick the averages fill."""
        if open == 0:
            raise ValueError("open price must be non-zero")
        change = (close - open) / open
        gain = change if change > 0 else 0.0
        loss = 0.0 if change > 0 else -change

        if not self.ready:
            assert self._gains is not None and self._losses is not None
            self._gains.push(gain)
            self._losses.push(loss)
            if not (self._gains.ready and self._losses.ready):
                return
            self.avg_gain = self._gains.value()
            self.avg_loss = self._losses.value()
            self._gains = None
            self._losses = None
            self.ready = True

        n = self.periods
        self.avg_gain = (self.avg_gain * (n - 1) + gain) / n
        self.avg_loss = (self.avg_loss * (n - 1) + loss) / n

        if self.avg_loss == 0.0:
            self.value = 100.0
        else:
            self.value = 100.0 - (100.0 / (1 + (self.avg_gain / self.avg_loss)))