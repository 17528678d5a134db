"""Feed candlesticks from a CSV file through every indicator and time it."""

from __future__ import annotations

import argparse
import math
import re
import sys
import time
from collections.abc import Iterator
from dataclasses import dataclass, replace
from pathlib import Path

from .atr import ATR, DEFAULT_ATR_LOOKBACK_PERIOD
from .bollinger import (
    DEFAULT_BOLLINGER_LOOKBACK_PERIODS,
    DEFAULT_BOLLINGER_MULTIPLIER,
    BollingerBands,
)
from .cci import CCI, DEFAULT_CCI_SMA_PERIOD
from .keltner import (
    DEFAULT_KELTNER_ATR_PERIOD,
    DEFAULT_KELTNER_EMA_PERIOD,
    DEFAULT_KELTNER_MULTIPLIER,
    KeltnerChannel,
)
from .linreg_slope import DEFAULT_LINEAR_REG_SLOPE_PERIODS, LinRegSlope
from .macd import (
    DEFAULT_MACD_FIRST_EMA_PERIODS,
    DEFAULT_MACD_SECOND_EMA_PERIODS,
    DEFAULT_MACD_SIGNAL_PERIODS,
    MACD,
)
from .mfi import DEFAULT_MFI_LOOKBACK_PERIOD, MFI
from .moving_average import EMA, SMA
from .obv import OBV
from .rsi import DEFAULT_RSI_PERIODS, RSI
from .stochastic import (
    DEFAULT_STOCHASTIC_LOOKBACK_PERIOD,
    DEFAULT_STOCHASTIC_MOD_D_PERIODS,
    Stochastic,
)
from .supertrend import DEFAULT_SUPERTREND_LOOKBACK, DEFAULT_SUPERTREND_MULTIPLIER, SuperTrend
from .williams_r import DEFAULT_WILLIAMS_R_LOOKBACK_PERIOD, WilliamsR

DATA_FILE = "backtest_data.csv"
MOVING_AVERAGE_PERIODS = 50

# Column positions in a data row.
_COLUMNS = {
    0: "open_time",
    1: "open",
    2: "high",
    3: "low",
    4: "close",
    5: "volume",
    6: "close_time",
}
_TIME_FIELDS = {"open_time", "close_time"}

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*\+?(\d+)")


@dataclass(frozen=True)
class Kline:
    """One candlestick: prices, volume and its open and close times."""

    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0
    open_time: int = 0
    close_time: int = 0


def _parse_float(token: str) -> float:
    """Parse the leading number of a token, or 0.0 when it has none."""
    try:
        return float(token)
    except ValueError:
        match = _FLOAT_PREFIX.match(token)
        return float(match.group(0)) if match else 0.0


def _parse_int(token: str) -> int:
    """Parse the leading unsigned integer of a token, or 0 when it has none."""
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else 0


def read_klines(path: str | Path) -> Iterator[Kline]:
    """Yield one kline per non-empty CSV row.

    Empty fields are skipped, so later fields shift left; a field a row does not
    supply keeps the value of the previous row.
    """
    current = Kline()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            tokens = [token for token in line.rstrip("\n").split(",") if token]
            if not tokens:
                continue
            changes: dict[str, float | int] = {}
            for position, token in enumerate(tokens):
                name = _COLUMNS.get(position)
                if name is None:
                    continue
                changes[name] = _parse_int(token) if name in _TIME_FIELDS else _parse_float(token)
            current = replace(current, **changes)
            yield current


class IndicatorSuite:
    """Every indicator in the package with its default settings, fed bar by bar."""

    def __init__(self) -> None:
        self.sma = SMA(MOVING_AVERAGE_PERIODS)
        self.ema = EMA(MOVING_AVERAGE_PERIODS)
        self.macd = MACD(
            DEFAULT_MACD_SIGNAL_PERIODS,
            DEFAULT_MACD_FIRST_EMA_PERIODS,
            DEFAULT_MACD_SECOND_EMA_PERIODS,
        )
        self.rsi = RSI(DEFAULT_RSI_PERIODS)
        self.stochastic = Stochastic(
            DEFAULT_STOCHASTIC_LOOKBACK_PERIOD, DEFAULT_STOCHASTIC_MOD_D_PERIODS
        )
        self.williams_r = WilliamsR(DEFAULT_WILLIAMS_R_LOOKBACK_PERIOD)
        self.mfi = MFI(DEFAULT_MFI_LOOKBACK_PERIOD)
        self.bollinger = BollingerBands(
            DEFAULT_BOLLINGER_LOOKBACK_PERIODS, DEFAULT_BOLLINGER_MULTIPLIER
        )
        self.atr = ATR(DEFAULT_ATR_LOOKBACK_PERIOD)
        self.supertrend = SuperTrend(DEFAULT_SUPERTREND_LOOKBACK, DEFAULT_SUPERTREND_MULTIPLIER)
        self.keltner = KeltnerChannel(
            DEFAULT_KELTNER_EMA_PERIOD, DEFAULT_KELTNER_ATR_PERIOD, DEFAULT_KELTNER_MULTIPLIER
        )
        self.cci = CCI(DEFAULT_CCI_SMA_PERIOD)
        self.linreg_slope = LinRegSlope(DEFAULT_LINEAR_REG_SLOPE_PERIODS)
        self.obv = OBV()

    def push(self, kline: Kline) -> dict[str, object]:
        """Feed one bar to every indicator and return their current readings."""
        avg = (kline.open + kline.close) / 2

        self.sma.push(avg)
        self.ema.push(avg)
        self.macd.push(avg)
        self.rsi.push(kline.open, kline.close)
        self.stochastic.push(kline.close)
        self.williams_r.push(kline.close)
        self.mfi.push(kline.high, kline.low, kline.close, kline.volume)
        self.bollinger.push(avg)
        self.atr.push(kline.high, kline.low, kline.close)
        self.supertrend.push(kline.high, kline.low, kline.close)
        self.keltner.push(kline.high, kline.low, kline.close)
        self.cci.push(kline.high, kline.low, kline.close)
        self.linreg_slope.push(kline.close)
        self.obv.push(kline.open, kline.close, kline.volume)

        return {
            "sma": self.sma.value(),
            "ema": self.ema.value(),
            "macd": self.macd.macd,
            "signal": self.macd.signal(),
            "histogram": self.macd.histogram,
            "rsi": self.rsi.value,
            "k": self.stochastic.k,
            "d": self.stochastic.d(),
            "williams_r": self.williams_r.r,
            "mfi": self.mfi.value(),
            "bollinger_lower": self.bollinger.lower(),
            "bollinger_upper": self.bollinger.upper(),
            "atr": self.atr.value(),
            "supertrend": self.supertrend.value,
            "trend": self.supertrend.trend,
            "keltner_lower": self.keltner.lower(),
            "keltner_middle": self.keltner.middle(),
            "keltner_upper": self.keltner.upper(),
            "cci": self.cci.value(),
            "linreg_slope": self.linreg_slope.value(),
            "obv": self.obv.value,
        }


def main(argv: list[str] | None = None) -> int:
    """Run every indicator over a data file and report the time spent."""
    parser = argparse.ArgumentParser(
        description="Time every indicator over a CSV file of candlesticks."
    )
    parser.add_argument("data_file", nargs="?", default=DATA_FILE)
    args = parser.parse_args(argv)

    suite = IndicatorSuite()
    count = 0
    elapsed = 0.0
    try:
        for kline in read_klines(args.data_file):
            start = time.process_time()
            suite.push(kline)
            elapsed += time.process_time() - start
            count += 1
    except OSError as error:
        print(f"Error opening file: {error.strerror or error}", file=sys.stderr)
        return 1

    average = elapsed / count if count else math.nan
    print(
        f"Total data points: {count}.\n"
        f"Total time taken: {elapsed:f}s.\n"
        f"Average time per iteration: {average:f}s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())