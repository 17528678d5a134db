# indicators

Streaming technical-analysis indicators. Each indicator keeps a small amount of
state and is fed one bar at a time with `push(...)`; its readings can be taken
right after each push. Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Indicators

| Module                      | Class            | Fed with                         | Readings                                        |
|-----------------------------|------------------|----------------------------------|-------------------------------------------------|
| `indicators.moving_average` | `SMA`, `EMA`     | `push(value)`                    | `value()`                                       |
| `indicators.macd`           | `MACD`           | `push(value)`                    | `macd`, `histogram`, `signal()`                 |
| `indicators.rsi`            | `RSI`            | `push(open, close)`              | `value`                                         |
| `indicators.stochastic`     | `Stochastic`     | `push(close)`                    | `k`, `d()`                                      |
| `indicators.williams_r`     | `WilliamsR`      | `push(close)`                    | `r`                                             |
| `indicators.mfi`            | `MFI`            | `push(high, low, close, volume)` | `value()`                                       |
| `indicators.bollinger`      | `BollingerBands` | `push(price)`                    | `lower()`, `middle()`, `upper()`, `std`         |
| `indicators.atr`            | `ATR`            | `push(high, low, close)`         | `value()`                                       |
| `indicators.supertrend`     | `SuperTrend`     | `push(high, low, close)`         | `value`, `trend` (a `Trend` member)             |
| `indicators.keltner`        | `KeltnerChannel` | `push(high, low, close)`         | `lower()`, `middle()`, `upper()`                |
| `indicators.cci`            | `CCI`            | `push(high, low, close)`         | `value()`                                       |
| `indicators.linreg_slope`   | `LinRegSlope`    | `push(value)`                    | `value()`                                       |
| `indicators.obv`            | `OBV`            | `push(open, close, volume)`      | `value`                                         |

Every indicator except `MFI` has a `ready` attribute that becomes `True` once
its warm-up is over. `SMA.push`, `EMA.push` and `LinRegSlope.push` return
`True` only on the tick they first become ready.

`Trend` has the members `UP`, `DOWN` and `UNDEFINED`; a `SuperTrend` reports
`UNDEFINED` until its average true range is ready.

`indicators.window.RollingMinMax` tracks the minimum and maximum of the last
`size` values in constant amortised time through `push(value)`, `min()` and
`max()`; `min()` and `max()` raise `ValueError` on an empty window.
`Stochastic` and `WilliamsR` are built on it.

### Warm-up and edge cases

- `SMA` divides its running sum by `periods` from the first push, so until the
  window has filled the missing slots count as zero.
- `EMA` reads zero until it is seeded with the simple average of its first
  `periods` values.
- `MACD` starts its MACD line on the tick after both of its averages are
  ready; `BollingerBands` updates its deviation from the tick after its window
  fills; `WilliamsR` computes `r` from the tick after its window fills.
- `RSI.push` raises `ValueError` when `open` is zero, since it works on the
  relative change of each bar.
- `MFI.value()` is 100 while there is no negative money flow.
- `CCI` gives `nan` or an infinity when the mean absolute deviation is zero.
- `LinRegSlope.value()` is `nan` for a single period.
- `SMA`, `RollingMinMax`, `LinRegSlope` and `MFI` raise `ValueError` for a
  period count below 1.

## Example

```python
from indicators.moving_average import SMA, EMA
from indicators.bollinger import BollingerBands
from indicators.keltner import KeltnerChannel

sma = SMA(5)
ema = EMA(5)
bands = BollingerBands(20, 2)
keltner = KeltnerChannel(20, 10, 2)

for high, low, close in bars:
    sma.push(close)
    ema.push(close)
    bands.push(close)
    keltner.push(high, low, close)

print(sma.value(), ema.value())
print(bands.lower(), bands.upper())
print(keltner.lower(), keltner.middle(), keltner.upper())
```

## Running every indicator over a CSV file

`indicators.benchmark` reads candlesticks from a CSV file whose columns are
open time, open, high, low, close, volume and close time, with no header row.
`read_klines(path)` yields each non-empty row as a frozen `Kline` record.
Empty fields are skipped, so later fields shift left, and a field a row does
not supply keeps its value from the previous row.

`IndicatorSuite` holds every indicator with its default settings, plus a
50-period `SMA` and `EMA`. `IndicatorSuite.push(kline)` feeds one bar to all of
them (the moving averages, `MACD` and `BollingerBands` take the mean of open
and close) and returns a dictionary of their current readings.

```
indicators-benchmark [data_file]
```

The command reads `backtest_data.csv` from the current directory unless a file
is given, and prints the number of bars processed, the processor time spent
updating the indicators and the average time per bar. If the file cannot be
opened it prints an error and exits with status 1.

## What it does not do

The package computes indicators from bars you give it. It does not fetch
market data, place orders, draw charts or store results; the benchmark command
only times the indicators and prints no readings.