import statistics

import pytest

from indicators.bollinger import BollingerBands


def test_bands_collapse_before_deviation_is_known():
    bands = BollingerBands(3, 2)
    for p in (1.0, 2.0, 3.0):
        bands.push(p)
    assert bands.ready is True
    assert bands.lower() == bands.upper()
    assert bands.std == 0.0


def test_width_matches_population_stdev():
    bands = BollingerBands(3, 2)
    prices = [1.0, 2.0, 3.0, 4.0, 9.0, 5.0]
    for i, p in enumerate(prices, start=1):
        bands.push(p)
        if i > 3:
            expected = statistics.pstdev(prices[i - 3:i])
            assert bands.upper() - bands.lower() == pytest.approx(4 * expected)


def test_bands_symmetric_about_middle():
    bands = BollingerBands(4, 2.5)
    for p in (10.0, 12.0, 9.0, 15.0, 11.0, 13.0):
        bands.push(p)
    mid = bands.middle()
    assert bands.upper() - mid == pytest.approx(mid - bands.lower())
    assert bands.upper() > bands.lower()


def test_constant_prices_give_zero_width():
    bands = BollingerBands(5, 2)
    for _ in range(12):
        bands.push(3.3)
    assert bands.std == pytest.approx(0.0)
    assert bands.upper() == pytest.approx(bands.lower())


def test_rejects_zero_lookback():
    with pytest.raises(ValueError):
        BollingerBands(0, 2)