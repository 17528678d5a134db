import math

import pytest

from indicators.linreg_slope import LinRegSlope


def test_push_reports_ready_only_on_fill_tick():
    slope = LinRegSlope(4)
    results = [slope.push(v) for v in (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)]
    assert results == [False, False, False, True, False, False]
    assert slope.ready is True


def test_unit_slope_for_counting_series():
    slope = LinRegSlope(5)
    for v in range(1, 6):
        slope.push(float(v))
    assert slope.value() == pytest.approx(1.0)


def test_slope_holds_as_window_rolls():
    slope = LinRegSlope(5)
    for x in range(1, 30):
        slope.push(3.0 * x + 1.0)
        if slope.ready:
            assert slope.value() == pytest.approx(3.0)


def test_constant_series_is_flat():
    slope = LinRegSlope(6)
    for _ in range(15):
        slope.push(7.0)
    assert slope.value() == pytest.approx(0.0)


def test_descending_series_is_negative():
    slope = LinRegSlope(5)
    for v in (10.0, 8.0, 6.0, 4.0, 2.0):
        slope.push(v)
    assert slope.value() == pytest.approx(-2.0)


def test_single_period_is_undefined():
    slope = LinRegSlope(1)
    assert slope.push(5.0) is True
    result = slope.value()
    assert math.isnan(result) is True
    assert repr(result) == "nan"


@pytest.mark.parametrize("periods", [0, -3])
def test_invalid_periods_rejected(periods):
    with pytest.raises(ValueError):
        LinRegSlope(periods)