import pytest

from indicators.mfi import MFI


def push_price(mfi, price, volume):
    mfi.push(price, price, price, volume)


def test_no_negative_flow_gives_hundred():
    mfi = MFI(14)
    for price in (10.0, 11.0, 12.0, 13.0):
        push_price(mfi, price, 5.0)
    assert mfi.value() == 100.0
    assert mfi.negative_sum == 0


def test_balanced_flow_gives_fifty():
    mfi = MFI(14)
    push_price(mfi, 10.0, 1.0)
    push_price(mfi, 5.0, 2.0)
    assert mfi.positive_sum == mfi.negative_sum
    assert mfi.value() == pytest.approx(50.0)


def test_old_flows_leave_the_window():
    mfi = MFI(2)
    push_price(mfi, 10.0, 1.0)
    push_price(mfi, 5.0, 2.0)
    push_price(mfi, 5.0, 1.0)
    assert mfi.positive_sum == 0
    assert mfi.value() == pytest.approx(0.0)
    push_price(mfi, 5.0, 1.0)
    assert mfi.negative_sum == 0
    assert mfi.value() == 100.0


def test_value_stays_in_range():
    mfi = MFI(5)
    prices = [10, 12, 11, 9, 13, 14, 8, 8, 10, 12, 7, 15]
    for i, price in enumerate(prices):
        mfi.push(price + 1, price - 1, price, 100 + i)
        assert 0.0 <= mfi.value() <= 100.0


def test_invalid_lookback_rejected():
    with pytest.raises(ValueError):
        MFI(0)