import pytest

from indicators.stochastic import Stochastic


def test_k_waits_for_full_window():
    stoch = Stochastic(3, 2)
    stoch.push(1.0)
    stoch.push(2.0)
    assert stoch.k == 0.0
    assert stoch.ready is False


def test_close_at_high_gives_hundred():
    stoch = Stochastic(3, 2)
    for v in (1.0, 2.0, 3.0):
        stoch.push(v)
    assert stoch.k == pytest.approx(100.0)
    assert stoch.ready is False
    stoch.push(4.0)
    assert stoch.ready is True
    assert stoch.d() == pytest.approx(100.0)


def test_close_at_low_gives_zero():
    stoch = Stochastic(3, 2)
    for v in (5.0, 4.0, 3.0, 2.0):
        stoch.push(v)
    assert stoch.k == pytest.approx(0.0)
    assert stoch.d() == pytest.approx(0.0)


def test_flat_window_gives_fifty():
    stoch = Stochastic(4, 3)
    for _ in range(8):
        stoch.push(7.0)
    assert stoch.k == 50.0
    assert stoch.d() == pytest.approx(50.0)


def test_k_and_d_stay_in_range():
    stoch = Stochastic(5, 3)
    for v in [3, 8, 1, 9, 4, 6, 2, 7, 5, 10, 0, 3]:
        stoch.push(float(v))
        assert 0.0 <= stoch.k <= 100.0
        assert 0.0 <= stoch.d() <= 100.0