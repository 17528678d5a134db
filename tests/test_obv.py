from indicators.obv import OBV


def test_starts_empty():
    obv = OBV()
    assert obv.value == 0
    assert obv.ready is False


def test_rising_bar_adds_volume():
    obv = OBV()
    obv.push(1.0, 2.0, 5.0)
    assert obv.value == 5.0
    assert obv.ready is True


def test_falling_bar_subtracts_volume():
    obv = OBV()
    obv.push(1.0, 2.0, 5.0)
    obv.push(2.0, 1.0, 3.0)
    assert obv.value == 2.0


def test_flat_bar_adds_volume():
    obv = OBV()
    obv.push(4.0, 4.0, 7.0)
    assert obv.value == 7.0


def test_opposite_bars_cancel():
    obv = OBV()
    for _ in range(10):
        obv.push(1.0, 2.0, 9.0)
        obv.push(2.0, 1.0, 9.0)
    assert obv.value == 0.0