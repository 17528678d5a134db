from indicators.supertrend import SuperTrend, Trend


def test_undefined_before_ready():
    st = SuperTrend(3, 2)
    st.push(11.0, 9.0, 10.0)
    assert st.trend is Trend.UNDEFINED
    assert st.value == 0.0
    assert st.ready is False


def test_flat_market_is_downtrend_above_close():
    st = SuperTrend(2, 3)
    for _ in range(6):
        st.push(11.0, 9.0, 10.0)
    assert st.ready is True
    assert st.trend is Trend.DOWN
    assert st.value > 10.0


def test_breakout_turns_trend_up():
    st = SuperTrend(2, 1)
    st.push(11.0, 9.0, 10.0)
    st.push(12.0, 10.0, 11.0)
    assert st.trend is Trend.DOWN
    st.push(31.0, 29.0, 30.0)
    st.push(51.0, 49.0, 50.0)
    assert st.trend is Trend.UP
    assert st.value < 50.0


def test_value_is_a_band_on_the_right_side():
    st = SuperTrend(3, 2)
    bars = [(11, 9, 10), (12, 10, 11), (13, 11, 12), (20, 18, 19),
            (25, 23, 24), (30, 28, 29), (22, 20, 21), (15, 13, 14)]
    for high, low, close in bars:
        st.push(float(high), float(low), float(close))
        if st.ready and st.trend is Trend.UP:
            assert st.value <= st.prev_upper or st.value == st.prev_lower
        if st.ready:
            assert st.trend in (Trend.UP, Trend.DOWN)