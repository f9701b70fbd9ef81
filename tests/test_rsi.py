import pytest

from tradesignals.indicators import NEUTRAL_RSI, RSI, rsi


def test_rsi_short_series_is_neutral():
    assert rsi([], 14) == NEUTRAL_RSI
    assert rsi([100.0 + i for i in range(14)], 14) == NEUTRAL_RSI


def test_rsi_flat_window_is_neutral():
    assert rsi([100.0] * 20) == 50.0


def test_rsi_all_gains_is_max():
    assert rsi([100.0 + i for i in range(15)]) == 100.0


def test_rsi_all_losses_is_zero():
    assert rsi([115.0 - i for i in range(16)]) == 0.0


def test_rsi_mixed():
    # gains 2, losses 1 → avg 1 / 0.5 → RS 2
    assert rsi([100.0, 102.0, 101.0], 2) == pytest.approx(100 - 100 / 3)


def test_rsi_only_reads_first_period_plus_one_prices():
    head = [100.0, 102.0, 101.0]
    assert rsi(head + [50.0, 200.0, 10.0], 2) == rsi(head, 2)


def test_rsi_bounds():
    for prices in ([1.0, 5.0, 2.0, 9.0, 3.0], [9.0, 8.0, 8.5, 1.0, 2.0]):
        value = rsi(prices, 4)
        assert 0.0 <= value <= 100.0


def test_rsi_name_and_lookback():
    assert RSI().period == 14
    assert RSI().name == "rsi_14"
    assert RSI(7).lookback == 8
