import pytest

from tradesignals.strategy.rsi import RSIStrategy
from tradesignals.strategy.signal import Action


@pytest.fixture
def strategy():
    return RSIStrategy()


def test_oversold_buys(strategy):
    # 15 straight losses → RSI 0
    signal = strategy.evaluate([115.0 - i for i in range(16)])
    assert signal.action is Action.BUY
    assert signal.strength == 90.0
    assert signal.confidence == 0.75
    assert "oversold" in signal.reason


def test_overbought_sells(strategy):
    signal = strategy.evaluate([100.0 + i for i in range(15)])
    assert signal.action is Action.SELL
    assert signal.strength == 90.0
    assert signal.confidence == 0.75
    assert "overbought" in signal.reason


def test_neutral_zone_holds():
    signal = RSIStrategy(period=2).evaluate([100.0, 102.0, 101.0])
    assert signal.action is Action.HOLD
    assert signal.strength == 0.0
    assert signal.confidence == 0.4
    assert "neutral" in signal.reason


def test_flat_window_holds(strategy):
    signal = strategy.evaluate([100.0] * 20)
    assert signal.action is Action.HOLD
    assert signal.confidence == 0.4


def test_strength_is_clamped():
    signal = RSIStrategy(multiplier=5.0).evaluate([115.0 - i for i in range(16)])
    assert signal.action is Action.BUY
    assert signal.strength == 100.0


def test_insufficient_history(strategy):
    signal = strategy.evaluate([100.0 + i for i in range(14)])
    assert signal.action is Action.HOLD
    assert signal.strength == 0.0
    assert signal.confidence == 0.0


def test_lookback(strategy):
    assert strategy.lookback == 15
