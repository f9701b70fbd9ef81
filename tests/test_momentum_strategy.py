import pytest

from tradesignals.strategy.momentum import MomentumStrategy
from tradesignals.strategy.signal import Action


@pytest.fixture
def strategy():
    return MomentumStrategy()


def test_upward_momentum_buys(strategy):
    signal = strategy.evaluate([100.0] * 9 + [110.0])
    assert signal.action is Action.BUY
    assert signal.strength == pytest.approx(50.0)
    assert signal.confidence == 0.7


def test_downward_momentum_sells(strategy):
    signal = strategy.evaluate([100.0] * 9 + [90.0])
    assert signal.action is Action.SELL
    assert signal.strength == pytest.approx(50.0)
    assert signal.confidence == 0.7


def test_weak_momentum_holds(strategy):
    signal = strategy.evaluate([100.0] * 9 + [103.0])
    assert signal.action is Action.HOLD
    assert signal.confidence == 0.3


def test_strength_is_capped(strategy):
    signal = strategy.evaluate([100.0] * 9 + [150.0])
    assert signal.strength == 100.0


def test_compares_against_price_period_bars_back(strategy):
    # Only prices[len - period] matters as the base
    prices = [1.0] * 5 + [100.0] * 9 + [110.0]
    assert strategy.evaluate(prices).strength == pytest.approx(50.0)


def test_insufficient_history_has_zero_confidence(strategy):
    signal = strategy.evaluate([100.0] * 9)
    assert signal.action is Action.HOLD
    assert signal.strength == 0.0
    assert signal.confidence == 0.0
    assert signal.reason == "Insufficient data"
