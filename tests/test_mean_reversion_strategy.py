import pytest

from tradesignals.strategy.mean_reversion import MeanReversionStrategy
from tradesignals.strategy.signal import Action


@pytest.fixture
def strategy():
    return MeanReversionStrategy()


def test_below_mean_buys(strategy):
    signal = strategy.evaluate([100.0] * 19 + [94.0])
    deviation = (94.0 - 99.7) / 99.7 * 100
    assert signal.action is Action.BUY
    assert signal.strength == pytest.approx(abs(deviation) * 10)
    assert signal.confidence == 0.65
    assert "below 20-period mean" in signal.reason


def test_far_below_mean_is_capped(strategy):
    signal = strategy.evaluate([100.0] * 19 + [80.0])
    assert signal.action is Action.BUY
    assert signal.strength == 100.0


def test_above_mean_sells(strategy):
    signal = strategy.evaluate([100.0] * 19 + [120.0])
    assert signal.action is Action.SELL
    assert signal.strength == 100.0
    assert signal.confidence == 0.65


def test_near_mean_holds(strategy):
    signal = strategy.evaluate([100.0] * 20)
    assert signal.action is Action.HOLD
    assert signal.strength == 0.0
    assert signal.confidence == 0.3


def test_threshold_is_strict(strategy):
    # Deviation just inside 5% stays Hold
    signal = strategy.evaluate([100.0] * 19 + [104.9])
    assert signal.action is Action.HOLD


def test_insufficient_history(strategy):
    signal = strategy.evaluate([100.0] * 19)
    assert signal.action is Action.HOLD
    assert signal.confidence == 0.0


def test_custom_period():
    signal = MeanReversionStrategy(period=5).evaluate([100.0] * 4 + [80.0])
    assert signal.action is Action.BUY
