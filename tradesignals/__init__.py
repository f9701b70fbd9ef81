"""tradesignals — deterministic multi-indicator trading-signal engine."""

from tradesignals.series import PriceSeries
from tradesignals.strategy.signal import Action, Signal
from tradesignals.aggregate.aggregator import AggregateDecision, SignalAggregator
from tradesignals.engine.core import SignalEngine, combine_strategies

__all__ = [
    "PriceSeries",
    "Action",
    "Signal",
    "AggregateDecision",
    "SignalAggregator",
    "SignalEngine",
    "combine_strategies",
]
