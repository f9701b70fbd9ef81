"""Aggregation package — combines strategy Signals into one decision."""

from tradesignals.aggregate.aggregator import (
    HOLD_CONFIDENCE,
    SCORE_THRESHOLD,
    AggregateDecision,
    SignalAggregator,
)

__all__ = [
    "AggregateDecision",
    "SignalAggregator",
    "SCORE_THRESHOLD",
    "HOLD_CONFIDENCE",
]
