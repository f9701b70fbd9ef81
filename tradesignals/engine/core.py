"""SignalEngine — runs every strategy over a price history and aggregates.

One call is one stateless pass:
  PriceSeries → indicators → strategy Signals → AggregateDecision

The engine holds only immutable configuration, so one instance can be
shared across threads and symbols.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from tradesignals.aggregate.aggregator import AggregateDecision, SignalAggregator
from tradesignals.engine.config import EngineConfig
from tradesignals.series import PriceLike, PriceSeries
from tradesignals.strategy.base import Strategy
from tradesignals.strategy.registry import build_strategy, default_strategies
from tradesignals.strategy.signal import Signal

log = logging.getLogger(__name__)


class SignalEngine:
    """Evaluates a set of strategies and combines their Signals.

    Parameters
    ----------
    strategies : Sequence[Strategy] | None
        Evaluators to run. ``None`` means the four built-in strategies
        with default parameters.
    aggregator : SignalAggregator | None
        Combiner. ``None`` means the default threshold.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[Strategy]] = None,
        aggregator: Optional[SignalAggregator] = None,
    ) -> None:
        self._strategies = tuple(default_strategies() if strategies is None else strategies)
        self._aggregator = aggregator or SignalAggregator()

        names = [s.name for s in self._strategies]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate strategy names: {dupes}")

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> SignalEngine:
        strategies = [build_strategy(block) for block in cfg.enabled_strategies]
        return cls(strategies, SignalAggregator(score_threshold=cfg.score_threshold))

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        return self._strategies

    @property
    def lookback(self) -> int:
        """Longest history any strategy needs to produce a non-Hold signal."""
        return max((s.lookback for s in self._strategies), default=0)

    def signals(self, prices: PriceLike) -> dict[str, Signal]:
        series = PriceSeries.of(prices)
        return {s.name: s.evaluate(series) for s in self._strategies}

    def evaluate(self, prices: PriceLike) -> AggregateDecision:
        """Run every strategy on ``prices`` and return the combined decision."""
        series = PriceSeries.of(prices)
        decision = self._aggregator.combine(self.signals(series))
        log.debug(
            "Decision %s (strength=%.2f, confidence=%.3f, buy=%.2f, sell=%.2f) over %d prices",
            decision.action.value,
            decision.strength,
            decision.confidence,
            decision.buy_score,
            decision.sell_score,
            len(series),
        )
        return decision


def combine_strategies(prices: PriceLike) -> AggregateDecision:
    """Default four-strategy evaluation in one call."""
    return SignalEngine().evaluate(prices)
