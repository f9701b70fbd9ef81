"""Signal aggregation — reconciles independent strategy Signals into one decision.

Each Signal contributes ``strength * confidence`` to the score of its side.
The side with the larger score wins only if that score also clears
``SCORE_THRESHOLD``; otherwise the decision is Hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from tradesignals.strategy.signal import Action, Signal, clamp_confidence, clamp_strength

# Heuristic cut-off on the weighted score, not a statistical one. Retune from
# replay data rather than by hand.
SCORE_THRESHOLD = 50.0

HOLD_CONFIDENCE = 0.2
HOLD_REASON = "Mixed or weak signals from strategies"


@dataclass(frozen=True)
class AggregateDecision:
    """The reconciled recommendation. Derived on every call, never stored."""

    action: Action
    strength: float
    confidence: float
    reason: str
    buy_score: float = 0.0
    sell_score: float = 0.0
    signals: Mapping[str, Signal] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "strength": self.strength,
            "confidence": self.confidence,
            "reason": self.reason,
            "buy_score": self.buy_score,
            "sell_score": self.sell_score,
            "signals": {name: s.to_dict() for name, s in self.signals.items()},
        }


@dataclass(frozen=True)
class SignalAggregator:
    score_threshold: float = SCORE_THRESHOLD

    def combine(self, signals: Mapping[str, Signal]) -> AggregateDecision:
        """Combine per-strategy Signals, keyed by strategy name."""
        signals = dict(signals)
        n = len(signals)

        buys = [s for s in signals.values() if s.action is Action.BUY]
        sells = [s for s in signals.values() if s.action is Action.SELL]
        buy_score = sum(s.score for s in buys)
        sell_score = sum(s.score for s in sells)

        # +1 keeps the ratio defined at zero scores and damps confidence
        denom = buy_score + sell_score + 1

        if buy_score > sell_score and buy_score > self.score_threshold:
            return AggregateDecision(
                action=Action.BUY,
                strength=clamp_strength(buy_score / n),
                confidence=clamp_confidence(buy_score / denom),
                reason=f"{len(buys)}/{n} strategies signal BUY",
                buy_score=buy_score,
                sell_score=sell_score,
                signals=signals,
            )
        elif sell_score > buy_score and sell_score > self.score_threshold:
            return AggregateDecision(
                action=Action.SELL,
                strength=clamp_strength(sell_score / n),
                confidence=clamp_confidence(sell_score / denom),
                reason=f"{len(sells)}/{n} strategies signal SELL",
                buy_score=buy_score,
                sell_score=sell_score,
                signals=signals,
            )

        return AggregateDecision(
            action=Action.HOLD,
            strength=0.0,
            confidence=HOLD_CONFIDENCE,
            reason=HOLD_REASON,
            buy_score=buy_score,
            sell_score=sell_score,
            signals=signals,
        )
