"""Signal — output of one strategy evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_STRENGTH = 100.0


class Action(str, Enum):
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


def clamp_strength(value: float) -> float:
    return min(max(float(value), 0.0), MAX_STRENGTH)


def clamp_confidence(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


@dataclass(frozen=True)
class Signal:
    """What one evaluator recommends — NOT an execution instruction.

    Attributes
    ----------
    action : Action
        BUY, SELL or HOLD.
    strength : float
        0–100 magnitude of conviction; 0 means "no signal".
    confidence : float
        0.0–1.0 self-assessed reliability, used as the aggregation weight.
    reason : str
        Human-readable audit trail.
    """

    action: Action
    strength: float = 0.0
    confidence: float = 0.0
    reason: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.action, Action):
            object.__setattr__(self, "action", Action(self.action))
        if not 0.0 <= self.strength <= MAX_STRENGTH:
            raise ValueError(f"strength must be within [0, 100], got {self.strength}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

    @classmethod
    def hold(cls, reason: str, confidence: float = 0.0) -> Signal:
        return cls(action=Action.HOLD, strength=0.0, confidence=confidence, reason=reason)

    @property
    def score(self) -> float:
        """Weighted contribution to the aggregate: strength * confidence."""
        return self.strength * self.confidence

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "strength": self.strength,
            "confidence": self.confidence,
            "reason": self.reason,
        }
