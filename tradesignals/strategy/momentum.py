from dataclasses import dataclass

from tradesignals.indicators.core.interfaces import validate_period
from tradesignals.series import PriceLike, PriceSeries
from .base import from_params, insufficient_data, validate_confidence, validate_non_negative
from .signal import Action, Signal, clamp_strength


@dataclass(frozen=True)
class MomentumStrategy:
    """Percentage change of the last price over ``period`` bars."""

    period: int = 10
    threshold_pct: float = 5.0
    multiplier: float = 5.0
    confidence: float = 0.7
    hold_confidence: float = 0.3
    _name: str = "momentum"

    def __post_init__(self) -> None:
        validate_period(self.period)
        validate_non_negative("threshold_pct", self.threshold_pct)
        validate_non_negative("multiplier", self.multiplier)
        validate_confidence("confidence", self.confidence)
        validate_confidence("hold_confidence", self.hold_confidence)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lookback(self) -> int:
        return self.period

    def evaluate(self, prices: PriceLike) -> Signal:
        series = PriceSeries.of(prices)
        n = len(series)
        if n < self.lookback:
            return insufficient_data()

        base = series[n - self.period]
        if base <= 0:
            return Signal.hold("Momentum undefined for non-positive base price")

        momentum = (series.last - base) / base * 100

        if momentum > self.threshold_pct:
            return Signal(
                action=Action.BUY,
                strength=clamp_strength(momentum * self.multiplier),
                confidence=self.confidence,
                reason=f"Strong upward momentum: {momentum:.1f}%",
            )
        elif momentum < -self.threshold_pct:
            return Signal(
                action=Action.SELL,
                strength=clamp_strength(abs(momentum) * self.multiplier),
                confidence=self.confidence,
                reason=f"Strong downward momentum: {momentum:.1f}%",
            )

        return Signal.hold("Weak momentum", self.hold_confidence)


def build(params: dict) -> MomentumStrategy:
    return from_params(MomentumStrategy, params)
