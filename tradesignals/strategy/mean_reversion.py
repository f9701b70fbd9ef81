from dataclasses import dataclass

from tradesignals.indicators.core.interfaces import validate_period
from tradesignals.indicators.impl.ma import SMA
from tradesignals.series import PriceLike, PriceSeries
from .base import from_params, insufficient_data, validate_confidence, validate_non_negative
from .signal import Action, Signal, clamp_strength


@dataclass(frozen=True)
class MeanReversionStrategy:
    """Fades the last price's percentage deviation from its SMA."""

    period: int = 20
    threshold_pct: float = 5.0
    multiplier: float = 10.0
    confidence: float = 0.65
    hold_confidence: float = 0.3
    _name: str = "mean_reversion"

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
        if len(series) < self.lookback:
            return insufficient_data()

        mean = SMA(self.period).value(series)
        if mean <= 0:
            return Signal.hold("Mean undefined for non-positive prices")

        deviation = (series.last - mean) / mean * 100

        if deviation < -self.threshold_pct:
            return Signal(
                action=Action.BUY,
                strength=clamp_strength(abs(deviation) * self.multiplier),
                confidence=self.confidence,
                reason=f"Price {abs(deviation):.1f}% below {self.period}-period mean",
            )
        elif deviation > self.threshold_pct:
            return Signal(
                action=Action.SELL,
                strength=clamp_strength(deviation * self.multiplier),
                confidence=self.confidence,
                reason=f"Price {deviation:.1f}% above {self.period}-period mean",
            )

        return Signal.hold("Price near mean value", self.hold_confidence)


def build(params: dict) -> MeanReversionStrategy:
    return from_params(MeanReversionStrategy, params)
