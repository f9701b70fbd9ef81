from dataclasses import dataclass

from tradesignals.indicators.impl.rsi import RSI
from tradesignals.series import PriceLike, PriceSeries
from .base import from_params, insufficient_data, validate_confidence, validate_non_negative
from .signal import Action, Signal, clamp_strength


@dataclass(frozen=True)
class RSIStrategy:
    """Oversold / overbought reading of the RSI oscillator."""

    period: int = 14
    oversold: float = 30.0
    overbought: float = 70.0
    multiplier: float = 3.0
    confidence: float = 0.75
    hold_confidence: float = 0.4
    _name: str = "rsi"

    def __post_init__(self) -> None:
        # Fails fast on a bad period
        RSI(self.period)
        validate_non_negative("oversold", self.oversold)
        validate_non_negative("overbought", self.overbought)
        if not 0.0 <= self.oversold < self.overbought <= 100.0:
            raise ValueError(
                f"Need 0 <= oversold < overbought <= 100, got {self.oversold!r} / {self.overbought!r}"
            )
        validate_non_negative("multiplier", self.multiplier)
        validate_confidence("confidence", self.confidence)
        validate_confidence("hold_confidence", self.hold_confidence)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lookback(self) -> int:
        return RSI(self.period).lookback

    def evaluate(self, prices: PriceLike) -> Signal:
        series = PriceSeries.of(prices)
        if len(series) < self.lookback:
            return insufficient_data()

        value = RSI(self.period).value(series)

        if value < self.oversold:
            return Signal(
                action=Action.BUY,
                strength=clamp_strength((self.oversold - value) * self.multiplier),
                confidence=self.confidence,
                reason=f"RSI ({value:.1f}) indicates oversold condition",
            )
        elif value > self.overbought:
            return Signal(
                action=Action.SELL,
                strength=clamp_strength((value - self.overbought) * self.multiplier),
                confidence=self.confidence,
                reason=f"RSI ({value:.1f}) indicates overbought condition",
            )

        return Signal.hold(f"RSI ({value:.1f}) in neutral zone", self.hold_confidence)


def build(params: dict) -> RSIStrategy:
    return from_params(RSIStrategy, params)
