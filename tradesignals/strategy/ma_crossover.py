from dataclasses import dataclass

from tradesignals.indicators.core.interfaces import validate_period
from tradesignals.indicators.impl.ma import SMA
from tradesignals.series import PriceLike, PriceSeries
from .base import from_params, insufficient_data, validate_confidence, validate_non_negative
from .signal import Action, Signal, clamp_strength


@dataclass(frozen=True)
class MACrossoverStrategy:
    """
    Simple Moving Average Crossover Strategy.

    ``band`` is a dead zone around the long MA (1% by default) so that
    noise around the crossover does not flip the signal.
    """
    short_period: int = 10
    long_period: int = 20
    band: float = 0.01
    confidence: float = 0.7
    hold_confidence: float = 0.3
    _name: str = "ma_crossover"

    def __post_init__(self) -> None:
        validate_period(self.short_period)
        validate_period(self.long_period)
        validate_non_negative("band", self.band)
        if not 0.0 <= self.band < 1.0:
            raise ValueError(f"band must be within [0, 1), got {self.band!r}")
        validate_confidence("confidence", self.confidence)
        validate_confidence("hold_confidence", self.hold_confidence)

    @property
    def name(self) -> str:
        return self._name

    @property
    def lookback(self) -> int:
        return max(self.short_period, self.long_period)

    def evaluate(self, prices: PriceLike) -> Signal:
        """
        Generate a signal from the short/long SMA ratio.
        """
        series = PriceSeries.of(prices)
        if len(series) < self.lookback:
            return insufficient_data()

        short_ma = SMA(self.short_period).value(series)
        long_ma = SMA(self.long_period).value(series)

        if short_ma <= 0 or long_ma <= 0:
            return Signal.hold("Moving average undefined for non-positive prices")

        if short_ma > long_ma * (1 + self.band):
            return Signal(
                action=Action.BUY,
                strength=clamp_strength((short_ma / long_ma - 1) * 100),
                confidence=self.confidence,
                reason=f"Short MA ({short_ma:.2f}) crossed above Long MA ({long_ma:.2f})",
            )
        elif short_ma < long_ma * (1 - self.band):
            return Signal(
                action=Action.SELL,
                strength=clamp_strength((long_ma / short_ma - 1) * 100),
                confidence=self.confidence,
                reason=f"Short MA ({short_ma:.2f}) crossed below Long MA ({long_ma:.2f})",
            )

        return Signal.hold("No clear MA crossover signal", self.hold_confidence)


def build(params: dict) -> MACrossoverStrategy:
    return from_params(MACrossoverStrategy, params)
