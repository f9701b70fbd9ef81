from dataclasses import dataclass

import numpy as np

from tradesignals.series import PriceLike, PriceSeries
from ..core.interfaces import validate_period

NEUTRAL_RSI = 50.0


@dataclass(frozen=True)
class RSI:
    """Relative Strength Index from simple averages of the first ``period`` deltas.

    Only ``prices[0 : period + 1]`` are examined, whatever the series length.
    This is not Wilder's recursive smoothing.
    """

    period: int = 14

    def __post_init__(self) -> None:
        validate_period(self.period)

    @property
    def name(self) -> str:
        return f"rsi_{self.period}"

    @property
    def lookback(self) -> int:
        return self.period + 1

    def value(self, prices: PriceLike) -> float:
        series = PriceSeries.of(prices)
        p = self.period
        if len(series) < p + 1:
            return NEUTRAL_RSI

        deltas = np.diff(series.as_array()[: p + 1])
        avg_gain = float(np.sum(np.where(deltas > 0, deltas, 0.0))) / p
        avg_loss = float(np.sum(np.where(deltas < 0, -deltas, 0.0))) / p

        if avg_loss == 0:
            # Flat window: no gains and no losses is neutral, not overbought
            return NEUTRAL_RSI if avg_gain == 0 else 100.0

        rs = avg_gain / avg_loss
        return 100.0 - 100.0 / (1.0 + rs)


def rsi(prices: PriceLike, period: int = 14) -> float:
    return RSI(period).value(prices)
