from dataclasses import dataclass

import numpy as np

from tradesignals.series import PriceLike, PriceSeries
from ..core.interfaces import validate_period


@dataclass(frozen=True)
class SMA:
    period: int

    def __post_init__(self) -> None:
        validate_period(self.period)

    @property
    def name(self) -> str:
        return f"sma_{self.period}"

    @property
    def lookback(self) -> int:
        return self.period

    def value(self, prices: PriceLike) -> float:
        """
        Computes the Simple Moving Average of the last ``period`` prices.

        Args:
            prices: Chronological prices, oldest first.

        Returns:
            The mean, or 0.0 when fewer than ``period`` prices are available.
            Callers must read 0.0 as "undefined", never as a price level.
        """
        series = PriceSeries.of(prices)
        if len(series) < self.period:
            return 0.0

        window = series.as_array()[-self.period:]
        return float(np.sum(window) / self.period)


def sma(prices: PriceLike, period: int) -> float:
    return SMA(period).value(prices)
