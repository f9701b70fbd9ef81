from dataclasses import dataclass

import pandas as pd

from tradesignals.series import PriceLike, PriceSeries
from ..core.interfaces import validate_period


@dataclass(frozen=True)
class EMA:
    period: int

    def __post_init__(self) -> None:
        validate_period(self.period)

    @property
    def name(self) -> str:
        return f"ema_{self.period}"

    @property
    def lookback(self) -> int:
        return self.period

    def value(self, prices: PriceLike) -> float:
        series = PriceSeries.of(prices)
        if len(series) < self.period:
            return 0.0

        # adjust=False seeds with the first price and runs the recurrence
        # over the whole series, not just the trailing window.
        feature = pd.Series(series.as_array()).ewm(span=self.period, adjust=False).mean()
        return float(feature.iloc[-1])


def ema(prices: PriceLike, period: int) -> float:
    return EMA(period).value(prices)
