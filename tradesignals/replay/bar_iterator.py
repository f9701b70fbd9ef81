"""Deterministic bar iterator over a validated DataFrame."""

from __future__ import annotations

import logging
from typing import Generator, Optional

import pandas as pd

from tradesignals.series import PriceSeries
from .validation import validate_bars

log = logging.getLogger(__name__)


class BarIterator:
    """Yields, for each bar, the price history visible at that bar.

    Guarantees:
    - ``time`` column is ``datetime64[ns, UTC]``
    - rows are sorted ascending by ``time``
    - bar ``i`` only ever sees prices ``0..i`` (no look-ahead)
    """

    def __init__(
        self,
        df: pd.DataFrame,
        src: str = "close",
        history_window: Optional[int] = None,
    ) -> None:
        validate_bars(df, src)
        self._df = self._clean(df)
        self._src = src
        self._history_window = history_window
        self._prices = PriceSeries.from_frame(self._df, src)

    # -- public API --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._df)

    def __iter__(self) -> Generator[tuple[pd.Timestamp, PriceSeries], None, None]:
        prices = self._prices.prices
        window = self._history_window
        for i, ts in enumerate(self._df["time"]):
            start = 0 if window is None else max(0, i + 1 - window)
            yield ts, PriceSeries(prices[start: i + 1])

    @property
    def df(self) -> pd.DataFrame:
        """Return the cleaned DataFrame (read-only copy)."""
        return self._df.copy()

    @property
    def prices(self) -> PriceSeries:
        return self._prices

    # -- cleaning ----------------------------------------------------------

    @staticmethod
    def _clean(df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        df["time"] = pd.to_datetime(df["time"], utc=True)
        df = df.sort_values("time").reset_index(drop=True)

        if len(df):
            log.info(
                "BarIterator: %s bars, %s → %s",
                f"{len(df):,}",
                df["time"].iloc[0].isoformat(),
                df["time"].iloc[-1].isoformat(),
            )
        return df
