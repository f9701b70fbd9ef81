"""PriceSeries — immutable, chronological price history fed to every indicator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class PriceSeries:
    """Ordered prices, oldest first.

    Duplicates are kept and gaps are neither assumed nor checked. The only
    thing rejected is a non-finite value, since no indicator can do anything
    meaningful with NaN or inf.
    """

    prices: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(float(p) for p in self.prices)
        bad = [i for i, p in enumerate(values) if not math.isfinite(p)]
        if bad:
            raise ValueError(f"Non-finite prices at positions {bad[:5]}")
        object.__setattr__(self, "prices", values)

    @classmethod
    def of(cls, prices: "PriceLike") -> PriceSeries:
        """Coerce a PriceSeries or any sequence of numbers."""
        if isinstance(prices, PriceSeries):
            return prices
        return cls(tuple(prices))

    @classmethod
    def from_frame(cls, df: pd.DataFrame, src: str = "close") -> PriceSeries:
        if src not in df.columns:
            raise ValueError(f"Source column '{src}' not found in input DataFrame.")
        return cls(tuple(df[src].astype(float).tolist()))

    def __len__(self) -> int:
        return len(self.prices)

    def __iter__(self) -> Iterator[float]:
        return iter(self.prices)

    def __getitem__(self, idx):
        return self.prices[idx]

    @property
    def last(self) -> float:
        """Most recent price. Raises IndexError on an empty series."""
        return self.prices[-1]

    def tail(self, n: int) -> PriceSeries:
        if n >= len(self.prices):
            return self
        return PriceSeries(self.prices[len(self.prices) - n:]) if n > 0 else PriceSeries()

    def as_array(self) -> np.ndarray:
        arr = np.asarray(self.prices, dtype=np.float64)
        arr.setflags(write=False)
        return arr


PriceLike = Union[PriceSeries, Sequence[float]]
