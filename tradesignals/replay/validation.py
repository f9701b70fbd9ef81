"""Fail-fast data-integrity checks for bar DataFrames."""

from __future__ import annotations

import pandas as pd


def validate_bars(df: pd.DataFrame, src: str = "close") -> None:
    """Validate a raw bar DataFrame *before* any replay.

    Raises ``ValueError`` immediately on the first problem found so that
    malformed data never reaches the engine as a silently shifted series.
    """

    # 1. Timestamp column exists with no nulls ──────────────────────────
    if "time" not in df.columns:
        raise ValueError("Missing 'time' column")
    if df["time"].isna().any():
        n = int(df["time"].isna().sum())
        raise ValueError(f"Null timestamps found: {n} rows")

    # 2. Strictly increasing time ───────────────────────────────────────
    times = pd.to_datetime(df["time"], utc=True)

    n_dupes = int(times.duplicated().sum())
    if n_dupes > 0:
        raise ValueError(f"Duplicate timestamps found: {n_dupes}")

    if not times.is_monotonic_increasing:
        raise ValueError("Timestamps not monotonic increasing")

    # 3. Price column present, numeric, no NaNs ────────────────────────
    if src not in df.columns:
        raise ValueError(f"Missing '{src}' column")
    prices = pd.to_numeric(df[src], errors="coerce")
    if prices.isna().any():
        n = int(prices.isna().sum())
        raise ValueError(f"NaN or non-numeric values in '{src}': {n} rows")
