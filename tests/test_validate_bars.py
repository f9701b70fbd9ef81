"""Tests for tradesignals.replay.validation.validate_bars."""

from __future__ import annotations

import pandas as pd
import pytest

from tradesignals.replay.validation import validate_bars


# ── helpers ──────────────────────────────────────────────────────────────

def _good_df() -> pd.DataFrame:
    """Return a minimal valid bar DataFrame."""
    return pd.DataFrame({
        "time": pd.to_datetime([
            "2024-01-01 00:00:00+00:00",
            "2024-01-02 00:00:00+00:00",
            "2024-01-03 00:00:00+00:00",
        ]),
        "open":  [100.0, 101.0, 102.0],
        "close": [100.5, 101.5, 102.5],
    })


# ── happy path ───────────────────────────────────────────────────────────

def test_valid_df_passes():
    validate_bars(_good_df())   # should not raise


def test_close_only_passes():
    validate_bars(_good_df().drop(columns=["open"]))


def test_alternate_src_column():
    df = _good_df().drop(columns=["close"])
    validate_bars(df, src="open")


# ── timestamp checks ─────────────────────────────────────────────────────

def test_missing_time_column():
    df = _good_df().drop(columns=["time"])
    with pytest.raises(ValueError, match="Missing 'time' column"):
        validate_bars(df)


def test_null_timestamps():
    df = _good_df()
    df.loc[1, "time"] = pd.NaT
    with pytest.raises(ValueError, match="Null timestamps found: 1"):
        validate_bars(df)


def test_duplicate_timestamps():
    df = _good_df()
    df.loc[2, "time"] = df.loc[1, "time"]
    with pytest.raises(ValueError, match="Duplicate timestamps found: 1"):
        validate_bars(df)


def test_unsorted_timestamps():
    df = _good_df().iloc[[1, 0, 2]].reset_index(drop=True)
    with pytest.raises(ValueError, match="not monotonic increasing"):
        validate_bars(df)


# ── price checks ─────────────────────────────────────────────────────────

def test_missing_close_column():
    df = _good_df().drop(columns=["close"])
    with pytest.raises(ValueError, match="Missing 'close' column"):
        validate_bars(df)


def test_nan_close():
    df = _good_df()
    df.loc[0, "close"] = float("nan")
    with pytest.raises(ValueError, match="NaN or non-numeric values in 'close': 1 rows"):
        validate_bars(df)


def test_non_numeric_close():
    df = _good_df()
    df["close"] = ["100.5", "oops", "102.5"]
    with pytest.raises(ValueError, match="non-numeric"):
        validate_bars(df)
