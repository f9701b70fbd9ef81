"""Bar-by-bar replay of the signal engine over a bar history."""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from tradesignals.engine.core import SignalEngine
from .bar_iterator import BarIterator

log = logging.getLogger(__name__)


def replay_signals(
    df: pd.DataFrame,
    engine: Optional[SignalEngine] = None,
    src: str = "close",
    history_window: Optional[int] = None,
) -> pd.DataFrame:
    """Re-run the engine as each bar arrives, as a live polling loop would.

    Parameters
    ----------
    df : pd.DataFrame
        Bars with at least ``time`` and ``src`` columns.
    engine : SignalEngine | None
        Engine to run; ``None`` means the default four strategies.
    src : str
        Price column fed to the engine.
    history_window : int | None
        If set, each bar sees only its last ``history_window`` prices.

    Returns
    -------
    pd.DataFrame
        One row per bar: ``time``, price, aggregate decision fields and one
        ``<strategy>_action`` column per strategy.
    """
    engine = engine or SignalEngine()
    bars = BarIterator(df, src=src, history_window=history_window)

    rows: list[dict] = []
    for ts, series in bars:
        decision = engine.evaluate(series)
        row = {
            "time": ts,
            src: series.last,
            "action": decision.action.value,
            "strength": decision.strength,
            "confidence": decision.confidence,
            "buy_score": decision.buy_score,
            "sell_score": decision.sell_score,
        }
        for name, signal in decision.signals.items():
            row[f"{name}_action"] = signal.action.value
        rows.append(row)

    columns = ["time", src, "action", "strength", "confidence", "buy_score", "sell_score"]
    columns += [f"{s.name}_action" for s in engine.strategies]
    out = pd.DataFrame(rows, columns=columns)

    log.info(
        "Replayed %s bars: %s",
        f"{len(out):,}",
        out["action"].value_counts().to_dict() if len(out) else {},
    )
    return out
