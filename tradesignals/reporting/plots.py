"""Plotting utilities for replay reporting."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

log = logging.getLogger(__name__)


def plot_signals(signals: pd.DataFrame, out_path: str | Path, src: str = "close") -> None:
    """Plot price vs time with aggregate BUY / SELL markers and save as PNG.

    Parameters
    ----------
    signals : pd.DataFrame
        Output of :func:`tradesignals.replay.replay_signals`.
    out_path : str | Path
        Destination file path (e.g. ``plots/signals.png``).
    src : str
        Price column to draw.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_price, ax_strength) = plt.subplots(
        2, 1, figsize=(14, 7), sharex=True, gridspec_kw={"height_ratios": [3, 1]},
    )
    ax_price.plot(signals["time"], signals[src], linewidth=0.8, color="#d4af37")

    buys = signals[signals["action"] == "buy"]
    sells = signals[signals["action"] == "sell"]
    ax_price.scatter(buys["time"], buys[src], marker="^", color="#2ca02c", s=20, label="BUY")
    ax_price.scatter(sells["time"], sells[src], marker="v", color="#d62728", s=20, label="SELL")

    if len(signals):
        ax_price.set_title(
            f"Signals  ({signals['time'].iloc[0].date()} → {signals['time'].iloc[-1].date()})"
        )
    ax_price.set_ylabel("Price")
    ax_price.legend(loc="upper left")
    ax_price.grid(True, alpha=0.3)

    signed = signals["strength"].where(signals["action"] != "sell", -signals["strength"])
    ax_strength.bar(signals["time"], signed, color="#1f77b4")
    ax_strength.set_ylabel("Strength")
    ax_strength.set_xlabel("Time")
    ax_strength.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(out_path, dpi=100)
    plt.close(fig)

    log.info("Saved signal plot → %s", out_path)
