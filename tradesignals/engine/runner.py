"""Replay runner — orchestrates load → replay → artifact generation."""

from __future__ import annotations

import json
import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from tradesignals.engine.config import ReplayConfig
from tradesignals.engine.core import SignalEngine
from tradesignals.replay.signal_replay import replay_signals
from tradesignals.reporting.plots import plot_signals

log = logging.getLogger(__name__)


def load_bars(snapshot_dir: Path) -> tuple[pd.DataFrame, list[Path]]:
    """Concatenate every CSV in ``snapshot_dir`` (sorted by file name)."""
    csv_files = sorted(snapshot_dir.glob("*.csv"))
    if not csv_files:
        raise FileNotFoundError(f"No CSV files found in {snapshot_dir}")

    frames = []
    for csv_file in csv_files:
        df_part = pd.read_csv(csv_file)
        frames.append(df_part)
        log.info("  Loaded %s  (%s rows)", csv_file.name, f"{len(df_part):,}")

    df = pd.concat(frames, ignore_index=True)
    log.info("Total raw rows: %s", f"{len(df):,}")
    return df, csv_files


def summarize(signals: pd.DataFrame, run_id: str, cfg: ReplayConfig) -> dict:
    counts = signals["action"].value_counts()
    summary = {
        "run_id": run_id,
        "symbol": cfg.symbol,
        "n_bars": int(len(signals)),
        "history_window": cfg.history_window,
        "strategies": [b["type"] for b in cfg.engine.enabled_strategies],
        "score_threshold": cfg.engine.score_threshold,
        "n_buy": int(counts.get("buy", 0)),
        "n_sell": int(counts.get("sell", 0)),
        "n_hold": int(counts.get("hold", 0)),
        "last_decision": None,
    }
    if len(signals):
        last = signals.iloc[-1]
        summary["start_ts"] = signals["time"].iloc[0].isoformat()
        summary["end_ts"] = signals["time"].iloc[-1].isoformat()
        summary["last_decision"] = {
            "action": last["action"],
            "strength": float(last["strength"]),
            "confidence": float(last["confidence"]),
        }
    return summary


def run_replay(config_path: str) -> str:
    """Replay the engine over a bar snapshot and write all run artifacts.

    Parameters
    ----------
    config_path : str
        Path to a YAML config file. Relative paths inside it resolve
        against the config file's directory.

    Returns
    -------
    str
        The generated ``run_id``.
    """
    cfg_path = Path(config_path)
    cfg = ReplayConfig.from_yaml(cfg_path)
    engine = SignalEngine.from_config(cfg.engine)

    # ── Generate run_id ──────────────────────────────────────────────
    run_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    run_dir = cfg.output_dir / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    (run_dir / "plots").mkdir(exist_ok=True)

    log.info("Run ID     : %s", run_id)
    log.info("Output     : %s", run_dir)
    log.info("Strategies : %s", [s.name for s in engine.strategies])

    # ── Load + replay ────────────────────────────────────────────────
    df, _ = load_bars(cfg.snapshot_dir)
    signals = replay_signals(
        df, engine, src=cfg.src, history_window=cfg.history_window,
    )

    # ── Write artifacts ──────────────────────────────────────────────
    # 1. config.yaml
    shutil.copy2(cfg_path, run_dir / "config.yaml")

    # 2. signals.csv
    signals.to_csv(run_dir / "signals.csv", index=False)
    log.info("Wrote signals.csv  (%s rows)", f"{len(signals):,}")

    # 3. summary.json
    summary = summarize(signals, run_id, cfg)
    (run_dir / "summary.json").write_text(
        json.dumps(summary, indent=2), encoding="utf-8",
    )
    log.info("Wrote summary.json")

    # 4. plots
    if len(signals):
        plot_signals(signals, run_dir / "plots" / "signals.png", src=cfg.src)

    log.info("✓ Run complete: %s", run_dir)
    return run_id
