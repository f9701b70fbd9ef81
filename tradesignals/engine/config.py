"""Immutable configuration for the signal engine and the replay runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from tradesignals.aggregate.aggregator import SCORE_THRESHOLD
from tradesignals.strategy.registry import DEFAULT_STRATEGY_TYPES


def _default_strategy_cfgs() -> tuple[dict, ...]:
    return tuple({"type": t} for t in DEFAULT_STRATEGY_TYPES)


@dataclass(frozen=True)
class EngineConfig:
    """Which strategies run, with what parameters, and the aggregation threshold.

    Each strategy block is a registry config (``type`` + params). A block
    with ``enabled: false`` is kept in the config but not evaluated. Strategy
    names must be unique; give a ``name`` key to run one type twice with
    different parameters.
    """

    strategies: tuple[dict, ...] = field(default_factory=_default_strategy_cfgs)
    score_threshold: float = SCORE_THRESHOLD

    @classmethod
    def from_dict(cls, cfg: Optional[dict]) -> EngineConfig:
        cfg = dict(cfg or {})
        blocks = cfg.get("strategies")
        if blocks is None:
            strategies = _default_strategy_cfgs()
        else:
            if not isinstance(blocks, list):
                raise ValueError("'strategies' must be a list of strategy blocks")
            for block in blocks:
                if not isinstance(block, dict):
                    raise ValueError(f"Strategy block must be a mapping, got {block!r}")
            strategies = tuple(dict(b) for b in blocks)
        return cls(
            strategies=strategies,
            score_threshold=float(cfg.get("score_threshold", SCORE_THRESHOLD)),
        )

    @property
    def enabled_strategies(self) -> list[dict]:
        """Strategy blocks that are switched on, with the ``enabled`` flag removed."""
        out = []
        for block in self.strategies:
            block = dict(block)
            if block.pop("enabled", True):
                out.append(block)
        return out


@dataclass(frozen=True)
class ReplayConfig:
    """Settings for a single replay run, read from the YAML config."""

    snapshot_dir: Path
    output_dir: Path
    symbol: str = ""
    src: str = "close"
    history_window: Optional[int] = None
    engine: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def from_dict(cls, cfg: dict, base_dir: Optional[Path] = None) -> ReplayConfig:
        for key in ("snapshot_dir", "output_dir"):
            if key not in cfg:
                raise ValueError(f"replay config must contain a '{key}' key")

        base_dir = base_dir or Path.cwd()
        snapshot_dir = Path(cfg["snapshot_dir"])
        output_dir = Path(cfg["output_dir"])
        if not snapshot_dir.is_absolute():
            snapshot_dir = base_dir / snapshot_dir
        if not output_dir.is_absolute():
            output_dir = base_dir / output_dir

        window = cfg.get("history_window")
        if window is not None and (not isinstance(window, int) or window < 1):
            raise ValueError(f"history_window must be a positive integer, got {window!r}")

        return cls(
            snapshot_dir=snapshot_dir,
            output_dir=output_dir,
            symbol=str(cfg.get("symbol", "")),
            src=cfg.get("src", "close"),
            history_window=window,
            engine=EngineConfig.from_dict(cfg.get("engine")),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ReplayConfig:
        """Load a replay config; relative paths resolve against the file's directory."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        return cls.from_dict(cfg, base_dir=path.resolve().parent)
