"""Strategy registry — maps type strings to builder functions."""

from __future__ import annotations

from typing import Callable

from .base import Strategy

StrategyBuilder = Callable[[dict], Strategy]

_REGISTRY: dict[str, StrategyBuilder] = {}

# Canonical evaluation order of the built-in strategies
DEFAULT_STRATEGY_TYPES: tuple[str, ...] = ("ma_crossover", "rsi", "mean_reversion", "momentum")


def register(name: str, builder: StrategyBuilder) -> None:
    """Register a strategy builder under the given name."""
    _REGISTRY[name] = builder


def registered() -> list[str]:
    return sorted(_REGISTRY)


def build_strategy(strategy_cfg: dict) -> Strategy:
    """Build a strategy from a strategy config block.

    Parameters
    ----------
    strategy_cfg : dict
        Must contain a ``type`` key that maps to a registered builder.
        Remaining keys are passed as ``params`` to the builder.

    Returns
    -------
    Strategy
    """
    cfg = dict(strategy_cfg)
    strategy_type = cfg.pop("type", None)
    if strategy_type is None:
        raise ValueError("strategy config must contain a 'type' key")
    if strategy_type not in _REGISTRY:
        raise ValueError(
            f"Unknown strategy type '{strategy_type}'. "
            f"Registered: {registered()}"
        )
    return _REGISTRY[strategy_type](cfg)


def default_strategies() -> list[Strategy]:
    """The four built-in evaluators with their default parameters."""
    return [build_strategy({"type": t}) for t in DEFAULT_STRATEGY_TYPES]


# Auto-register built-in strategies
from .ma_crossover import build as _build_ma  # noqa: E402
from .rsi import build as _build_rsi  # noqa: E402
from .mean_reversion import build as _build_mr  # noqa: E402
from .momentum import build as _build_momentum  # noqa: E402

register("ma_crossover", _build_ma)
register("rsi", _build_rsi)
register("mean_reversion", _build_mr)
register("momentum", _build_momentum)
