from .signal import Action, Signal, clamp_confidence, clamp_strength
from .base import Strategy, insufficient_data
from .ma_crossover import MACrossoverStrategy
from .rsi import RSIStrategy
from .mean_reversion import MeanReversionStrategy
from .momentum import MomentumStrategy
from .registry import build_strategy, default_strategies, register

__all__ = [
    "Action",
    "Signal",
    "clamp_confidence",
    "clamp_strength",
    "Strategy",
    "insufficient_data",
    "MACrossoverStrategy",
    "RSIStrategy",
    "MeanReversionStrategy",
    "MomentumStrategy",
    "build_strategy",
    "default_strategies",
    "register",
]
