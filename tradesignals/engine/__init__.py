"""Engine package — signal engine core and its configuration."""

from tradesignals.engine.config import EngineConfig, ReplayConfig
from tradesignals.engine.core import SignalEngine, combine_strategies

__all__ = ["EngineConfig", "ReplayConfig", "SignalEngine", "combine_strategies"]
