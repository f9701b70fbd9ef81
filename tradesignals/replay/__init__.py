"""Replay package — deterministic bar iteration and signal replay."""

from .bar_iterator import BarIterator
from .signal_replay import replay_signals
from .validation import validate_bars

__all__ = ["BarIterator", "replay_signals", "validate_bars"]
