from .core.interfaces import Indicator, validate_period
from .impl.ma import SMA, sma
from .impl.ema import EMA, ema
from .impl.rsi import RSI, NEUTRAL_RSI, rsi

__all__ = [
    "Indicator",
    "validate_period",
    "SMA",
    "EMA",
    "RSI",
    "NEUTRAL_RSI",
    "sma",
    "ema",
    "rsi",
]
