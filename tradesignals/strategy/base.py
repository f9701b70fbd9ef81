from dataclasses import fields
from typing import Protocol, runtime_checkable

from tradesignals.series import PriceLike

from .signal import Signal

INSUFFICIENT_DATA = "Insufficient data"


@runtime_checkable
class Strategy(Protocol):
    """
    Protocol for a signal evaluator.
    """
    @property
    def name(self) -> str: ...

    @property
    def lookback(self) -> int:
        """
        Minimum number of prices needed before a non-Hold signal is possible.
        """
        ...

    def evaluate(self, prices: PriceLike) -> Signal:
        """
        Produces a Signal from the price history. Never raises on short data.
        """
        ...


def insufficient_data() -> Signal:
    """
    Hold with zero strength and zero confidence: total absence of evidence.
    """
    return Signal.hold(INSUFFICIENT_DATA, confidence=0.0)


def _require_number(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")


def validate_confidence(name: str, value: float) -> None:
    _require_number(name, value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value!r}")


def validate_non_negative(name: str, value: float) -> None:
    _require_number(name, value)
    if not value >= 0.0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")


def from_params(cls, params: dict):
    """
    Helper to construct a strategy dataclass from a config params dict.
    Private fields (leading underscore) are not configurable, except that a
    ``name`` key sets ``_name`` so one type can run twice under two names.
    """
    params = dict(params)
    allowed = {f.name for f in fields(cls) if not f.name.startswith("_")}
    unknown = set(params) - allowed - {"name"}
    if unknown:
        raise ValueError(
            f"Unknown parameters for {cls.__name__}: {sorted(unknown)}. "
            f"Allowed: {sorted(allowed | {'name'})}"
        )
    if "name" in params:
        name = params.pop("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Strategy name must be a non-empty string, got {name!r}")
        params["_name"] = name
    return cls(**params)
