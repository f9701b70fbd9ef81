from typing import Protocol, runtime_checkable

from tradesignals.series import PriceLike


@runtime_checkable
class Indicator(Protocol):
    name: str
    lookback: int

    def value(self, prices: PriceLike) -> float:
        """
        Computes the indicator value at the end of the series.

        Args:
            prices: Chronological prices, oldest first.

        Returns:
            The indicator value. When the series is too short, a documented
            degenerate value is returned instead of raising.
        """
        ...


def validate_period(period: int) -> None:
    """
    Validates an indicator or strategy period.

    Args:
        period: Window length.

    Raises:
        ValueError: If the period is not a positive integer.
    """
    if isinstance(period, bool) or not isinstance(period, int) or period < 1:
        raise ValueError(f"Period must be a positive integer, got {period!r}")
