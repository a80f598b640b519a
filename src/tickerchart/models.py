"""Shared data models for quotes and daily price history.

All prices use Decimal, parsed straight from the provider's string fields,
so values match the source exactly.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from tickerchart.exceptions import ValidationError


class RangeSelection(str, Enum):
    """Named history window offered to the user."""

    LAST_30_DAYS = "Last30Days"
    LAST_3_MONTHS = "Last3Months"
    LAST_6_MONTHS = "Last6Months"

    @property
    def label(self) -> str:
        return _RANGE_LABELS[self]


_RANGE_LABELS = {
    RangeSelection.LAST_30_DAYS: "Last 30 days",
    RangeSelection.LAST_3_MONTHS: "Last 3 months",
    RangeSelection.LAST_6_MONTHS: "Last 6 months",
}

DEFAULT_RANGE_SELECTION = RangeSelection.LAST_3_MONTHS


@dataclass(frozen=True)
class Quote:
    """Current quote for a single symbol. Created per fetch, never cached."""

    symbol: str
    price: Decimal
    change_percent: str  # provider string, e.g. "0.6520%"

    def summary(self) -> str:
        """One-line display string, e.g. 'AAPL → 💵 189.8400 USD (0.6520%)'."""
        return f"{self.symbol} → 💵 {self.price} USD ({self.change_percent})"


@dataclass(frozen=True)
class PricePoint:
    """Closing price for one trading day."""

    date: date
    close: Decimal

    def __post_init__(self) -> None:
        if self.close < 0:
            raise ValueError(f"close must be non-negative, got {self.close}")


@dataclass(frozen=True)
class PriceSeries:
    """Daily closes for one symbol, strictly ascending by date.

    Immutable once built. An empty series is valid and means no trading
    days fell inside the requested window.
    """

    symbol: str
    points: tuple[PricePoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for previous, current in zip(self.points, self.points[1:]):
            if current.date <= previous.date:
                raise ValueError(
                    f"points must be strictly ascending by date: "
                    f"{previous.date} then {current.date}"
                )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def dates(self) -> list[date]:
        return [point.date for point in self.points]

    def closes(self) -> list[Decimal]:
        return [point.close for point in self.points]


def normalize_symbol(raw: str | None) -> str:
    """Trim and uppercase a user-entered ticker.

    Raises:
        ValidationError: If nothing is left after trimming.
    """
    symbol = (raw or "").strip().upper()
    if not symbol:
        raise ValidationError("Enter a ticker symbol (for example: AAPL)")
    return symbol
