"""Tests for quote and price-series models and symbol normalization."""

from datetime import date
from decimal import Decimal

import pytest

from tickerchart.exceptions import ValidationError
from tickerchart.models import (
    PricePoint,
    PriceSeries,
    Quote,
    RangeSelection,
    normalize_symbol,
)


class TestQuote:
    def test_summary_uses_source_strings(self) -> None:
        quote = Quote(symbol="AAPL", price=Decimal("189.8400"), change_percent="0.6521%")
        assert quote.summary() == "AAPL → 💵 189.8400 USD (0.6521%)"

    def test_is_immutable(self) -> None:
        quote = Quote(symbol="AAPL", price=Decimal("1"), change_percent="0%")
        with pytest.raises(AttributeError):
            quote.price = Decimal("2")  # type: ignore[misc]


class TestPricePoint:
    def test_zero_close_allowed(self) -> None:
        assert PricePoint(date(2024, 1, 2), Decimal("0")).close == Decimal("0")

    def test_negative_close_rejected(self) -> None:
        with pytest.raises(ValueError):
            PricePoint(date(2024, 1, 2), Decimal("-0.01"))


class TestPriceSeries:
    def test_empty_series(self) -> None:
        series = PriceSeries(symbol="AAPL")
        assert series.is_empty
        assert len(series) == 0
        assert list(series) == []

    def test_accessors(self) -> None:
        series = PriceSeries(
            symbol="AAPL",
            points=(
                PricePoint(date(2024, 1, 1), Decimal("99.0")),
                PricePoint(date(2024, 1, 2), Decimal("100.0")),
            ),
        )
        assert not series.is_empty
        assert series.dates() == [date(2024, 1, 1), date(2024, 1, 2)]
        assert series.closes() == [Decimal("99.0"), Decimal("100.0")]

    def test_duplicate_dates_rejected(self) -> None:
        with pytest.raises(ValueError):
            PriceSeries(
                symbol="AAPL",
                points=(
                    PricePoint(date(2024, 1, 1), Decimal("1")),
                    PricePoint(date(2024, 1, 1), Decimal("2")),
                ),
            )

    def test_descending_dates_rejected(self) -> None:
        with pytest.raises(ValueError):
            PriceSeries(
                symbol="AAPL",
                points=(
                    PricePoint(date(2024, 1, 2), Decimal("1")),
                    PricePoint(date(2024, 1, 1), Decimal("2")),
                ),
            )


class TestNormalizeSymbol:
    def test_trims_and_uppercases(self) -> None:
        assert normalize_symbol("  msft ") == "MSFT"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_rejected(self, raw: str | None) -> None:
        with pytest.raises(ValidationError):
            normalize_symbol(raw)


def test_range_selection_labels() -> None:
    assert RangeSelection.LAST_30_DAYS.label == "Last 30 days"
    assert RangeSelection("Last6Months") is RangeSelection.LAST_6_MONTHS
