"""Tests for range resolution.

Month steps are calendar months clamped to the end of the target month.
"""

from datetime import date, timedelta

import pytest

from tickerchart.models import RangeSelection
from tickerchart.ranges import resolve_from_date, subtract_months


class TestSubtractMonths:
    def test_simple(self) -> None:
        assert subtract_months(date(2024, 6, 15), 3) == date(2024, 3, 15)

    def test_crosses_year_boundary(self) -> None:
        assert subtract_months(date(2024, 2, 10), 6) == date(2023, 8, 10)

    def test_clamps_to_leap_day(self) -> None:
        assert subtract_months(date(2024, 5, 31), 3) == date(2024, 2, 29)

    def test_clamps_to_short_month(self) -> None:
        assert subtract_months(date(2023, 8, 31), 6) == date(2023, 2, 28)


class TestResolveFromDate:
    TODAY = date(2024, 3, 15)

    def test_last_30_days(self) -> None:
        assert resolve_from_date(RangeSelection.LAST_30_DAYS, self.TODAY) == date(2024, 2, 14)

    def test_last_3_months(self) -> None:
        assert resolve_from_date(RangeSelection.LAST_3_MONTHS, self.TODAY) == date(2023, 12, 15)

    def test_last_6_months(self) -> None:
        assert resolve_from_date(RangeSelection.LAST_6_MONTHS, self.TODAY) == date(2023, 9, 15)

    def test_accepts_string_values(self) -> None:
        assert resolve_from_date("Last30Days", self.TODAY) == self.TODAY - timedelta(days=30)
        assert resolve_from_date("Last3Months", self.TODAY) == date(2023, 12, 15)

    @pytest.mark.parametrize("selection", [None, "", "LastYear", "last30days", 42])
    def test_unknown_falls_back_to_six_months(self, selection: object) -> None:
        assert resolve_from_date(selection, self.TODAY) == date(2023, 9, 15)  # type: ignore[arg-type]

    def test_defaults_to_today(self) -> None:
        expected = date.today() - timedelta(days=30)
        assert resolve_from_date(RangeSelection.LAST_30_DAYS) == expected
