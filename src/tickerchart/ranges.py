"""Range resolution: map a named history window to its minimum date.

Pure date arithmetic with no I/O. Unknown or missing selections fall back
to the six-month window, so resolve_from_date never raises.
"""

import calendar
from datetime import date, timedelta

from tickerchart.models import RangeSelection


def subtract_months(value: date, months: int) -> date:
    """Step back a number of calendar months, clamping to the month's last day.

    Example: 2024-05-31 minus 3 months is 2024-02-29.
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def _coerce_selection(selection: RangeSelection | str | None) -> RangeSelection | None:
    if isinstance(selection, RangeSelection):
        return selection
    if isinstance(selection, str):
        try:
            return RangeSelection(selection)
        except ValueError:
            return None
    return None


def resolve_from_date(
    selection: RangeSelection | str | None, today: date | None = None
) -> date:
    """Return the inclusive minimum date for a range selection.

    Args:
        selection: A RangeSelection or its string value. None and unrecognized
            values resolve to the six-month window.
        today: Reference date; defaults to date.today().

    Returns:
        today minus 30 days, 3 months or 6 months.
    """
    if today is None:
        today = date.today()

    resolved = _coerce_selection(selection)
    if resolved is RangeSelection.LAST_30_DAYS:
        return today - timedelta(days=30)
    if resolved is RangeSelection.LAST_3_MONTHS:
        return subtract_months(today, 3)
    return subtract_months(today, 6)
