"""Daily history fetch: TIME_SERIES_DAILY parsed, sorted ascending, date-filtered.

The provider returns its "Time Series (Daily)" object newest first, but key
order is not relied on: entries are parsed into a date -> close mapping,
sorted explicitly, then filtered. Sort always happens before filter.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from tickerchart.exceptions import NoDataError, ParseError
from tickerchart.logging import get_logger
from tickerchart.market_data.client import MarketDataClient
from tickerchart.models import PricePoint, PriceSeries, RangeSelection
from tickerchart.ranges import resolve_from_date

logger = get_logger(__name__)

HISTORY_FUNCTION = "TIME_SERIES_DAILY"
SERIES_KEY = "Time Series (Daily)"
CLOSE_FIELD = "4. close"
DATE_FORMAT = "%Y-%m-%d"


def parse_daily_closes(symbol: str, payload: dict[str, Any]) -> dict[date, Decimal]:
    """Parse the daily series object into a date -> close mapping.

    Any bad entry fails the whole response; partial series are never returned.

    Raises:
        NoDataError: The series object is absent.
        ParseError: A key is not YYYY-MM-DD, or a value lacks a valid close.
    """
    series = payload.get(SERIES_KEY)
    if series is None:
        raise NoDataError(symbol, f"No historical data found for {symbol}")
    if not isinstance(series, dict):
        raise ParseError(f"'{SERIES_KEY}' is not an object")

    closes: dict[date, Decimal] = {}
    for raw_date, entry in series.items():
        day = _parse_date(raw_date)
        if day in closes:
            raise ParseError(f"Date {day.isoformat()} appears more than once")
        if not isinstance(entry, dict) or CLOSE_FIELD not in entry:
            raise ParseError(f"Entry for {raw_date} has no '{CLOSE_FIELD}' field")
        closes[day] = _parse_close(raw_date, entry[CLOSE_FIELD])
    return closes


def _parse_date(raw: str) -> date:
    try:
        day = datetime.strptime(raw, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Invalid date key {raw!r}, expected YYYY-MM-DD") from exc
    # strptime also accepts 2024-1-2
    if day.isoformat() != raw:
        raise ParseError(f"Invalid date key {raw!r}, expected YYYY-MM-DD")
    return day


def _parse_close(raw_date: str, raw_close: Any) -> Decimal:
    if not isinstance(raw_close, (str, int, float)) or isinstance(raw_close, bool):
        raise ParseError(f"'{CLOSE_FIELD}' for {raw_date} is not a number: {raw_close!r}")
    try:
        # via str so a JSON float keeps its printed digits
        close = Decimal(str(raw_close))
    except InvalidOperation as exc:
        raise ParseError(
            f"'{CLOSE_FIELD}' for {raw_date} is not a number: {raw_close!r}"
        ) from exc
    if not close.is_finite() or close < 0:
        raise ParseError(f"'{CLOSE_FIELD}' for {raw_date} is out of range: {raw_close!r}")
    return close


def build_price_series(
    symbol: str, payload: dict[str, Any], from_date: date
) -> PriceSeries:
    """Turn a decoded TIME_SERIES_DAILY payload into a filtered PriceSeries.

    Pure function of its arguments: sorts ascending by date, then keeps every
    entry on or after from_date. An empty result is valid.
    """
    closes = parse_daily_closes(symbol, payload)
    ordered = sorted(closes.items())
    points = tuple(
        PricePoint(date=day, close=close) for day, close in ordered if day >= from_date
    )
    return PriceSeries(symbol=symbol, points=points)


class HistoryFetcher:
    """Fetches compact daily closing-price history for a symbol.

    Usage:
        fetcher = HistoryFetcher(client)
        series = fetcher.fetch_history_for_range("AAPL", RangeSelection.LAST_30_DAYS)
    """

    def __init__(self, client: MarketDataClient, outputsize: str = "compact") -> None:
        self._client = client
        self._outputsize = outputsize

    def fetch_history(self, symbol: str, from_date: date) -> PriceSeries:
        """Fetch daily closes for an already-normalized symbol, keeping dates >= from_date.

        One request, no pagination and no retries.

        Raises:
            TransportError: The request itself failed.
            ParseError: The series has the wrong shape.
            NoDataError: The response has no daily series at all.
        """
        logger.info("fetching_history", symbol=symbol, from_date=from_date.isoformat())
        payload = self._client.query(
            HISTORY_FUNCTION, symbol, outputsize=self._outputsize
        )
        series = build_price_series(symbol, payload, from_date)
        logger.info(
            "history_filtered",
            symbol=symbol,
            from_date=from_date.isoformat(),
            points=len(series),
        )
        return series

    def fetch_history_for_range(
        self,
        symbol: str,
        selection: RangeSelection | str | None,
        today: date | None = None,
    ) -> PriceSeries:
        """Resolve a named range to its minimum date, then fetch_history."""
        from_date = resolve_from_date(selection, today)
        return self.fetch_history(symbol, from_date)
