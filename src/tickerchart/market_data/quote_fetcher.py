"""Quote fetch: one GLOBAL_QUOTE call turned into a Quote record."""

from decimal import Decimal, InvalidOperation
from typing import Any

from tickerchart.exceptions import NoDataError, ParseError
from tickerchart.logging import get_logger
from tickerchart.market_data.client import MarketDataClient
from tickerchart.models import Quote

logger = get_logger(__name__)

QUOTE_FUNCTION = "GLOBAL_QUOTE"
QUOTE_KEY = "Global Quote"
PRICE_FIELD = "05. price"
CHANGE_PERCENT_FIELD = "10. change percent"


def parse_quote(symbol: str, payload: dict[str, Any]) -> Quote:
    """Extract a Quote from a decoded GLOBAL_QUOTE response.

    An absent or empty "Global Quote" object means the symbol is unknown or
    no quote is available; that is reported as NoDataError, never as a
    zero-valued Quote.

    Raises:
        NoDataError: The quote object is missing or empty.
        ParseError: The quote object or its fields have the wrong shape.
    """
    quote = payload.get(QUOTE_KEY)
    if quote is None:
        raise NoDataError(symbol, f"No quote found for {symbol}")
    if not isinstance(quote, dict):
        raise ParseError(f"'{QUOTE_KEY}' is not an object")
    if not quote:
        raise NoDataError(symbol, f"No quote found for {symbol}")

    price_raw = _require_string(quote, PRICE_FIELD)
    change_percent = _require_string(quote, CHANGE_PERCENT_FIELD)

    try:
        price = Decimal(price_raw)
    except InvalidOperation as exc:
        raise ParseError(f"'{PRICE_FIELD}' is not a number: {price_raw!r}") from exc
    if not price.is_finite():
        raise ParseError(f"'{PRICE_FIELD}' is not a finite number: {price_raw!r}")

    return Quote(symbol=symbol, price=price, change_percent=change_percent)


def _require_string(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise ParseError(f"Quote field '{key}' is missing or not a string")
    return value


class QuoteFetcher:
    """Fetches the current quote for a symbol.

    Stateless apart from the shared client; safe to call from several
    worker threads at once.
    """

    def __init__(self, client: MarketDataClient) -> None:
        self._client = client

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch and parse the current quote for an already-normalized symbol.

        No retries: a failure surfaces once as TransportError, ParseError or
        NoDataError.
        """
        logger.info("fetching_quote", symbol=symbol)
        payload = self._client.query(QUOTE_FUNCTION, symbol)
        quote = parse_quote(symbol, payload)
        logger.info(
            "quote_fetched",
            symbol=symbol,
            price=str(quote.price),
            change_percent=quote.change_percent,
        )
        return quote
