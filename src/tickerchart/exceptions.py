"""Custom exceptions for the ticker chart pipeline.

Every failure a fetch can report is one of the four kinds below, so callers
can render a short message per kind instead of parsing free text.
"""


class TickerChartError(Exception):
    """Base exception for all ticker chart errors."""


class ValidationError(TickerChartError):
    """Raised when a ticker symbol is empty or otherwise unusable."""


class TransportError(TickerChartError):
    """Raised on network, HTTP status, or provider throttling failures.

    The underlying exception (when there is one) is chained as __cause__.
    """


class ParseError(TickerChartError):
    """Raised when a response body does not match the expected JSON shape."""


class NoDataError(TickerChartError):
    """Raised when a well-formed response carries no data for the symbol."""

    def __init__(self, symbol: str, message: str | None = None) -> None:
        self.symbol = symbol
        super().__init__(message or f"No data available for symbol {symbol}")
