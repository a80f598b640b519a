"""Market data layer -- Alpha Vantage client, quote fetch, and daily history fetch."""

from tickerchart.market_data.alpha_vantage_client import AlphaVantageClient
from tickerchart.market_data.client import MarketDataClient
from tickerchart.market_data.history_fetcher import HistoryFetcher, build_price_series
from tickerchart.market_data.quote_fetcher import QuoteFetcher, parse_quote

__all__ = [
    "AlphaVantageClient",
    "HistoryFetcher",
    "MarketDataClient",
    "QuoteFetcher",
    "build_price_series",
    "parse_quote",
]
