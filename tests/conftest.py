"""Shared test fixtures for the ticker chart pipeline."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from tickerchart.config import AlphaVantageSettings
from tickerchart.market_data.client import MarketDataClient


@pytest.fixture
def av_settings() -> AlphaVantageSettings:
    """Alpha Vantage settings with a dummy key and the default endpoint."""
    return AlphaVantageSettings(
        api_key="test-api-key",  # type: ignore[arg-type]
        base_url="https://www.alphavantage.co/query",
        timeout_seconds=2.0,
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """MarketDataClient double; set .query.return_value per test."""
    return MagicMock(spec=MarketDataClient)


@pytest.fixture
def quote_payload() -> dict[str, Any]:
    """A realistic GLOBAL_QUOTE response body."""
    return {
        "Global Quote": {
            "01. symbol": "AAPL",
            "02. open": "188.5000",
            "03. high": "190.3200",
            "04. low": "187.9100",
            "05. price": "189.8400",
            "06. volume": "48087681",
            "07. latest trading day": "2024-03-15",
            "08. previous close": "188.6100",
            "09. change": "1.2300",
            "10. change percent": "0.6521%",
        }
    }


@pytest.fixture
def history_payload() -> dict[str, Any]:
    """A TIME_SERIES_DAILY response body, newest first as the API sends it."""
    return {
        "Meta Data": {
            "1. Information": "Daily Prices (open, high, low, close) and Volumes",
            "2. Symbol": "AAPL",
            "3. Last Refreshed": "2024-03-15",
            "4. Output Size": "Compact",
            "5. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2024-03-15": {"1. open": "171.1700", "4. close": "172.6200", "5. volume": "121664700"},
            "2024-03-14": {"1. open": "172.9100", "4. close": "173.0000", "5. volume": "72913507"},
            "2024-03-13": {"1. open": "172.7700", "4. close": "171.1300", "5. volume": "51948951"},
            "2024-02-29": {"1. open": "181.2700", "4. close": "180.7500", "5. volume": "136682597"},
            "2024-02-15": {"1. open": "183.5500", "4. close": "183.8600", "5. volume": "65434496"},
        },
    }
