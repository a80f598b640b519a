"""Entry point for the ticker chart dashboard.

Wires settings, logging, the shared Alpha Vantage client and both fetchers,
then serves the FastAPI dashboard with uvicorn. The shared HTTP client is
closed in the app's lifespan on shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tickerchart.config import AppSettings
from tickerchart.dashboard.app import create_dashboard_app
from tickerchart.logging import get_logger, setup_logging
from tickerchart.market_data.alpha_vantage_client import AlphaVantageClient
from tickerchart.market_data.history_fetcher import HistoryFetcher
from tickerchart.market_data.quote_fetcher import QuoteFetcher


def build_app(settings: AppSettings) -> FastAPI:
    """Build the dashboard app and everything it depends on from settings."""
    logger = get_logger("tickerchart.main")

    client = AlphaVantageClient(settings.alphavantage)
    if not settings.alphavantage.api_key.get_secret_value():
        logger.warning(
            "no_api_key_configured",
            note="Set ALPHAVANTAGE_API_KEY; requests will be refused without it.",
        )

    quote_fetcher = QuoteFetcher(client)
    history_fetcher = HistoryFetcher(client, outputsize=settings.alphavantage.outputsize)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            client.close()
            logger.info("market_data_client_closed")

    return create_dashboard_app(quote_fetcher, history_fetcher, lifespan=lifespan)


def main() -> None:
    """Synchronous entry point."""
    settings = AppSettings()
    setup_logging(settings.log_level)
    logger = get_logger("tickerchart.main")

    app = build_app(settings)
    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
    )
    uvicorn.run(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )


if __name__ == "__main__":
    main()
