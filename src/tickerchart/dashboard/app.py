"""FastAPI dashboard application factory with Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from tickerchart.dashboard.routes import api, pages
from tickerchart.market_data.history_fetcher import HistoryFetcher
from tickerchart.market_data.quote_fetcher import QuoteFetcher

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_dashboard_app(
    quote_fetcher: QuoteFetcher,
    history_fetcher: HistoryFetcher,
    lifespan: Any = None,
) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        quote_fetcher: Serves /api/quote.
        history_fetcher: Serves /api/history.
        lifespan: Optional async context manager for application lifespan events.
                  Used by main.py to close the shared HTTP client on shutdown.

    Returns:
        Configured FastAPI application with templates and routes.
    """
    app = FastAPI(
        title="Ticker Chart",
        lifespan=lifespan,
    )

    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.templates = templates

    app.state.quote_fetcher = quote_fetcher
    app.state.history_fetcher = history_fetcher

    app.include_router(pages.router)
    app.include_router(api.router, prefix="/api")

    return app
