"""JSON API endpoints for quote lookup and chart history.

Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
so the blocking HTTP fetches never stall the event loop.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from tickerchart.exceptions import (
    NoDataError,
    ParseError,
    TickerChartError,
    TransportError,
    ValidationError,
)
from tickerchart.logging import log_context
from tickerchart.market_data.history_fetcher import HistoryFetcher
from tickerchart.market_data.quote_fetcher import QuoteFetcher
from tickerchart.models import DEFAULT_RANGE_SELECTION, normalize_symbol
from tickerchart.ranges import resolve_from_date

log = structlog.get_logger(__name__)

router = APIRouter()

_ERROR_STATUS: dict[type[TickerChartError], int] = {
    ValidationError: 400,
    NoDataError: 404,
    ParseError: 502,
    TransportError: 502,
}


def user_message(exc: TickerChartError) -> str:
    """Short human-readable message for an error kind."""
    if isinstance(exc, ValidationError):
        return str(exc)
    if isinstance(exc, NoDataError):
        return f"No information found for {exc.symbol}."
    if isinstance(exc, TransportError):
        return "Could not reach the market data service. Try again later."
    if isinstance(exc, ParseError):
        return "The market data service returned an unexpected response."
    return "Something went wrong while fetching market data."


def _error_response(exc: TickerChartError) -> JSONResponse:
    status = _ERROR_STATUS.get(type(exc), 500)
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "message": user_message(exc)},
    )


def _decimal_to_str(obj: Any) -> Any:
    """Recursively convert Decimal and date values to strings for JSON serialization."""
    if isinstance(obj, (Decimal, date)):
        return str(obj)
    if isinstance(obj, dict):
        return {k: _decimal_to_str(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_decimal_to_str(item) for item in obj]
    return obj


@router.get("/quote/{symbol}")
def get_quote(request: Request, symbol: str) -> JSONResponse:
    """Current price and percent change for one symbol."""
    quote_fetcher: QuoteFetcher = request.app.state.quote_fetcher
    with log_context(route="quote", requested_symbol=symbol):
        try:
            normalized = normalize_symbol(symbol)
            quote = quote_fetcher.fetch_quote(normalized)
        except TickerChartError as exc:
            log.warning("quote_request_failed", error=type(exc).__name__)
            return _error_response(exc)

    return JSONResponse(content=_decimal_to_str({
        "symbol": quote.symbol,
        "price": quote.price,
        "change_percent": quote.change_percent,
        "summary": quote.summary(),
    }))


@router.get("/history/{symbol}")
def get_history(
    request: Request,
    symbol: str,
    selection: str = Query(DEFAULT_RANGE_SELECTION.value, alias="range"),
) -> JSONResponse:
    """Ascending daily closes for one symbol within the selected range.

    Unknown range values fall back to six months rather than failing.
    """
    history_fetcher: HistoryFetcher = request.app.state.history_fetcher
    with log_context(route="history", requested_symbol=symbol, range=selection):
        try:
            normalized = normalize_symbol(symbol)
            from_date = resolve_from_date(selection)
            series = history_fetcher.fetch_history(normalized, from_date)
        except TickerChartError as exc:
            log.warning("history_request_failed", error=type(exc).__name__)
            return _error_response(exc)

    return JSONResponse(content=_decimal_to_str({
        "symbol": series.symbol,
        "range": selection,
        "from_date": from_date,
        "points": [{"date": p.date, "close": p.close} for p in series],
    }))
