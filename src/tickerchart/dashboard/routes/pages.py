"""Page route serving the ticker chart HTML template."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tickerchart.models import DEFAULT_RANGE_SELECTION, RangeSelection

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Main page: ticker input, quote/chart buttons, and range selector."""
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(request, "index.html", {
        "default_symbol": "AAPL",
        "ranges": list(RangeSelection),
        "default_range": DEFAULT_RANGE_SELECTION,
    })
