"""Tests for logging setup and per-request context binding."""

import logging

import structlog

from tickerchart.logging import log_context, setup_logging


def test_log_context_binds_fields_inside_block_only() -> None:
    with log_context(route="quote", requested_symbol="AAPL"):
        bound = structlog.contextvars.get_contextvars()
        assert bound["route"] == "quote"
        assert bound["requested_symbol"] == "AAPL"

    assert "route" not in structlog.contextvars.get_contextvars()


def test_setup_logging_sets_level_and_quiets_http_libraries() -> None:
    setup_logging("DEBUG")
    try:
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
