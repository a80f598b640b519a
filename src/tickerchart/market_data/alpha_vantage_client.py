"""Alpha Vantage client implementation over a shared synchronous httpx.Client.

One client instance serves every request so connection setup is amortized.
httpx and JSON failures are translated into the project's exception kinds
here; nothing above this module sees a raw httpx error.
"""

from typing import Any

import httpx

from tickerchart.config import AlphaVantageSettings
from tickerchart.exceptions import NoDataError, ParseError, TransportError
from tickerchart.logging import get_logger
from tickerchart.market_data.client import MarketDataClient

logger = get_logger(__name__)

_DEFAULT_HEADERS = {"Accept": "application/json"}

# Alpha Vantage answers throttled or rejected calls with HTTP 200 and one of
# these keys instead of the requested payload.
_ERROR_MESSAGE_KEY = "Error Message"
_THROTTLE_KEYS = ("Note", "Information")


class AlphaVantageClient(MarketDataClient):
    """Concrete client for https://www.alphavantage.co/query."""

    def __init__(
        self,
        settings: AlphaVantageSettings,
        http: httpx.Client | None = None,
    ) -> None:
        self._settings = settings
        self._owns_http = http is None
        self._http = http or httpx.Client(
            timeout=settings.timeout_seconds,
            headers=_DEFAULT_HEADERS.copy(),
        )

    def __enter__(self) -> "AlphaVantageClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def query(self, function: str, symbol: str, **params: str) -> dict[str, Any]:
        request_params = {
            "function": function,
            "symbol": symbol,
            **params,
            "apikey": self._settings.api_key.get_secret_value(),
        }
        logger.debug("market_data_request", function=function, symbol=symbol, **params)

        try:
            response = self._http.get(self._settings.base_url, params=request_params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "market_data_http_error",
                function=function,
                symbol=symbol,
                status_code=exc.response.status_code,
            )
            raise TransportError(
                f"Market data API returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "market_data_transport_error",
                function=function,
                symbol=symbol,
                error=type(exc).__name__,
            )
            raise TransportError(f"Market data request failed: {type(exc).__name__}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError("Market data response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise ParseError(
                f"Expected a JSON object from market data API, got {type(payload).__name__}"
            )

        self._raise_for_provider_message(payload, function, symbol)
        return payload

    @staticmethod
    def _raise_for_provider_message(
        payload: dict[str, Any], function: str, symbol: str
    ) -> None:
        """Map Alpha Vantage's in-body error messages to exception kinds."""
        if _ERROR_MESSAGE_KEY in payload:
            logger.info(
                "market_data_rejected_call",
                function=function,
                symbol=symbol,
                provider_message=payload[_ERROR_MESSAGE_KEY],
            )
            raise NoDataError(symbol)

        for key in _THROTTLE_KEYS:
            # Only a bare message counts; real payloads never carry these keys alone
            if key in payload and len(payload) == 1:
                logger.warning(
                    "market_data_throttled",
                    function=function,
                    symbol=symbol,
                    provider_message=payload[key],
                )
                raise TransportError(f"Market data API refused the call: {payload[key]}")
