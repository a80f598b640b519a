"""Abstract market-data client interface.

Defines the contract the fetchers depend on. Provider-specific details
(base URL, key handling, error payloads) stay in the concrete implementation.
"""

from abc import ABC, abstractmethod
from typing import Any


class MarketDataClient(ABC):
    """Abstract base class for market-data API clients."""

    @abstractmethod
    def query(self, function: str, symbol: str, **params: str) -> dict[str, Any]:
        """Issue one GET for an API function and return the decoded JSON object.

        Raises:
            TransportError: Network failure, non-2xx status, or provider throttling.
            ParseError: Body is not a JSON object.
            NoDataError: Provider rejected the symbol outright.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying HTTP resources."""
        ...
