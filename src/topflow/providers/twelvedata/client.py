"""Twelve Data API client for real-time quotes.

- Quote: https://api.twelvedata.com/quote?symbol=AAPL&exchange=NASDAQ&apikey=...

The raw response body is returned untouched; field extraction happens in
`topflow.providers.twelvedata.fields`.
"""

from __future__ import annotations

import httpx
from pydantic import SecretStr

from topflow.core.exceptions import QuoteFetchError
from topflow.core.logging import get_logger

logger = get_logger(__name__)

TWELVE_DATA_QUOTE_URL = "https://api.twelvedata.com/quote"

# Literal marker Twelve Data puts in the body when it rejects a request
ERROR_MARKER = '"status":"error"'


class TwelveDataClient:
    """Client for the Twelve Data quote endpoint.

    Usage:
        client = TwelveDataClient(api_key=settings.twelve_data_api_key)
        payload = await client.fetch_quote("AAPL")
        await client.close()
    """

    def __init__(
        self,
        api_key: SecretStr,
        exchange: str = "NASDAQ",
        timeout: float = 30.0,
        base_url: str = TWELVE_DATA_QUOTE_URL,
    ) -> None:
        self._api_key = api_key
        self._exchange = exchange
        self._timeout = timeout
        self._base_url = base_url
        self._http_client: httpx.AsyncClient | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={
                    "User-Agent": "Mozilla/5.0 (compatible; TopFlow/1.0)",
                    "Accept": "application/json",
                },
            )
        return self._http_client

    async def get_quote_text(self, symbol: str) -> str:
        """Fetch the raw quote body for a symbol.

        Raises:
            QuoteFetchError: on transport errors, non-2xx status or an empty body
        """
        client = self._get_http_client()
        try:
            resp = await client.get(
                self._base_url,
                params={
                    "symbol": symbol,
                    "exchange": self._exchange,
                    "apikey": self._api_key.get_secret_value(),
                },
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            # str(e) would include the request URL, which carries the API key
            raise QuoteFetchError(symbol, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise QuoteFetchError(symbol, type(e).__name__) from e

        if not resp.text.strip():
            raise QuoteFetchError(symbol, "empty response")
        return resp.text

    async def fetch_quote(self, symbol: str) -> str | None:
        """Fetch the raw quote body, or None if it could not be fetched."""
        try:
            return await self.get_quote_text(symbol)
        except QuoteFetchError as e:
            logger.warning("Quote fetch failed", symbol=symbol, reason=e.reason)
            return None

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
