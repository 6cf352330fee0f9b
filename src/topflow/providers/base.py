"""Abstract provider protocols for quote data.

Consumers depend on these protocols rather than on a concrete vendor, so a
different quote source or payload decoder can be dropped in without
touching the flow engine.

Provider Types:
- QuoteFetcher: fetches the raw quote payload for one symbol
- FieldSource: reads named numeric fields out of one raw payload
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class QuoteFetcher(Protocol):
    """Protocol for fetching raw quote payloads."""

    async def fetch_quote(self, symbol: str) -> str | None:
        """Fetch the raw quote payload for a symbol.

        Args:
            symbol: Ticker symbol (e.g., "AAPL")

        Returns:
            Raw response text, or None if the fetch failed or returned nothing
        """
        ...

    async def close(self) -> None:
        """Clean up resources."""
        ...


@runtime_checkable
class FieldSource(Protocol):
    """Protocol for reading named numeric fields from a quote payload."""

    def get(self, key: str) -> float | None:
        """Return the numeric value for `key`, or None if it cannot be read."""
        ...
