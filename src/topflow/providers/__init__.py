"""Quote data providers."""

from topflow.providers.base import FieldSource, QuoteFetcher

__all__ = ["FieldSource", "QuoteFetcher"]
