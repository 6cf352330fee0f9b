"""Custom exceptions for Top Flow."""


class TopFlowError(Exception):
    """Base exception for all Top Flow errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


class ConfigurationError(TopFlowError):
    """Required configuration is missing or invalid. Fatal at startup."""


# Provider errors
class ProviderError(TopFlowError):
    """Base error for quote providers."""


class QuoteFetchError(ProviderError):
    """A quote could not be fetched for a symbol."""

    def __init__(self, symbol: str, reason: str) -> None:
        self.symbol = symbol
        self.reason = reason
        super().__init__(f"Failed to fetch quote for {symbol}: {reason}")
