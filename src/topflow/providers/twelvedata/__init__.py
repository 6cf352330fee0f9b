"""Twelve Data quote provider."""

from topflow.providers.twelvedata.client import ERROR_MARKER, TwelveDataClient
from topflow.providers.twelvedata.fields import (
    FIELD_SOURCES,
    JsonFieldSource,
    ScanFieldSource,
    extract_numeric_field,
)

__all__ = [
    "ERROR_MARKER",
    "FIELD_SOURCES",
    "JsonFieldSource",
    "ScanFieldSource",
    "TwelveDataClient",
    "extract_numeric_field",
]
