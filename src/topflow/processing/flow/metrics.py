"""Derive a `SymbolQuote` from one raw quote payload."""

from __future__ import annotations

from collections.abc import Callable

from topflow.processing.flow.models import SymbolQuote
from topflow.providers.base import FieldSource
from topflow.providers.twelvedata.client import ERROR_MARKER
from topflow.providers.twelvedata.fields import ScanFieldSource

# Wire keys, quoted so "volume" cannot match inside "average_volume"
KEY_PREVIOUS_CLOSE = '"previous_close"'
KEY_CHANGE = '"change"'
KEY_VOLUME = '"volume"'
KEY_PERCENT_CHANGE = '"percent_change"'
KEY_AVERAGE_VOLUME = '"average_volume"'


def derive_quote(
    payload: str,
    symbol: str,
    source_factory: Callable[[str], FieldSource] = ScanFieldSource,
) -> SymbolQuote | None:
    """Build a quote from a payload, or None if it cannot be ranked.

    A payload is rejected when the upstream reports an error, or when the
    average volume is not positive (missing history reads as zero).
    """
    if ERROR_MARKER in payload:
        return None

    fields = source_factory(payload)

    def read(key: str) -> float:
        value = fields.get(key)
        return 0.0 if value is None else value

    average_volume = read(KEY_AVERAGE_VOLUME)
    if average_volume <= 0:
        return None

    return SymbolQuote(
        symbol=symbol,
        previous_close=read(KEY_PREVIOUS_CLOSE),
        change=read(KEY_CHANGE),
        volume=read(KEY_VOLUME),
        percent_change=read(KEY_PERCENT_CHANGE),
        average_volume=average_volume,
    )
