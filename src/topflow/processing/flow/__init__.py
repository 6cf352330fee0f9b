"""Directional flow scan: metrics, ranking and the scan loop.

The scanner lives in `topflow.processing.flow.scanner` and is not re-exported
here, since it depends on the notification layer.
"""

from topflow.processing.flow.metrics import derive_quote
from topflow.processing.flow.models import CycleResult, FlowDirection, SymbolQuote
from topflow.processing.flow.ranking import FlowRanker

__all__ = [
    "CycleResult",
    "FlowDirection",
    "FlowRanker",
    "SymbolQuote",
    "derive_quote",
]
