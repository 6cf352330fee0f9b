"""Pick the most extreme flow of a cycle."""

from __future__ import annotations

from topflow.processing.flow.models import CycleResult, SymbolQuote


class FlowRanker:
    """Running best-of-cycle accumulator.

    Quotes are offered in watchlist order. A later quote only wins with a
    strictly larger absolute flow score, so ties go to the earlier symbol.
    """

    def __init__(self) -> None:
        self._best: SymbolQuote | None = None
        self.offered = 0

    def offer(self, quote: SymbolQuote) -> None:
        self.offered += 1
        if self._best is None or abs(quote.flow_score) > abs(self._best.flow_score):
            self._best = quote

    def finalize(self) -> CycleResult | None:
        if self._best is None:
            return None
        return CycleResult(quote=self._best)
