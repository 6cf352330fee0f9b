"""Data models for the directional flow scan.

A `SymbolQuote` lives for one symbol in one cycle; a `CycleResult` is the
winner of one cycle. Neither is kept across cycles.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FlowDirection(str, Enum):
    """Direction of the top flow. Zero flow counts as bullish."""

    bullish = "bullish"
    bearish = "bearish"

    @property
    def label(self) -> str:
        return "TOP BULL FLOW" if self is FlowDirection.bullish else "TOP BEAR FLOW"


class SymbolQuote(BaseModel):
    """Quote fields for one symbol plus the metrics derived from them."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    previous_close: float = 0.0
    change: float = 0.0
    volume: float = 0.0
    percent_change: float = 0.0
    average_volume: float = 0.0

    @property
    def price(self) -> float:
        # Twelve Data has no current price field
        return self.previous_close + self.change

    @property
    def relative_volume(self) -> float:
        """Today's volume as a multiple of average volume.

        Only meaningful when `average_volume > 0`; `derive_quote` never
        builds a quote that violates this.
        """
        return self.volume / self.average_volume

    @property
    def flow_score(self) -> float:
        return self.percent_change * self.relative_volume


class CycleResult(BaseModel):
    """The quote with the largest absolute flow score in a cycle."""

    model_config = ConfigDict(frozen=True)

    quote: SymbolQuote

    @property
    def direction(self) -> FlowDirection:
        return FlowDirection.bullish if self.quote.flow_score >= 0 else FlowDirection.bearish
