"""Fixed-interval watchlist scanner.

One cycle walks the watchlist in order: fetch the quote, derive the flow
metrics, feed the ranker and print a summary line. After the last symbol
the top flow is printed and sent to Discord. The loop then sleeps for the
scan interval, so the real cadence is the interval plus the cycle time.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from topflow.core.logging import get_logger
from topflow.notifications.discord import format_cycle_result, format_symbol_line, send_discord
from topflow.processing.flow.metrics import derive_quote
from topflow.processing.flow.models import CycleResult
from topflow.processing.flow.ranking import FlowRanker
from topflow.providers.twelvedata.fields import FIELD_SOURCES

if TYPE_CHECKING:
    from topflow.config import Settings
    from topflow.providers.base import QuoteFetcher

logger = get_logger(__name__)

DeliverFn = Callable[[str, str], Awaitable[bool]]


class FlowScanner:
    """Runs scan cycles over the configured watchlist.

    Usage:
        scanner = FlowScanner(settings, fetcher=TwelveDataClient(...))
        await scanner.run_forever(shutdown_event)
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: QuoteFetcher,
        deliver: DeliverFn = send_discord,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._watchlist = settings.watchlist
        self._interval = settings.scan_interval_seconds
        self._webhook = settings.discord_webhook_url
        self._source_factory = FIELD_SOURCES[settings.field_parser]
        self._fetcher = fetcher
        self._deliver = deliver
        self._echo = echo

    async def run_cycle(self, shutdown_event: asyncio.Event | None = None) -> CycleResult | None:
        """Scan the watchlist once and notify about the top flow.

        Returns:
            The cycle's top flow, or None if no symbol could be ranked
        """
        ranker = FlowRanker()
        self._echo("Fetching tickers...")

        for symbol in self._watchlist:
            if shutdown_event is not None and shutdown_event.is_set():
                logger.info("Shutdown requested, abandoning cycle", symbol=symbol)
                return None

            payload = await self._fetcher.fetch_quote(symbol)
            if payload is None:
                continue

            quote = derive_quote(payload, symbol, self._source_factory)
            if quote is None:
                logger.debug("Skipping symbol without a rankable quote", symbol=symbol)
                continue

            ranker.offer(quote)
            self._echo(format_symbol_line(quote))

        result = ranker.finalize()
        if result is None:
            logger.info("No rankable quotes this cycle", symbols=len(self._watchlist))
            return None

        report = format_cycle_result(result)
        self._echo(report.console_report + "\n")

        if self._webhook is not None:
            sent = await self._deliver(self._webhook.get_secret_value(), report.delivery_payload)
            logger.info(
                "Top flow alert processed",
                symbol=result.quote.symbol,
                direction=result.direction.value,
                ranked=ranker.offered,
                delivered=sent,
            )
        return result

    async def run_forever(self, shutdown_event: asyncio.Event | None = None) -> None:
        """Run cycles until `shutdown_event` is set (forever if it is None)."""
        logger.info(
            "Flow scanner started",
            watchlist=list(self._watchlist),
            interval_seconds=self._interval,
        )
        while shutdown_event is None or not shutdown_event.is_set():
            try:
                await self.run_cycle(shutdown_event)
            except Exception:
                logger.exception("Scan cycle failed")

            if await self._sleep(shutdown_event):
                break
        logger.info("Flow scanner stopped")

    async def _sleep(self, shutdown_event: asyncio.Event | None) -> bool:
        """Wait out the scan interval. Returns True if shutdown was requested."""
        if shutdown_event is None:
            await asyncio.sleep(self._interval)
            return False
        try:
            await asyncio.wait_for(shutdown_event.wait(), timeout=self._interval)
        except TimeoutError:
            return False
        return True
