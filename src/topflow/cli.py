"""CLI entry point for Top Flow."""

from __future__ import annotations

import argparse
import asyncio
import math
import signal
import sys

from pydantic import ValidationError

from topflow.config import Settings, get_settings
from topflow.core.exceptions import ConfigurationError
from topflow.core.logging import get_logger, setup_logging
from topflow.processing.flow.scanner import FlowScanner
from topflow.providers.twelvedata import TwelveDataClient

logger = get_logger(__name__)


def load_settings(interval: float | None = None) -> Settings:
    """Resolve settings once at startup and check the required secrets.

    Raises:
        ConfigurationError: if a required value is missing or invalid
    """
    try:
        settings = get_settings()
        if interval is not None:
            settings = Settings.model_validate(
                {**settings.model_dump(), "scan_interval_seconds": interval}
            )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
    settings.require_credentials()
    return settings


async def run(settings: Settings, once: bool = False) -> None:
    """Build the scanner and run it until a shutdown signal arrives."""
    client = TwelveDataClient(
        api_key=settings.require_credentials(),
        exchange=settings.exchange,
        timeout=settings.http_timeout,
    )
    scanner = FlowScanner(settings, fetcher=client)
    shutdown_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:
            # Windows event loops have no signal handler support
            pass

    try:
        if once:
            await scanner.run_cycle(shutdown_event)
        else:
            await scanner.run_forever(shutdown_event)
    finally:
        await client.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Top Flow: alert the watchlist symbol with the most extreme directional flow"
    )
    parser.add_argument("--once", action="store_true", help="Run a single scan cycle and exit")
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds to wait between scan cycles (default: TOPFLOW_SCAN_INTERVAL or 1800)",
    )
    args = parser.parse_args()

    if args.interval is not None and not (math.isfinite(args.interval) and args.interval > 0):
        parser.error("--interval must be a positive number of seconds")

    try:
        settings = load_settings(args.interval)
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    setup_logging(settings)
    print("Top Flow Bot")
    logger.info("Top Flow starting", env=settings.env, once=args.once)
    asyncio.run(run(settings, once=args.once))
