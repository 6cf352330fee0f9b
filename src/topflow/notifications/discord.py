"""Discord webhook notification service.

Renders the winning symbol of a scan cycle and posts it as a plain
`content` message via Discord webhook.
"""

from __future__ import annotations

from typing import NamedTuple

import httpx

from topflow.core.logging import get_logger
from topflow.processing.flow.models import CycleResult, SymbolQuote

logger = get_logger(__name__)

DISCORD_TIMEOUT = 10.0

# Output bound for the sanitized message. Copying stops once the output
# reaches MAX_MESSAGE_CHARS - SAFETY_MARGIN_CHARS characters; an escape
# that starts before the cutoff is still written whole.
MAX_MESSAGE_CHARS = 1000
SAFETY_MARGIN_CHARS = 5

_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    '"': '\\"',
    "\\": "\\\\",
}


class FormattedReport(NamedTuple):
    """Console block and single-line delivery payload for one cycle."""

    console_report: str
    delivery_payload: str


def format_symbol_line(quote: SymbolQuote) -> str:
    """One-line summary printed for every ranked symbol during a scan."""
    return (
        f"{quote.symbol} | Price: {quote.price:.2f} | Volume: {quote.volume:.0f} "
        f"| RVol {quote.relative_volume:.4f} | Change: {quote.percent_change:.4f}% "
        f"| DirectionalFlow: {quote.flow_score:.4f}"
    )


def render_console_report(result: CycleResult) -> str:
    quote = result.quote
    return "\n".join(
        [
            f"===== {result.direction.label} =====",
            f"Ticker: {quote.symbol}",
            f"Price: {quote.price:.2f}",
            f"Change: {quote.percent_change:.4f}%",
            f"Volume: {quote.volume:.0f}",
            f"Relative Volume: {quote.relative_volume:.4f}",
            f"Directional Flow: {quote.flow_score:.4f}",
        ]
    )


def render_alert(result: CycleResult) -> str:
    """Multi-line alert text sent to Discord, before sanitization."""
    quote = result.quote
    return "\n".join(
        [
            result.direction.label,
            f"Ticker: {quote.symbol}",
            f"Price: {quote.price:.2f}",
            f"Change: {quote.percent_change:.4f}%",
            f"Volume: {quote.volume:.0f}",
            f"RVol: {quote.relative_volume:.4f}",
            f"Directional Flow: {quote.flow_score:.4f}",
        ]
    )


def sanitize_message(text: str) -> str:
    """Escape `text` for a JSON string literal and bound its length.

    Line breaks become the two characters backslash + n, and quotes and
    backslashes are escaped as well. Other control characters become
    \\uXXXX escapes. Anything past the bound is dropped.
    """
    limit = MAX_MESSAGE_CHARS - SAFETY_MARGIN_CHARS
    out: list[str] = []
    size = 0
    for ch in text:
        if size >= limit:
            break
        piece = _ESCAPES.get(ch)
        if piece is None:
            piece = f"\\u{ord(ch):04x}" if ch < "\x20" else ch
        out.append(piece)
        size += len(piece)
    return "".join(out)


def format_cycle_result(result: CycleResult) -> FormattedReport:
    return FormattedReport(
        console_report=render_console_report(result),
        delivery_payload=sanitize_message(render_alert(result)),
    )


def build_webhook_body(delivery_payload: str) -> bytes:
    """Wrap an already-escaped payload in a Discord webhook JSON object."""
    return ('{"content":"' + delivery_payload + '"}').encode("utf-8")


async def send_discord(webhook_url: str, delivery_payload: str) -> bool:
    """Post a sanitized payload to a Discord webhook.

    Args:
        webhook_url: Discord webhook URL
        delivery_payload: Output of `sanitize_message`

    Returns:
        True if Discord accepted the message, False otherwise
    """
    try:
        async with httpx.AsyncClient(timeout=DISCORD_TIMEOUT) as client:
            response = await client.post(
                webhook_url,
                content=build_webhook_body(delivery_payload),
                headers={"Content-Type": "application/json"},
            )
    except httpx.TimeoutException as e:
        logger.error(
            "Discord webhook timed out",
            error_type=type(e).__name__,
            timeout=DISCORD_TIMEOUT,
        )
        return False
    except httpx.HTTPError as e:
        logger.error(
            "Discord webhook HTTP error",
            error_type=type(e).__name__,
        )
        return False

    if response.is_success:
        logger.debug("Discord webhook sent successfully")
        return True

    logger.warning(
        "Discord webhook failed",
        status=response.status_code,
        body=response.text[:200],
    )
    return False
