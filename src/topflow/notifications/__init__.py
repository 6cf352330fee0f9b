"""Notification services for Top Flow."""

from topflow.notifications.discord import (
    FormattedReport,
    format_cycle_result,
    format_symbol_line,
    sanitize_message,
    send_discord,
)

__all__ = [
    "FormattedReport",
    "format_cycle_result",
    "format_symbol_line",
    "sanitize_message",
    "send_discord",
]
