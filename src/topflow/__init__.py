"""Top Flow: ranks a watchlist by directional flow and alerts the top mover."""

__version__ = "0.1.0"
