"""Processing layer for Top Flow."""
