"""Core utilities for Top Flow."""
