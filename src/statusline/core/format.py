"""Compact number, cost, and duration formatting."""

from __future__ import annotations


def abbreviate(n: int) -> str:
    """Abbreviate counts of 1000 or more as thousands with one decimal.

    ``500 -> "500"``, ``1500 -> "1.5k"``, ``12000 -> "12.0k"``.
    """
    if n >= 1000:
        return f"{n / 1000:.1f}k"
    return str(n)


def format_cost(cost_usd: float) -> str:
    return f"{cost_usd:.2f}"


def split_duration(duration_ms: int) -> tuple[int, int]:
    """Return ``(minutes, seconds)`` for a millisecond duration, truncating."""
    total_seconds = duration_ms // 1000
    return total_seconds // 60, total_seconds % 60


def format_duration(duration_ms: int) -> str:
    """Format milliseconds as ``"{m}m {s}s"`` without padding or hours."""
    minutes, seconds = split_duration(duration_ms)
    return f"{minutes}m {seconds}s"
