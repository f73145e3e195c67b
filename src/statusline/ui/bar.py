"""Context-window usage bar."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from statusline.types.config import Palette
from statusline.types.session import ContextWindowUsage

BAR_WIDTH = 10


@dataclass(frozen=True, slots=True)
class UsageBar:
    """Percentage of the window in use and how many bar cells it fills."""

    percentage: int
    filled: int
    empty: int


EMPTY_BAR = UsageBar(percentage=0, filled=0, empty=BAR_WIDTH)


def compute_usage_bar(usage: ContextWindowUsage | None) -> UsageBar:
    """Compute the bar for *usage*; ``None`` yields the empty ``0%`` bar.

    The percentage truncates and is not clamped, so a session over its window
    reports e.g. ``112%``. The filled cell count is clamped to the bar width.
    """
    if usage is None or usage.window_size_tokens <= 0:
        return EMPTY_BAR
    percentage = usage.current_usage_tokens * 100 // usage.window_size_tokens
    filled = min(max(percentage // 10, 0), BAR_WIDTH)
    return UsageBar(percentage=percentage, filled=filled, empty=BAR_WIDTH - filled)


def render_usage_bar(bar: UsageBar, palette: Palette) -> Text:
    """``[███░░░░░░░] 30%`` with filled cells and the label emphasised."""
    text = Text()
    text.append("[", style=palette.muted)
    if bar.filled:
        text.append(palette.filled_glyph * bar.filled, style=palette.value)
    if bar.empty:
        text.append(palette.empty_glyph * bar.empty, style=palette.muted)
    text.append("]", style=palette.muted)
    text.append(" ")
    text.append(f"{bar.percentage}%", style=palette.value)
    return text
