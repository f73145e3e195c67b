"""Configuration types for the statusline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Palette:
    """Styles and glyphs used to draw the line.

    Styles are Rich style strings; ``color(N)`` renders as a 256-color
    foreground escape.
    """

    value: str = "color(255)"  # bright white, emphasised values
    muted: str = "color(246)"  # grey, separators and labels
    divider: str = "|"
    filled_glyph: str = "\u2588"  # █ full block
    empty_glyph: str = "\u2591"  # ░ light shade


@dataclass(frozen=True, slots=True)
class StatuslineConfig:
    """Runtime settings for a single render."""

    palette: Palette = field(default_factory=Palette)
    git_timeout_sec: float = 2.0
    probe_git: bool = True
