"""Core types for the statusline."""

from statusline.types.config import Palette, StatuslineConfig
from statusline.types.git import GitDiffStats, GitInfo
from statusline.types.session import ContextWindowUsage, SessionContext

__all__ = [
    "ContextWindowUsage",
    "GitDiffStats",
    "GitInfo",
    "Palette",
    "SessionContext",
    "StatuslineConfig",
]
