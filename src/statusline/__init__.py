"""Statusline — one-line colorized summary of a coding-assistant session.

Usage:
    import statusline

    line = statusline.render_sync(payload_json)
    sys.stdout.write(line)
"""

from statusline.core.engine import render, render_sync
from statusline.core.format import abbreviate, format_cost, format_duration
from statusline.core.parser import parse_session
from statusline.types.config import Palette, StatuslineConfig
from statusline.types.git import GitDiffStats, GitInfo
from statusline.types.session import ContextWindowUsage, SessionContext
from statusline.vcs.probe import GitProbe, StaticProbe, VersionControlProbe

__version__ = "0.1.0"

__all__ = [
    # Core API
    "render",
    "render_sync",
    "parse_session",
    # Formatting
    "abbreviate",
    "format_cost",
    "format_duration",
    # Types
    "ContextWindowUsage",
    "GitDiffStats",
    "GitInfo",
    "SessionContext",
    # Configuration
    "Palette",
    "StatuslineConfig",
    # Version control
    "GitProbe",
    "StaticProbe",
    "VersionControlProbe",
]
