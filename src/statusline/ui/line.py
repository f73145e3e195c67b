"""Compose the statusline from ordered, optional segments."""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.text import Text

from statusline.core.format import abbreviate, format_cost, split_duration
from statusline.types.config import Palette
from statusline.types.git import GitDiffStats, GitInfo
from statusline.types.session import SessionContext
from statusline.ui.bar import UsageBar, render_usage_bar


def join_segments(segments: Iterable[Text | None], palette: Palette) -> Text:
    """Join present segments with a muted divider; omitted ones leave no trace."""
    line = Text()
    first = True
    for segment in segments:
        if segment is None:
            continue
        if not first:
            line.append(" ")
            line.append(palette.divider, style=palette.muted)
            line.append(" ")
        line.append_text(segment)
        first = False
    return line


def compose_line(
    session: SessionContext,
    git: GitInfo,
    bar: UsageBar,
    palette: Palette,
) -> Text:
    """Directory, branch, diff stats, usage bar, cost, duration, in that order."""
    return join_segments(
        [
            Text(session.directory_name, style=palette.value),
            _branch_segment(git.branch, palette),
            _diff_segment(git.diff, palette),
            render_usage_bar(bar, palette),
            _cost_segment(session.cost_total_usd, palette),
            _duration_segment(session.duration_ms, palette),
        ],
        palette,
    )


def _branch_segment(branch: str, palette: Palette) -> Text | None:
    if not branch:
        return None
    return Text(branch, style=palette.value)


def _diff_segment(diff: GitDiffStats, palette: Palette) -> Text | None:
    if not diff.has_changes:
        return None
    fragments: list[Text] = []
    if diff.added > 0:
        fragments.append(_labelled("+", abbreviate(diff.added), palette))
    if diff.removed > 0:
        fragments.append(_labelled("-", abbreviate(diff.removed), palette))
    return Text(" ").join(fragments)


def _cost_segment(cost_usd: float, palette: Palette) -> Text:
    return _labelled("$", format_cost(cost_usd), palette)


def _duration_segment(duration_ms: int, palette: Palette) -> Text:
    minutes, seconds = split_duration(duration_ms)
    text = Text()
    text.append(str(minutes), style=palette.value)
    text.append("m", style=palette.muted)
    text.append(" ")
    text.append(str(seconds), style=palette.value)
    text.append("s", style=palette.muted)
    return text


def _labelled(label: str, value: str, palette: Palette) -> Text:
    text = Text()
    text.append(label, style=palette.muted)
    text.append(value, style=palette.value)
    return text


def render_ansi(line: Text) -> str:
    """Render *line* to a 256-color ANSI string ending in a reset and newline.

    The console is pinned so the result does not depend on the calling
    terminal, ``NO_COLOR``, or the terminal width.
    """
    console = Console(
        file=StringIO(),
        color_system="256",
        force_terminal=True,
        no_color=False,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )
    with console.capture() as capture:
        console.print(line)
    return capture.get()
