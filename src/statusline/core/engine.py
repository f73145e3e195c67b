"""Engine: wires parser + git probe + usage bar + composer into one line."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from statusline.core.parser import parse_session
from statusline.types.config import StatuslineConfig
from statusline.types.git import GitInfo
from statusline.ui.bar import compute_usage_bar
from statusline.ui.line import compose_line, render_ansi
from statusline.vcs.probe import GitProbe, VersionControlProbe, probe_workspace

logger = logging.getLogger(__name__)


async def render(
    raw: str | bytes | dict[str, Any] | None,
    *,
    config: StatuslineConfig | None = None,
    probe: VersionControlProbe | None = None,
) -> str:
    """Render the statusline for one payload.

    This is the primary entry point.

    Args:
        raw: The JSON payload as read from stdin, or an already decoded dict.
        config: Palette and git settings. Defaults to ``StatuslineConfig()``.
        probe: Version-control probe. Defaults to a ``GitProbe`` using
            ``config.git_timeout_sec``.

    Returns:
        One ANSI-styled line, ending in a reset code and a newline.
    """
    config = config or StatuslineConfig()
    session = parse_session(raw)

    if config.probe_git:
        probe = probe or GitProbe(timeout_sec=config.git_timeout_sec)
        git = await probe_workspace(probe, session.working_directory)
    else:
        git = GitInfo()
    logger.debug(
        "Rendering statusline for %r (branch=%r, +%d -%d)",
        session.working_directory, git.branch, git.diff.added, git.diff.removed,
    )

    bar = compute_usage_bar(session.context_window)
    line = compose_line(session, git, bar, config.palette)
    return render_ansi(line)


def render_sync(
    raw: str | bytes | dict[str, Any] | None,
    *,
    config: StatuslineConfig | None = None,
    probe: VersionControlProbe | None = None,
) -> str:
    """Blocking wrapper around :func:`render`."""
    return asyncio.run(render(raw, config=config, probe=probe))
