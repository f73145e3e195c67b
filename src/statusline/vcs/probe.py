"""VersionControlProbe ABC + git implementation.

The probe never raises: a directory that is not a repository, a missing git
binary, a failing or hanging command all degrade to empty branch and zero
diff stats.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from statusline.types.git import GitDiffStats, GitInfo

logger = logging.getLogger(__name__)


class VersionControlProbe(ABC):
    """Narrow query interface over a version-control system."""

    @abstractmethod
    async def is_repository(self, path: str) -> bool:
        """Whether *path* is inside a version-controlled tree."""
        ...

    @abstractmethod
    async def resolve_branch(self, path: str) -> str:
        """Current branch name, or "" when detached or unresolvable."""
        ...

    @abstractmethod
    async def compute_diff_stats(self, path: str) -> GitDiffStats:
        """Combined staged + unstaged added/removed line counts."""
        ...


class GitProbe(VersionControlProbe):
    """Probe backed by the ``git`` executable, each call bounded by a timeout."""

    def __init__(self, timeout_sec: float = 2.0, git: str = "git") -> None:
        self._timeout_sec = timeout_sec
        self._git = git

    async def is_repository(self, path: str) -> bool:
        # .git may be a directory or, for worktrees and submodules, a file
        if (Path(path) / ".git").exists():
            return True
        return await self._run(path, "rev-parse", "--git-dir") is not None

    async def resolve_branch(self, path: str) -> str:
        out = await self._run(path, "rev-parse", "--abbrev-ref", "HEAD")
        if out is None:
            return ""
        branch = out.strip()
        # rev-parse prints the literal "HEAD" when detached
        return "" if branch == "HEAD" else branch

    async def compute_diff_stats(self, path: str) -> GitDiffStats:
        unstaged, staged = await asyncio.gather(
            self._numstat(path),
            self._numstat(path, "--cached"),
        )
        return unstaged + staged

    async def _numstat(self, path: str, *extra: str) -> GitDiffStats:
        out = await self._run(path, "-c", "core.fileMode=false", "diff", "--numstat", *extra)
        if out is None:
            return GitDiffStats()
        return parse_numstat(out)

    async def _run(self, path: str, *args: str) -> str | None:
        """Run ``git -C path *args``; return stdout, or None on any failure."""
        try:
            proc = await asyncio.create_subprocess_exec(
                self._git, "-C", path, *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except (OSError, ValueError) as exc:
            # FileNotFoundError when git is not installed, ValueError on NUL in path
            logger.debug("Failed to start git %s: %s", " ".join(args), exc)
            return None

        try:
            stdout_bytes, _ = await asyncio.wait_for(
                proc.communicate(), timeout=self._timeout_sec,
            )
        except TimeoutError:
            try:
                proc.kill()
                await proc.wait()
            except ProcessLookupError:
                pass
            logger.debug("git %s timed out after %ss", " ".join(args), self._timeout_sec)
            return None

        if proc.returncode != 0:
            logger.debug("git %s exited with %s", " ".join(args), proc.returncode)
            return None
        return stdout_bytes.decode("utf-8", errors="replace") if stdout_bytes else ""


class StaticProbe(VersionControlProbe):
    """Probe returning fixed values, for tests."""

    def __init__(
        self,
        *,
        repository: bool = False,
        branch: str = "",
        diff: GitDiffStats | None = None,
    ) -> None:
        self._repository = repository
        self._branch = branch
        self._diff = diff or GitDiffStats()

    async def is_repository(self, path: str) -> bool:
        return self._repository

    async def resolve_branch(self, path: str) -> str:
        return self._branch

    async def compute_diff_stats(self, path: str) -> GitDiffStats:
        return self._diff


def parse_numstat(output: str) -> GitDiffStats:
    """Sum ``git diff --numstat`` output.

    Binary files report ``-`` for both counts and contribute zero.
    """
    added = removed = 0
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        added += _count(parts[0])
        removed += _count(parts[1])
    return GitDiffStats(added=added, removed=removed)


def _count(field: str) -> int:
    field = field.strip()
    return int(field) if field.isdigit() else 0


async def probe_workspace(probe: VersionControlProbe, path: str) -> GitInfo:
    """Query branch and diff stats for *path*, degrading to ``GitInfo()``."""
    if not path:
        return GitInfo()
    try:
        if not await probe.is_repository(path):
            return GitInfo()
        branch, diff = await asyncio.gather(
            probe.resolve_branch(path),
            probe.compute_diff_stats(path),
        )
    except (OSError, ValueError, TimeoutError) as exc:
        logger.debug("Version-control probe failed for %s: %s", path, exc)
        return GitInfo()
    return GitInfo(branch=branch, diff=diff)
