"""Version-control state types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GitDiffStats:
    """Added/removed line counts, staged and unstaged combined."""

    added: int = 0
    removed: int = 0

    def __add__(self, other: GitDiffStats) -> GitDiffStats:
        return GitDiffStats(
            added=self.added + other.added,
            removed=self.removed + other.removed,
        )

    @property
    def has_changes(self) -> bool:
        return self.added > 0 or self.removed > 0


@dataclass(frozen=True, slots=True)
class GitInfo:
    """Branch and diff stats for a workspace. The default means "not a repository"."""

    branch: str = ""
    diff: GitDiffStats = field(default_factory=GitDiffStats)
