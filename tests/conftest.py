"""Test fixtures: throwaway git repositories and probe doubles."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from rich.text import Text

from statusline.types.git import GitDiffStats
from statusline.vcs.probe import VersionControlProbe

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(cwd: Path, *args: str) -> str:
    """Run git in *cwd* with a fixed identity; raise on failure."""
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


def plain(ansi: str) -> str:
    """Strip styling from rendered output."""
    return Text.from_ansi(ansi).plain.rstrip("\n")


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A directory git will not treat as part of any enclosing repository."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    project = tmp_path / "proj"
    project.mkdir()
    return project


@pytest.fixture
def git_repo(isolated_dir: Path) -> Path:
    """A repository on branch ``main`` with one commit of two files."""
    git(isolated_dir, "init", "-q")
    git(isolated_dir, "symbolic-ref", "HEAD", "refs/heads/main")
    (isolated_dir / "a.txt").write_text("1\n2\n3\n")
    (isolated_dir / "b.txt").write_text("x\n")
    git(isolated_dir, "add", "a.txt", "b.txt")
    git(isolated_dir, "commit", "-q", "-m", "initial")
    return isolated_dir


class RaisingProbe(VersionControlProbe):
    """A probe whose every query fails with the given exception."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc
        self.calls: list[str] = []

    async def is_repository(self, path: str) -> bool:
        self.calls.append("is_repository")
        return True

    async def resolve_branch(self, path: str) -> str:
        self.calls.append("resolve_branch")
        raise self._exc

    async def compute_diff_stats(self, path: str) -> GitDiffStats:
        self.calls.append("compute_diff_stats")
        raise self._exc
