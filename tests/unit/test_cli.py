"""Tests for the statusline CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from statusline.cli.main import cli
from tests.conftest import git, plain, requires_git

EMPTY = "[" + "░" * 10 + "]"


class TestCli:
    def test_renders_payload(self, isolated_dir: Path) -> None:
        payload = {
            "workspace": {"current_dir": str(isolated_dir)},
            "cost": {"total_cost_usd": 1.234, "total_duration_ms": 65000},
        }
        runner = CliRunner()
        result = runner.invoke(cli, [], input=json.dumps(payload))
        assert result.exit_code == 0
        assert plain(result.output) == f"proj | {EMPTY} 0% | $1.23 | 1m 5s"
        assert result.output.endswith("\x1b[0m\n")

    def test_empty_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-git"], input="")
        assert result.exit_code == 0
        assert plain(result.output).endswith("$0.00 | 0m 0s")

    def test_invalid_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-git"], input="{oops")
        assert result.exit_code == 0
        assert result.output.count("\n") == 1

    def test_no_git_from_env(self, tmp_path: Path) -> None:
        # a bogus .git would trigger git queries; --no-git via env skips them
        (tmp_path / ".git").mkdir()
        payload = {"workspace": {"current_dir": str(tmp_path)}}
        runner = CliRunner()
        result = runner.invoke(
            cli, [], input=json.dumps(payload), env={"STATUSLINE_NO_GIT": "1"},
        )
        assert result.exit_code == 0
        assert plain(result.output).startswith(f"{tmp_path.name} | {EMPTY}")

    def test_git_timeout_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--git-timeout", "0.5"], input="{}")
        assert result.exit_code == 0

    def test_verbose(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "--no-git"], input="{}")
        assert result.exit_code == 0
        assert "0m 0s" in plain(result.stdout)

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "--git-timeout" in result.output

    def test_oversized_integer_still_renders(self) -> None:
        runner = CliRunner()
        for digits in (400, 5000):
            payload = '{"cost": {"total_duration_ms": ' + "9" * digits + "}}"
            result = runner.invoke(cli, ["--no-git"], input=payload)
            assert result.exit_code == 0
            assert result.output.endswith("\x1b[0m\n")

    def test_root_directory(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--no-git"], input=json.dumps({"workspace": {"current_dir": "/"}}),
        )
        assert result.exit_code == 0
        assert plain(result.output).startswith(f"/ | {EMPTY} 0%")

    @requires_git
    def test_no_git_hides_branch_and_diff(self, git_repo: Path) -> None:
        (git_repo / "a.txt").write_text("changed\n")
        git(git_repo, "add", "a.txt")
        payload = {"workspace": {"current_dir": str(git_repo)}}
        runner = CliRunner()
        result = runner.invoke(cli, ["--no-git"], input=json.dumps(payload))
        assert result.exit_code == 0
        assert plain(result.output).startswith(f"proj | {EMPTY} 0%")
        assert "main" not in plain(result.output)
