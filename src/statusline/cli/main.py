"""CLI entry point for the statusline."""

from __future__ import annotations

import logging
import sys

import click

from statusline.types.config import StatuslineConfig


@click.command()
@click.option(
    "--git-timeout",
    type=float,
    default=2.0,
    show_default=True,
    envvar="STATUSLINE_GIT_TIMEOUT",
    help="Seconds to wait for each git query",
)
@click.option(
    "--no-git",
    is_flag=True,
    default=False,
    envvar="STATUSLINE_NO_GIT",
    help="Skip branch and diff probing",
)
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
def cli(git_timeout: float, no_git: bool, verbose: bool) -> None:
    """Print a one-line session summary for the JSON payload on stdin.

    \b
    Usage:
      echo '{"workspace": {"current_dir": "/tmp/proj"}}' | statusline
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        raw_input = sys.stdin.read()
    except (OSError, ValueError) as exc:
        logging.getLogger(__name__).debug("Error reading stdin: %s", exc)
        raw_input = ""

    from statusline.core.engine import render_sync

    config = StatuslineConfig(git_timeout_sec=git_timeout, probe_git=not no_git)
    line = render_sync(raw_input, config=config)

    # Encode with 'replace' so a non-UTF-8 terminal cannot fail the write
    sys.stdout.buffer.write(line.encode("utf-8", errors="replace"))
    sys.stdout.buffer.flush()


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
