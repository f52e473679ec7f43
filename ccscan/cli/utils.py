"""Shared helpers for ccscan CLI commands."""

from typing import Optional

import typer

from ccscan import __version__
from ccscan.logging_config import configure_logging, resolve_level

# git's default comment character and the verbose-commit scissors line
COMMENT_PREFIX = "#"
SCISSORS_LINE = "# ------------------------ >8 ------------------------"


def strip_comment_lines(message: str) -> str:
    """Drop git comment lines and everything below a scissors line.

    Args:
        message: Raw text of a commit message file.

    Returns:
        The message as git would record it, minus surrounding blank lines.
    """
    kept = []
    for line in message.splitlines():
        if line.rstrip() == SCISSORS_LINE:
            break
        if line.startswith(COMMENT_PREFIX):
            continue
        kept.append(line)
    return "\n".join(kept).strip("\n")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ccscan {__version__}")
        raise typer.Exit()


def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Validate and create Conventional Commits."""
    configure_logging(resolve_level(verbose=verbose, debug=debug))
