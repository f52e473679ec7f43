"""CLI command for validating a commit message."""

import sys
from pathlib import Path
from typing import Optional

import typer

from ccscan.errors import ParseError
from ccscan.parser import parse_commit
from ccscan.cli.utils import strip_comment_lines


def check_command(
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Commit message to check",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the message from a file, e.g. the commit-msg hook argument",
    ),
) -> None:
    """Check that a commit message follows Conventional Commits.

    Reads the message from --message, --file, or stdin. Prints the canonical
    form of a valid message; prints the error and exits 1 otherwise.
    """
    if message is not None and file is not None:
        typer.echo("Use either --message or --file, not both.", err=True)
        raise typer.Exit(2)

    if message is not None:
        text = message
    else:
        if file is not None:
            try:
                raw = file.read_text()
            except OSError as e:
                typer.echo(f"Cannot read {file}: {e}", err=True)
                raise typer.Exit(1)
        else:
            raw = sys.stdin.read()
        text = strip_comment_lines(raw)

    try:
        commit = parse_commit(text)
    except ParseError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    typer.echo(commit.render())
