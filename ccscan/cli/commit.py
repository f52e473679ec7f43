"""CLI command for creating a commit interactively."""

import logging

import typer

from ccscan.config import ConfigError, load_config
from ccscan.errors import ParseError
from ccscan.git import GitError, NoStagedChangesError, commit, get_repo_root, has_staged_changes
from ccscan.prompt import run_prompts


logger = logging.getLogger(__name__)


def commit_command(
    conventional_types: bool = typer.Option(
        False,
        "--conventional-types",
        "-c",
        help="Include Angular style commit types",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
) -> None:
    """Build a conventional commit interactively and commit staged changes."""
    try:
        repo_root = get_repo_root()
        if not has_staged_changes():
            raise NoStagedChangesError("There are no staged changes to commit.")
        config = load_config(repo_root, conventional_types)
        conventional_commit = run_prompts(config)
    except NoStagedChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except ParseError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    message = conventional_commit.render()

    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)

    if not yes:
        typer.echo("")
        if not typer.confirm("Ready to commit?", default=True):
            typer.echo("Commit cancelled.", err=True)
            raise typer.Exit(0)

    try:
        output = commit(message)
    except GitError as e:
        typer.echo("Commit failed!", err=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    logger.debug(output)
    typer.echo("Commit created successfully!")
