"""CLI commands for the commit type vocabulary and config file."""

from pathlib import Path

import typer

from ccscan.config import (
    Config,
    ConfigError,
    FileConfig,
    get_repo_config_file,
    load_config,
    save_config,
)
from ccscan.git import GitError, get_repo_root


def _repo_root_or_none():
    try:
        return get_repo_root()
    except GitError:
        return None


def types_command(
    conventional_types: bool = typer.Option(
        False,
        "--conventional-types",
        "-c",
        help="Include Angular style commit types",
    ),
) -> None:
    """List the configured commit types."""
    try:
        config = load_config(_repo_root_or_none(), conventional_types)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Commit types:")
    for option in config.commit_types.values():
        typer.echo(f"  • {option.label()}")


def init_command(
    conventional_types: bool = typer.Option(
        False,
        "--conventional-types",
        "-c",
        help="Include Angular style commit types",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a repository config file with the default settings."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    path: Path = get_repo_config_file(repo_root)
    if path.exists() and not force:
        overwrite = typer.confirm(f"{path} already exists. Overwrite?", default=False)
        if not overwrite:
            typer.echo("Keeping existing configuration.")
            raise typer.Exit(0)

    defaults = Config.defaults(conventional_types)
    save_config(
        path,
        FileConfig(
            commit_types=list(defaults.commit_types.values()),
            prompts=list(defaults.prompts.values()),
        ),
    )
    typer.echo(f"✓ Configuration saved to {path}")
