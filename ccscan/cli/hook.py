"""CLI command for installing the commit-msg hook."""

import typer

from ccscan.git import GitError, get_repo_root, install_commit_msg_hook


def hook_command() -> None:
    """Install a commit-msg hook that rejects non-conventional messages."""
    try:
        repo_root = get_repo_root()
        hook_path = install_commit_msg_hook(repo_root)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Successfully created commit-msg hook at {hook_path}")
