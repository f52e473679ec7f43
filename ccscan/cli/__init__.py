"""CLI entry point for ccscan.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from ccscan.cli.check import check_command
from ccscan.cli.commit import commit_command
from ccscan.cli.config import init_command, types_command
from ccscan.cli.hook import hook_command
from ccscan.cli.utils import main_callback

# Main application
app = typer.Typer(
    name="ccscan",
    help="ccscan: Conventional Commits checker and commit helper",
    add_completion=False,
    no_args_is_help=True,
)

app.callback()(main_callback)

app.command("commit")(commit_command)
app.command("check")(check_command)
app.command("hook")(hook_command)
app.command("types")(types_command)
app.command("init")(init_command)


__all__ = [
    "app",
    "check_command",
    "commit_command",
    "hook_command",
    "types_command",
    "init_command",
    "main_callback",
]
