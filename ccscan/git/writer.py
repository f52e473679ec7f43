"""Commit staged changes with a rendered message.

Contains:
- has_staged_changes: Check whether anything is staged
- commit: Run git commit with a message
"""

import logging

from ccscan.git.exceptions import NoStagedChangesError
from ccscan.git.runner import _run_git_command


logger = logging.getLogger(__name__)


def has_staged_changes() -> bool:
    """Check whether the index differs from HEAD.

    Only the names of staged paths are listed, not the diff itself.

    Returns:
        True if there are staged changes.

    Raises:
        GitError: If the git command fails.
    """
    return bool(_run_git_command(["diff", "--cached", "--name-only"]))


def commit(message: str) -> str:
    """Commit the staged changes.

    The message is passed on stdin so it reaches git byte for byte.

    Args:
        message: The full commit message.

    Returns:
        The output of git commit.

    Raises:
        NoStagedChangesError: If nothing is staged.
        GitError: If git commit fails.
    """
    if not has_staged_changes():
        raise NoStagedChangesError("There are no staged changes to commit.")

    output = _run_git_command(["commit", "-F", "-"], input=message)
    logger.info("Committed:\n%s", message)
    return output
