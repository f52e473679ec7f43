"""commit-msg hook installation.

The hook runs ``ccscan check`` on the message file git hands it, so a
non-conforming message aborts the commit.
"""

import logging
import stat
from pathlib import Path

from ccscan.git.exceptions import HookError


logger = logging.getLogger(__name__)

HOOK_NAME = "commit-msg"

HOOK_SCRIPT = """#!/usr/bin/env sh

ccscan check --file "$1"
"""


def get_hook_path(repo_root: Path) -> Path:
    """Return the path of the commit-msg hook.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .git/hooks/commit-msg.
    """
    return repo_root / ".git" / "hooks" / HOOK_NAME


def install_commit_msg_hook(repo_root: Path) -> Path:
    """Write an executable commit-msg hook.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to the installed hook.

    Raises:
        HookError: If .git/hooks does not exist or cannot be written.
    """
    hook_path = get_hook_path(repo_root)

    if not hook_path.parent.is_dir():
        raise HookError(
            "Could not find .git/hooks directory. "
            "Make sure you are in the root of a Git repository."
        )

    try:
        hook_path.write_text(HOOK_SCRIPT)
        mode = hook_path.stat().st_mode
        hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise HookError(f"Failed to write {hook_path}: {e}")

    logger.info("Installed commit-msg hook at %s", hook_path)
    return hook_path
