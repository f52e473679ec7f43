"""Git integration for ccscan.

This package provides:
- exceptions: GitError, NoStagedChangesError, HookError
- runner: _run_git_command, get_repo_root
- writer: has_staged_changes, commit
- hooks: install_commit_msg_hook, get_hook_path
"""

# Exceptions
from ccscan.git.exceptions import (
    GitError,
    HookError,
    NoStagedChangesError,
)

# Runner utilities
from ccscan.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Commit
from ccscan.git.writer import (
    commit,
    has_staged_changes,
)

# Hooks
from ccscan.git.hooks import (
    HOOK_SCRIPT,
    get_hook_path,
    install_commit_msg_hook,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    "HookError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Commit
    "commit",
    "has_staged_changes",
    # Hooks
    "HOOK_SCRIPT",
    "get_hook_path",
    "install_commit_msg_hook",
]
