"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoStagedChangesError: Raised when there is nothing staged to commit
- HookError: Raised when the commit-msg hook cannot be installed
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass


class HookError(GitError):
    """Raised when a git hook cannot be written."""

    pass
