"""Issue tracker lookups through the GitHub CLI.

Contains:
- Issue: An open issue, as returned by ``gh issue list``
- IssueLookupError: Raised when issues cannot be listed
- list_issues: Run gh and parse its JSON output
- closes_footer: Build the footer that closes a set of issues
"""

import json
import logging
import subprocess
from typing import Optional

from pydantic import BaseModel, ValidationError

from ccscan.commit import Footer, Separator


logger = logging.getLogger(__name__)

CLOSES_TOKEN = "closes"


class IssueLookupError(Exception):
    """Raised when the issue list cannot be retrieved or parsed."""

    pass


class Issue(BaseModel):
    """An open issue."""

    title: str
    number: int

    def __str__(self) -> str:
        return f"#{self.number} {self.title}"


def list_issues() -> list[Issue]:
    """List open issues of the current repository.

    Returns:
        Issues in the order gh reports them.

    Raises:
        IssueLookupError: If gh fails or returns unexpected output.
    """
    try:
        result = subprocess.run(
            ["gh", "issue", "list", "--json", "title,number"],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise IssueLookupError(f"gh issue list failed:\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise IssueLookupError("GitHub CLI (gh) is not installed or not in PATH.")

    try:
        raw = json.loads(result.stdout or "[]")
        issues = [Issue(**item) for item in raw]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        raise IssueLookupError(f"Unexpected output from gh issue list: {e}")

    logger.debug("Found %d open issues", len(issues))
    return issues


def closes_footer(issues: list[Issue]) -> Optional[Footer]:
    """Build a ``closes: #1, #2`` footer.

    Args:
        issues: The issues the commit closes.

    Returns:
        The footer, or None when no issues are given.
    """
    if not issues:
        return None
    content = ", ".join(f"#{issue.number}" for issue in issues)
    return Footer(token=CLOSES_TOKEN, content=content, separator=Separator.COLON)
