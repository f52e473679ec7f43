"""Conventional commit scanner and commit helper."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ccscan")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

from ccscan.commit import (
    CommitTag,
    CommitType,
    ConventionalCommit,
    Footer,
    Scope,
    Separator,
)
from ccscan.errors import ParseError, ParseErrorKind
from ccscan.parser import (
    parse_body,
    parse_commit,
    parse_commit_type,
    parse_description,
    parse_footer,
    parse_footers,
    parse_scope,
    render_commit,
)


__all__ = [
    "__version__",
    # Model
    "CommitTag",
    "CommitType",
    "ConventionalCommit",
    "Footer",
    "Scope",
    "Separator",
    # Errors
    "ParseError",
    "ParseErrorKind",
    # Parsing
    "parse_commit",
    "parse_commit_type",
    "parse_scope",
    "parse_description",
    "parse_body",
    "parse_footer",
    "parse_footers",
    "render_commit",
]
