"""Commit model for ccscan.

This package provides:
- constants: CommitTag, CANONICAL_COMMIT_TYPES, BREAKING_CHANGE_TOKENS
- models: CommitType, Scope, Separator, Footer, ConventionalCommit
- builder: syntax tree -> model mapping
"""

# Constants
from ccscan.commit.constants import (
    BREAKING_CHANGE_TOKENS,
    CANONICAL_COMMIT_TYPES,
    CommitTag,
)

# Models
from ccscan.commit.models import (
    CommitType,
    ConventionalCommit,
    Footer,
    Scope,
    Separator,
)

# Builders
from ccscan.commit.builder import (
    build_commit,
    build_commit_type,
    build_footer,
    build_footers,
    build_scope,
)


__all__ = [
    # Constants
    "CommitTag",
    "CANONICAL_COMMIT_TYPES",
    "BREAKING_CHANGE_TOKENS",
    # Models
    "CommitType",
    "Scope",
    "Separator",
    "Footer",
    "ConventionalCommit",
    # Builders
    "build_commit",
    "build_commit_type",
    "build_scope",
    "build_footer",
    "build_footers",
]
