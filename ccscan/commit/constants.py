"""Constants for the ccscan commit model.

Contains:
- CommitTag: Canonical commit type tags, valued by their keyword
- CANONICAL_COMMIT_TYPES: Keyword lookup table derived from CommitTag
- BREAKING_CHANGE_TOKENS: Footer tokens that declare a breaking change
"""

from enum import Enum


class CommitTag(Enum):
    """Canonical commit types. The value is the keyword written in a header."""

    FEATURE = "feat"
    BUGFIX = "bug"
    CHORE = "chore"
    REVERT = "revert"
    PERF = "perf"
    DOC = "doc"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CUSTOM = "custom"


# Lower-case keyword -> tag. CUSTOM is the fall-through, never a keyword.
CANONICAL_COMMIT_TYPES = {
    tag.value: tag for tag in CommitTag if tag is not CommitTag.CUSTOM
}

# Case-sensitive, exactly these two spellings
BREAKING_CHANGE_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})
