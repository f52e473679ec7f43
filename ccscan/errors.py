"""Parse error classification.

Contains:
- ParseErrorKind: The closed set of actionable error kinds
- classify: Map a grammar failure's expected rules to one kind
- ParseError: Raised by the public parsing API
"""

from enum import Enum
from typing import Iterable

from ccscan.grammar import GrammarError, Rule


class ParseErrorKind(Enum):
    """What part of a commit message was invalid."""

    INVALID_COMMIT_TYPE = "Invalid commit type. Commit type should be ASCII letters."
    INVALID_SCOPE_DELIMITER = (
        "Invalid scope delimiter. Scope should be enclosed within a pair of "
        "parenthesis. Example: (neovim)."
    )
    INVALID_SCOPE_NOUN = (
        "Invalid scope token. Token should be a noun describing a section of "
        "the codebase."
    )
    INVALID_TOKEN_SEPARATOR = "Invalid token separator."
    INVALID_DESCRIPTION = "Invalid commit description."
    INVALID_BODY = "Invalid commit body."
    INVALID_FOOTER = "Invalid commit footer."
    OTHER = "Invalid commit message."

    def __str__(self) -> str:
        return self.value


# First match wins
_CLASSIFICATION_ORDER: tuple[tuple[frozenset[Rule], ParseErrorKind], ...] = (
    (frozenset({Rule.COMMIT_TYPE}), ParseErrorKind.INVALID_COMMIT_TYPE),
    (frozenset({Rule.SCOPE_TOKEN}), ParseErrorKind.INVALID_SCOPE_NOUN),
    (frozenset({Rule.SCOPE_DELIMITER}), ParseErrorKind.INVALID_SCOPE_DELIMITER),
    (frozenset({Rule.COLON_SEPARATOR}), ParseErrorKind.INVALID_TOKEN_SEPARATOR),
    (frozenset({Rule.DESCRIPTION}), ParseErrorKind.INVALID_DESCRIPTION),
    (frozenset({Rule.BODY}), ParseErrorKind.INVALID_BODY),
    (
        frozenset({Rule.FOOTER_TOKEN, Rule.FOOTER_SEPARATOR, Rule.FOOTER_VALUE}),
        ParseErrorKind.INVALID_FOOTER,
    ),
)


def classify(positives: Iterable[Rule]) -> ParseErrorKind:
    """Pick the error kind for a set of expected rules.

    Args:
        positives: Rules the grammar would have accepted at the failure.

    Returns:
        The first matching kind, or ``ParseErrorKind.OTHER``.
    """
    expected = frozenset(positives)
    for rules, kind in _CLASSIFICATION_ORDER:
        if expected & rules:
            return kind
    return ParseErrorKind.OTHER


class ParseError(Exception):
    """Raised when text is not a valid conventional commit fragment.

    Attributes:
        kind: The classified error kind.
        inner: The raw grammar diagnostic.
    """

    def __init__(self, kind: ParseErrorKind, inner: GrammarError):
        self.kind = kind
        self.inner = inner
        super().__init__(f"{kind}: {inner}")

    @classmethod
    def from_grammar_error(cls, error: GrammarError) -> "ParseError":
        if error.message is not None:
            return cls(ParseErrorKind.OTHER, error)
        return cls(classify(error.positives), error)

    @property
    def offset(self) -> int:
        return self.inner.offset

    @property
    def line(self) -> int:
        return self.inner.line

    @property
    def column(self) -> int:
        return self.inner.column
