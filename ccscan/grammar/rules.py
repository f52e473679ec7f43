"""Rule identifiers for the conventional commit grammar.

Every production the engine can attempt has one identifier here. The
identifiers double as the vocabulary of a parse failure: a failed parse
reports which of these rules were expected at the furthest offset reached.
"""

from enum import Enum


class Rule(Enum):
    """Grammar production identifiers."""

    CONVENTIONAL_COMMIT = "conventional_commit"
    HEADER = "header"
    COMMIT_TYPE = "commit_type"
    SCOPE = "scope"
    SCOPE_TOKEN = "scope_token"
    SCOPE_DELIMITER = "scope_delimiter"
    BREAKING_INDICATOR = "breaking_indicator"
    COLON_SEPARATOR = "colon_separator"
    DESCRIPTION = "description"
    BODY = "body"
    FOOTERS = "footers"
    FOOTER = "footer"
    FOOTER_TOKEN = "footer_token"
    FOOTER_SEPARATOR = "footer_separator"
    FOOTER_VALUE = "footer_value"
    EOI = "EOI"

    def __str__(self) -> str:
        return self.value


# Entry rules that accept trailing whitespace and line breaks after the match
TRAILING_WHITESPACE_RULES = frozenset({Rule.CONVENTIONAL_COMMIT, Rule.FOOTERS})
