"""Public parsing API.

Each function validates its input against one grammar fragment and either
returns the parsed value or raises ParseError. The input must consist of
exactly that fragment. None of them keep state or perform I/O.
"""

from contextlib import contextmanager
from typing import Iterator

from ccscan.commit import (
    CommitType,
    ConventionalCommit,
    Footer,
    Scope,
    build_commit,
    build_commit_type,
    build_footer,
    build_footers,
    build_scope,
)
from ccscan.errors import ParseError
from ccscan.grammar import GrammarError, Rule, parse


@contextmanager
def _classified_errors() -> Iterator[None]:
    """Re-raise grammar failures as classified ParseErrors."""
    try:
        yield
    except GrammarError as e:
        raise ParseError.from_grammar_error(e) from e


def parse_commit_type(text: str) -> CommitType:
    """Parse a commit type keyword such as ``feat``.

    Raises:
        ParseError: If the text is not one or more ASCII letters.
    """
    with _classified_errors():
        return build_commit_type(parse(Rule.COMMIT_TYPE, text))


def parse_scope(text: str) -> Scope:
    """Parse the noun that goes between a header's parentheses."""
    with _classified_errors():
        return build_scope(parse(Rule.SCOPE_TOKEN, text))


def parse_description(text: str) -> str:
    """Parse a header description."""
    with _classified_errors():
        return parse(Rule.DESCRIPTION, text).text


def parse_body(text: str) -> str:
    """Parse a commit body of one or more paragraphs.

    Paragraphs are separated by exactly one blank line. Only the first line
    of a paragraph decides whether it is body text: a footer-shaped first
    line starts the footers, while a footer-shaped line further down a
    paragraph is kept as body text.
    """
    with _classified_errors():
        return parse(Rule.BODY, text).text


def parse_footer(text: str) -> Footer:
    """Parse a single footer, e.g. ``Reviewed-by: Z``."""
    with _classified_errors():
        return build_footer(parse(Rule.FOOTER, text), text)


def parse_footers(text: str) -> list[Footer]:
    """Parse one or more footers, in order."""
    with _classified_errors():
        return build_footers(parse(Rule.FOOTERS, text), text)


def parse_commit(text: str) -> ConventionalCommit:
    """Parse a whole commit message.

    Args:
        text: The commit message.

    Returns:
        The parsed ConventionalCommit.

    Raises:
        ParseError: On the first grammar mismatch, classified by kind.
    """
    with _classified_errors():
        return build_commit(parse(Rule.CONVENTIONAL_COMMIT, text), text)


def render_commit(commit: ConventionalCommit) -> str:
    """Render the canonical text of a commit. Parses back to an equal commit."""
    return commit.render()
