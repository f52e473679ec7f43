"""Data models for the ccscan commit module.

Contains:
- CommitType: Canonical tag or custom keyword
- Scope: The noun inside a header's parentheses
- Separator: How a footer token is joined to its value
- Footer: A structured footer line
- ConventionalCommit: The parsed commit aggregate, with canonical rendering
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ccscan.commit.constants import (
    BREAKING_CHANGE_TOKENS,
    CANONICAL_COMMIT_TYPES,
    CommitTag,
)


@dataclass(frozen=True)
class CommitType:
    """A commit type: one of the canonical tags, or a custom keyword.

    Attributes:
        tag: The canonical tag, or ``CommitTag.CUSTOM``.
        custom: The keyword for custom types. ``None`` for canonical tags.
    """

    tag: CommitTag
    custom: Optional[str] = None

    def __post_init__(self):
        if self.tag is CommitTag.CUSTOM and not self.custom:
            raise ValueError("A custom commit type needs a keyword")
        if self.tag is not CommitTag.CUSTOM and self.custom is not None:
            raise ValueError(f"Canonical commit type {self.tag.value!r} takes no keyword")

    @classmethod
    def from_token(cls, token: str) -> "CommitType":
        """Look up a header keyword, case-insensitively.

        Unknown keywords become custom types and keep their original casing.

        Args:
            token: The raw commit type token.

        Returns:
            The matching CommitType.
        """
        tag = CANONICAL_COMMIT_TYPES.get(token.lower())
        if tag is None:
            return cls(CommitTag.CUSTOM, token)
        return cls(tag)

    @classmethod
    def variants(cls) -> list["CommitType"]:
        """All canonical commit types, in declaration order."""
        return [cls(tag) for tag in CANONICAL_COMMIT_TYPES.values()]

    @property
    def is_custom(self) -> bool:
        return self.tag is CommitTag.CUSTOM

    @property
    def keyword(self) -> str:
        """The keyword rendered in a header."""
        if self.is_custom:
            return self.custom
        return self.tag.value

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class Scope:
    """The section of the codebase a commit touches."""

    noun: str

    def __str__(self) -> str:
        return self.noun


class Separator(Enum):
    """Footer token separators, valued by their canonical spelling."""

    COLON = ": "
    POUND = " #"
    COLON_NEWLINE = ":\n"

    @classmethod
    def from_text(cls, text: str) -> "Separator":
        """Tag a separator by its literal spelling.

        Raises:
            ValueError: If the spelling is not a footer separator.
        """
        if text == ":\r\n":
            return cls.COLON_NEWLINE
        return cls(text)


@dataclass(frozen=True)
class Footer:
    """A footer line such as ``Signed-off-by: Some One``.

    Attributes:
        token: Footer label, e.g. ``Refs`` or ``BREAKING CHANGE``.
        content: The value, trimmed of surrounding whitespace.
        separator: How the token is joined to the content.
    """

    token: str
    content: str
    separator: Separator = Separator.COLON

    @property
    def is_breaking_change(self) -> bool:
        return self.token in BREAKING_CHANGE_TOKENS

    def render(self) -> str:
        return f"{self.token}{self.separator.value}{self.content}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ConventionalCommit:
    """A parsed conventional commit.

    ``is_breaking_change`` is forced on when any footer is a breaking-change
    footer, and ``footers`` is always stored as a tuple.

    Attributes:
        commit_type: The header's commit type.
        description: The header text after ``": "``.
        scope: The header scope, if any.
        body: Free-form paragraphs between header and footers, if any.
        footers: Footers in input order, duplicates included.
        is_breaking_change: Header ``!`` or a breaking-change footer.
    """

    commit_type: CommitType
    description: str
    scope: Optional[Scope] = None
    body: Optional[str] = None
    footers: tuple[Footer, ...] = ()
    is_breaking_change: bool = False

    def __post_init__(self):
        footers = tuple(self.footers)
        object.__setattr__(self, "footers", footers)
        if any(footer.is_breaking_change for footer in footers):
            object.__setattr__(self, "is_breaking_change", True)

    @property
    def breaking_footers(self) -> list[Footer]:
        return [footer for footer in self.footers if footer.is_breaking_change]

    def header(self) -> str:
        """Render ``type[(scope)][!]: description``."""
        header = self.commit_type.keyword
        if self.scope is not None:
            header += f"({self.scope.noun})"
        if self.is_breaking_change:
            header += "!"
        return f"{header}: {self.description}"

    def render(self) -> str:
        """Render the canonical commit message text.

        Sections are header, body and the footer block, separated by one
        blank line. Footers are written one per line.

        Returns:
            The commit message.
        """
        parts = [self.header()]
        if self.body:
            parts.append(self.body)
        if self.footers:
            parts.append("\n".join(footer.render() for footer in self.footers))
        return "\n\n".join(parts)

    def __str__(self) -> str:
        return self.render()
