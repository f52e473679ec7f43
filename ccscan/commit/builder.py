"""Map grammar syntax trees onto the commit model.

Contains:
- build_commit_type: commit_type node -> CommitType
- build_scope: scope_token node -> Scope
- build_footer: footer node -> Footer
- build_footers: footers node -> list of Footer
- build_commit: conventional_commit node -> ConventionalCommit
"""

from typing import Optional

from ccscan.commit.models import (
    CommitType,
    ConventionalCommit,
    Footer,
    Scope,
    Separator,
)
from ccscan.grammar import GrammarError, Node, Rule


def build_commit_type(node: Node) -> CommitType:
    return CommitType.from_token(node.text)


def build_scope(node: Node) -> Scope:
    return Scope(noun=node.text)


def build_footer(node: Node, source: str) -> Footer:
    """Split a footer node into token, separator and trimmed content.

    Args:
        node: A node matched by the footer rule.
        source: The full parsed input, for diagnostics.

    Returns:
        The Footer.

    Raises:
        GrammarError: If the separator spelling is unknown. This means the
            grammar and the model disagree, not that the input is bad.
    """
    token = node.child(Rule.FOOTER_TOKEN)
    separator = node.child(Rule.FOOTER_SEPARATOR)
    value = node.child(Rule.FOOTER_VALUE)

    try:
        tagged = Separator.from_text(separator.text)
    except ValueError:
        raise GrammarError.custom(
            source,
            separator.start,
            f"unrecognized footer token separator {separator.text!r}",
        )

    return Footer(token=token.text, content=value.text.strip(), separator=tagged)


def build_footers(node: Node, source: str) -> list[Footer]:
    return [build_footer(child, source) for child in node]


def build_commit(node: Node, source: str) -> ConventionalCommit:
    """Assemble a ConventionalCommit from a whole-commit syntax tree.

    Args:
        node: A node matched by the conventional_commit rule.
        source: The full parsed input, for diagnostics.

    Returns:
        The complete ConventionalCommit.
    """
    header = node.child(Rule.HEADER)

    commit_type = build_commit_type(header.child(Rule.COMMIT_TYPE))
    description = header.child(Rule.DESCRIPTION).text
    is_breaking_change = header.child(Rule.BREAKING_INDICATOR) is not None

    scope: Optional[Scope] = None
    scope_node = header.child(Rule.SCOPE)
    if scope_node is not None:
        scope = build_scope(scope_node.child(Rule.SCOPE_TOKEN))

    body_node = node.child(Rule.BODY)
    body = body_node.text if body_node is not None else None

    footers: list[Footer] = []
    footers_node = node.child(Rule.FOOTERS)
    if footers_node is not None:
        footers = build_footers(footers_node, source)

    if any(footer.is_breaking_change for footer in footers):
        is_breaking_change = True

    return ConventionalCommit(
        commit_type=commit_type,
        scope=scope,
        description=description,
        body=body,
        footers=tuple(footers),
        is_breaking_change=is_breaking_change,
    )
