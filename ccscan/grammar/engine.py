"""Recursive descent matcher for the conventional commit grammar.

Productions, tried in order, anchored at the start of the input:

    conventional_commit := header (blank_line body)? (blank_line footers)? end
    header              := commit_type scope? breaking_indicator? colon_separator description
    scope               := "(" scope_token scope_delimiter
    body                := paragraph (blank_line paragraph)*
    footers             := footer (line_break+ footer)*
    footer              := footer_token footer_separator footer_value

A paragraph whose first line is shaped like a footer (token followed by a
footer separator) is never body text: it starts the footers section.

On failure the scanner reports the furthest offset reached and every rule
that was expected at that offset, so callers can decide what went wrong
without reading a message.
"""

import re
from typing import Callable, Optional

from ccscan.grammar.exceptions import GrammarError
from ccscan.grammar.rules import TRAILING_WHITESPACE_RULES, Rule
from ccscan.grammar.tree import Node

# Terminals
COMMIT_TYPE_PATTERN = re.compile(r"[A-Za-z]+")
SCOPE_OPEN_PATTERN = re.compile(r"\(")
SCOPE_TOKEN_PATTERN = re.compile(r"[^()\r\n]+")
SCOPE_CLOSE_PATTERN = re.compile(r"\)")
BREAKING_INDICATOR_PATTERN = re.compile(r"!")
COLON_SEPARATOR_PATTERN = re.compile(r": ")
DESCRIPTION_PATTERN = re.compile(r"\S[^\r\n]*")
FOOTER_TOKEN_PATTERN = re.compile(r"BREAKING CHANGE|[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*")
FOOTER_SEPARATOR_PATTERN = re.compile(r": | #|:\r?\n")

# Layout
BLANK_LINE_PATTERN = re.compile(r"\r?\n[ \t]*\r?\n")
LINE_BREAK_PATTERN = re.compile(r"\r?\n")
LINE_BREAKS_PATTERN = re.compile(r"(?:[ \t]*\r?\n)+")
TEXT_LINE_PATTERN = re.compile(r"[^\r\n]*\S[^\r\n]*")
LINE_REST_PATTERN = re.compile(r"[^\r\n]*")
TRAILING_WHITESPACE_PATTERN = re.compile(r"\s*\Z")


class _Scanner:
    """Single-use matching state for one input string."""

    def __init__(self, text: str):
        self.text = text
        self.furthest = 0
        self.positives: set[Rule] = set()

    def expect(self, rule: Rule, pos: int) -> None:
        """Record that ``rule`` was expected at ``pos``."""
        if pos > self.furthest:
            self.furthest = pos
            self.positives = {rule}
        elif pos == self.furthest:
            self.positives.add(rule)

    def failure(self) -> GrammarError:
        return GrammarError(self.text, self.furthest, self.positives)

    def node(self, rule: Rule, start: int, end: int, children=()) -> Node:
        return Node(rule, start, end, self.text[start:end], tuple(children))

    def terminal(self, rule: Rule, pattern: re.Pattern, pos: int) -> Optional[Node]:
        match = pattern.match(self.text, pos)
        if match is None:
            self.expect(rule, pos)
            return None
        return self.node(rule, pos, match.end())

    def is_footer_line(self, pos: int) -> bool:
        """Check whether a footer token and separator start at ``pos``."""
        token = FOOTER_TOKEN_PATTERN.match(self.text, pos)
        if token is None:
            return False
        return FOOTER_SEPARATOR_PATTERN.match(self.text, token.end()) is not None

    # Header

    def header(self, pos: int) -> Optional[Node]:
        commit_type = self.terminal(Rule.COMMIT_TYPE, COMMIT_TYPE_PATTERN, pos)
        if commit_type is None:
            return None
        children = [commit_type]
        end = commit_type.end

        scope = self.scope(end)
        if scope is not None:
            children.append(scope)
            end = scope.end

        indicator = self.terminal(Rule.BREAKING_INDICATOR, BREAKING_INDICATOR_PATTERN, end)
        if indicator is not None:
            children.append(indicator)
            end = indicator.end

        separator = self.terminal(Rule.COLON_SEPARATOR, COLON_SEPARATOR_PATTERN, end)
        if separator is None:
            return None
        children.append(separator)

        description = self.description(separator.end)
        if description is None:
            return None
        children.append(description)
        return self.node(Rule.HEADER, pos, description.end, children)

    def scope(self, pos: int) -> Optional[Node]:
        opening = self.terminal(Rule.SCOPE, SCOPE_OPEN_PATTERN, pos)
        if opening is None:
            return None
        token = self.scope_token(opening.end)
        if token is None:
            return None
        closing = self.terminal(Rule.SCOPE_DELIMITER, SCOPE_CLOSE_PATTERN, token.end)
        if closing is None:
            return None
        return self.node(Rule.SCOPE, pos, closing.end, [token])

    def commit_type(self, pos: int) -> Optional[Node]:
        return self.terminal(Rule.COMMIT_TYPE, COMMIT_TYPE_PATTERN, pos)

    def scope_token(self, pos: int) -> Optional[Node]:
        return self.terminal(Rule.SCOPE_TOKEN, SCOPE_TOKEN_PATTERN, pos)

    def description(self, pos: int) -> Optional[Node]:
        return self.terminal(Rule.DESCRIPTION, DESCRIPTION_PATTERN, pos)

    # Body

    def paragraph(self, pos: int) -> Optional[int]:
        """Match one body paragraph and return its end offset."""
        line = None
        if not self.is_footer_line(pos):
            line = TEXT_LINE_PATTERN.match(self.text, pos)
        if line is None:
            self.expect(Rule.BODY, pos)
            return None

        end = line.end()
        while True:
            line_break = LINE_BREAK_PATTERN.match(self.text, end)
            if line_break is None:
                break
            line = TEXT_LINE_PATTERN.match(self.text, line_break.end())
            if line is None:
                break
            end = line.end()
        return end

    def body(self, pos: int) -> Optional[Node]:
        end = self.paragraph(pos)
        if end is None:
            return None
        while True:
            blank = BLANK_LINE_PATTERN.match(self.text, end)
            if blank is None:
                break
            paragraph_end = self.paragraph(blank.end())
            if paragraph_end is None:
                break
            end = paragraph_end
        return self.node(Rule.BODY, pos, end)

    # Footers

    def footer(self, pos: int) -> Optional[Node]:
        token = self.terminal(Rule.FOOTER_TOKEN, FOOTER_TOKEN_PATTERN, pos)
        if token is None:
            return None
        separator = self.terminal(Rule.FOOTER_SEPARATOR, FOOTER_SEPARATOR_PATTERN, token.end)
        if separator is None:
            return None
        if separator.text.startswith(":") and separator.text.endswith("\n"):
            value = self.multiline_value(separator.end)
        else:
            value = self.line_value(separator.end)
        if value is None:
            return None
        return self.node(Rule.FOOTER, pos, value.end, [token, separator, value])

    def line_value(self, pos: int) -> Optional[Node]:
        end = LINE_REST_PATTERN.match(self.text, pos).end()
        if not self.text[pos:end].strip():
            self.expect(Rule.FOOTER_VALUE, pos)
            return None
        return self.node(Rule.FOOTER_VALUE, pos, end)

    def value_line(self, pos: int) -> Optional[int]:
        if self.is_footer_line(pos):
            return None
        line = TEXT_LINE_PATTERN.match(self.text, pos)
        return None if line is None else line.end()

    def multiline_value(self, pos: int) -> Optional[Node]:
        # The first line is value text even when shaped like a footer
        line = TEXT_LINE_PATTERN.match(self.text, pos)
        end = None if line is None else line.end()
        if end is None:
            self.expect(Rule.FOOTER_VALUE, pos)
            return None
        while True:
            line_break = LINE_BREAK_PATTERN.match(self.text, end)
            if line_break is None:
                break
            line_end = self.value_line(line_break.end())
            if line_end is None:
                break
            end = line_end
        return self.node(Rule.FOOTER_VALUE, pos, end)

    def footers(self, pos: int) -> Optional[Node]:
        first = self.footer(pos)
        if first is None:
            return None
        children = [first]
        end = first.end
        while True:
            line_breaks = LINE_BREAKS_PATTERN.match(self.text, end)
            if line_breaks is None:
                break
            footer = self.footer(line_breaks.end())
            if footer is None:
                break
            children.append(footer)
            end = footer.end
        return self.node(Rule.FOOTERS, pos, end, children)

    # Whole commit

    def conventional_commit(self, pos: int) -> Optional[Node]:
        header = self.header(pos)
        if header is None:
            return None
        children = [header]
        end = header.end

        blank = BLANK_LINE_PATTERN.match(self.text, end)
        if blank is not None:
            body = self.body(blank.end())
            if body is not None:
                children.append(body)
                end = body.end

        blank = BLANK_LINE_PATTERN.match(self.text, end)
        if blank is not None:
            footers = self.footers(blank.end())
            if footers is not None:
                children.append(footers)
                end = footers.end

        return self.node(Rule.CONVENTIONAL_COMMIT, pos, end, children)


_ENTRY_POINTS: dict[Rule, Callable[[_Scanner, int], Optional[Node]]] = {
    Rule.CONVENTIONAL_COMMIT: _Scanner.conventional_commit,
    Rule.HEADER: _Scanner.header,
    Rule.COMMIT_TYPE: _Scanner.commit_type,
    Rule.SCOPE_TOKEN: _Scanner.scope_token,
    Rule.DESCRIPTION: _Scanner.description,
    Rule.BODY: _Scanner.body,
    Rule.FOOTER: _Scanner.footer,
    Rule.FOOTERS: _Scanner.footers,
}


def parse(rule: Rule, text: str) -> Node:
    """Match the whole of ``text`` against a production.

    Args:
        rule: The production to match. Must be one of the entry rules.
        text: The input text.

    Returns:
        The syntax tree rooted at ``rule``.

    Raises:
        GrammarError: If the input does not match, or leaves unmatched input.
        ValueError: If ``rule`` cannot be used as an entry point.
    """
    try:
        production = _ENTRY_POINTS[rule]
    except KeyError:
        raise ValueError(f"{rule} is not a grammar entry point")

    scanner = _Scanner(text)
    node = production(scanner, 0)
    if node is None:
        raise scanner.failure()

    if rule in TRAILING_WHITESPACE_RULES:
        complete = TRAILING_WHITESPACE_PATTERN.match(text, node.end) is not None
    else:
        complete = node.end == len(text)
    if not complete:
        scanner.expect(Rule.EOI, node.end)
        raise scanner.failure()

    return node
