"""Syntax tree produced by a successful grammar match."""

from dataclasses import dataclass
from typing import Iterator, Optional

from ccscan.grammar.rules import Rule


@dataclass(frozen=True)
class Node:
    """A matched span of input, tagged with the rule that matched it.

    Attributes:
        rule: The production that matched.
        start: Offset of the first matched character.
        end: Offset one past the last matched character.
        text: The matched text, ``input[start:end]``.
        children: Sub-matches in input order.
    """

    rule: Rule
    start: int
    end: int
    text: str
    children: tuple["Node", ...] = ()

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    def child(self, rule: Rule) -> Optional["Node"]:
        """Return the first direct child matched by ``rule``, if any."""
        for node in self.children:
            if node.rule is rule:
                return node
        return None
