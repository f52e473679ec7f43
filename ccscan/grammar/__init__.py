"""Conventional commit grammar for ccscan.

This package provides the grammar rule engine with:
- rules: Rule enum of production identifiers
- tree: Node, the syntax tree of a successful match
- exceptions: GrammarError with offset and expected rules
- engine: parse, the anchored entry point
"""

from ccscan.grammar.exceptions import GrammarError
from ccscan.grammar.rules import Rule
from ccscan.grammar.tree import Node
from ccscan.grammar.engine import parse


__all__ = [
    "GrammarError",
    "Rule",
    "Node",
    "parse",
]
