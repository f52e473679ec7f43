"""Grammar-level exception classes.

Contains:
- GrammarError: Raised when input does not match a production. Carries the
  failure offset and the set of rules expected there (the positives set).
"""

from typing import Iterable, Optional

from ccscan.grammar.rules import Rule


class GrammarError(Exception):
    """Raised when the input does not match the requested production.

    Attributes:
        text: The full input that was being parsed.
        offset: Character offset of the failure.
        positives: Rules that would have been accepted at ``offset``.
        message: Custom description for failures that are not plain
            grammar mismatches. ``None`` for grammar mismatches.
    """

    def __init__(
        self,
        text: str,
        offset: int,
        positives: Iterable[Rule] = (),
        message: Optional[str] = None,
    ):
        self.text = text
        self.offset = offset
        self.positives = frozenset(positives)
        self.message = message
        super().__init__(self.render())

    @classmethod
    def custom(cls, text: str, offset: int, message: str) -> "GrammarError":
        """Build an error for a failure outside the grammar itself."""
        return cls(text, offset, (), message)

    @property
    def line(self) -> int:
        """1-based line number of the failure."""
        return self.text.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        """1-based column number of the failure."""
        return self.offset - self._line_start() + 1

    @property
    def snippet(self) -> str:
        """The input line containing the failure."""
        start = self._line_start()
        end = self.text.find("\n", start)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    def _line_start(self) -> int:
        return self.text.rfind("\n", 0, self.offset) + 1

    def expected(self) -> str:
        """Human readable list of the expected rules."""
        if self.message is not None:
            return self.message
        names = sorted(str(rule) for rule in self.positives)
        if not names:
            return "unexpected input"
        if len(names) == 1:
            return f"expected {names[0]}"
        return f"expected {', '.join(names[:-1])}, or {names[-1]}"

    def render(self) -> str:
        """Render a positional diagnostic pointing at the failure."""
        number = str(self.line)
        gutter = " " * len(number)
        pointer = " " * (self.column - 1) + "^---"
        return "\n".join([
            f"{gutter}--> {self.line}:{self.column}",
            f"{gutter} |",
            f"{number} | {self.snippet}",
            f"{gutter} | {pointer}",
            f"{gutter} |",
            f"{gutter} = {self.expected()}",
        ])
