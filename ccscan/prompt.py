"""Interactive commit message prompts.

Asks the configured questions in order and validates every answer with the
matching field parser, asking again until the answer parses. The assembled
message is checked once more with parse_commit before it is returned.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

import typer

from ccscan.commit import CommitType, ConventionalCommit, Footer, Scope
from ccscan.config import Config, PromptKind
from ccscan.errors import ParseError
from ccscan.issues import IssueLookupError, closes_footer, list_issues
from ccscan.parser import (
    parse_body,
    parse_commit,
    parse_commit_type,
    parse_description,
    parse_footers,
    parse_scope,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"


@dataclass
class CommitAnswers:
    """Answers collected so far."""

    commit_type: Optional[CommitType] = None
    scope: Optional[Scope] = None
    description: Optional[str] = None
    body: Optional[str] = None
    is_breaking_change: bool = False
    breaking_footer: Optional[Footer] = None
    issues_footer: Optional[Footer] = None
    footers: list[Footer] = field(default_factory=list)

    def all_footers(self) -> list[Footer]:
        """Footers in message order: breaking change, issues, then the rest."""
        footers = []
        if self.breaking_footer is not None:
            footers.append(self.breaking_footer)
        if self.issues_footer is not None:
            footers.append(self.issues_footer)
        footers.extend(self.footers)
        return footers

    def to_commit(self) -> ConventionalCommit:
        """Assemble the commit.

        Raises:
            ValueError: If the type or subject was never answered.
        """
        if self.commit_type is None or not self.description:
            raise ValueError("A commit needs at least a type and a subject")
        return ConventionalCommit(
            commit_type=self.commit_type,
            scope=self.scope,
            description=self.description,
            body=self.body,
            footers=tuple(self.all_footers()),
            is_breaking_change=self.is_breaking_change,
        )


def ask_until_valid(
    question: str,
    parse: Callable[[str], T],
    optional: bool = False,
) -> Optional[T]:
    """Prompt until the answer parses.

    Args:
        question: Prompt text.
        parse: Field parser raising ParseError on invalid input.
        optional: Accept an empty answer and return None.

    Returns:
        The parsed answer, or None for a skipped optional question.
    """
    while True:
        if optional:
            answer = typer.prompt(question, default="", show_default=False)
            if not answer.strip():
                return None
        else:
            answer = typer.prompt(question)
        try:
            return parse(answer)
        except ParseError as e:
            logger.debug("Rejected answer %r: %s", answer, e.kind.name)
            typer.echo(str(e), err=True)


def prompt_commit_type(answers: CommitAnswers, config: Config) -> None:
    """Select the commit type by number or keyword."""
    options = list(config.commit_types.values())
    typer.echo("Select the type of change that you're committing:")
    for i, option in enumerate(options, 1):
        typer.echo(f"  {i}. {option.label()}")

    def parse_choice(answer: str) -> CommitType:
        answer = answer.strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            answer = options[int(answer) - 1].name
        return parse_commit_type(answer)

    answers.commit_type = ask_until_valid("type", parse_choice)


def prompt_scope(answers: CommitAnswers, config: Config) -> None:
    answers.scope = ask_until_valid("scope (a noun, leave empty to skip)", parse_scope, optional=True)


def prompt_subject(answers: CommitAnswers, config: Config) -> None:
    answers.description = ask_until_valid("subject", parse_description)


def prompt_body(answers: CommitAnswers, config: Config) -> None:
    answers.body = ask_until_valid("body (leave empty to skip)", parse_body, optional=True)


def prompt_breaking_change(answers: CommitAnswers, config: Config) -> None:
    """Ask whether the change is breaking and, optionally, describe it."""
    answers.is_breaking_change = typer.confirm("Is this a breaking change?", default=False)
    if not answers.is_breaking_change:
        return
    detail = typer.prompt(
        "Describe the breaking change (leave empty to skip)",
        default="",
        show_default=False,
    ).strip()
    if detail:
        answers.breaking_footer = Footer(token=BREAKING_CHANGE_TOKEN, content=detail)


def prompt_issues(answers: CommitAnswers, config: Config) -> None:
    """Pick the open issues this commit closes."""
    try:
        issues = list_issues()
    except IssueLookupError as e:
        logger.warning("Skipping issue selection: %s", e)
        typer.echo(f"Could not list issues: {e}", err=True)
        return

    if not issues:
        typer.echo("No open issues found.")
        return

    typer.echo("Open issues:")
    for i, issue in enumerate(issues, 1):
        typer.echo(f"  {i}. {issue}")

    while True:
        answer = typer.prompt(
            "Issues closed by this commit (e.g. 1,3, leave empty to skip)",
            default="",
            show_default=False,
        ).strip()
        if not answer:
            return
        try:
            indexes = [int(part) for part in answer.replace(" ", "").split(",") if part]
        except ValueError:
            typer.echo("Enter issue list positions separated by commas.", err=True)
            continue
        if all(1 <= index <= len(issues) for index in indexes):
            answers.issues_footer = closes_footer([issues[index - 1] for index in indexes])
            return
        typer.echo(f"Choose positions between 1 and {len(issues)}.", err=True)


def prompt_footers(answers: CommitAnswers, config: Config) -> None:
    """Collect footer lines until an empty line, then validate them together."""
    while True:
        lines = []
        while True:
            line = typer.prompt("footer (leave empty to finish)", default="", show_default=False)
            if not line.strip():
                break
            lines.append(line)
        if not lines:
            return
        try:
            answers.footers = parse_footers("\n".join(lines))
            return
        except ParseError as e:
            typer.echo(str(e), err=True)


PROMPT_HANDLERS: dict[PromptKind, Callable[[CommitAnswers, Config], None]] = {
    PromptKind.TYPE: prompt_commit_type,
    PromptKind.SCOPE: prompt_scope,
    PromptKind.SUBJECT: prompt_subject,
    PromptKind.BODY: prompt_body,
    PromptKind.IS_BREAKING: prompt_breaking_change,
    PromptKind.ISSUES: prompt_issues,
    PromptKind.FOOTERS: prompt_footers,
}


def run_prompts(config: Config) -> ConventionalCommit:
    """Ask every configured prompt and build the commit.

    Args:
        config: Effective configuration (commit types and prompt order).

    Returns:
        The commit, as parsed back from its rendered text.

    Raises:
        ParseError: If the assembled message does not parse.
    """
    answers = CommitAnswers()
    for kind in config.ordered_prompts():
        PROMPT_HANDLERS[kind](answers, config)

    commit = answers.to_commit()
    return parse_commit(commit.render())
