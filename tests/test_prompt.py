"""Tests for ccscan.prompt module."""

import pytest

from ccscan.commit import CommitTag, CommitType, Footer, Scope, Separator
from ccscan.config import Config, FileConfig, PromptKind, PromptOption
from ccscan.issues import Issue, IssueLookupError
from ccscan.parser import parse_commit_type
from ccscan.prompt import (
    CommitAnswers,
    ask_until_valid,
    prompt_breaking_change,
    prompt_commit_type,
    prompt_footers,
    prompt_issues,
    run_prompts,
)


@pytest.fixture
def config():
    """Default configuration."""
    return Config.defaults()


class TestCommitAnswers:
    """Tests for CommitAnswers."""

    def test_footer_order(self):
        """Test that breaking and issue footers come first."""
        answers = CommitAnswers(
            breaking_footer=Footer("BREAKING CHANGE", "x"),
            issues_footer=Footer("closes", "#1"),
            footers=[Footer("Acked-by", "A")],
        )

        assert [footer.token for footer in answers.all_footers()] == [
            "BREAKING CHANGE",
            "closes",
            "Acked-by",
        ]

    def test_to_commit_requires_subject(self):
        """Test that a commit cannot be built without a subject."""
        answers = CommitAnswers(commit_type=CommitType(CommitTag.FEATURE))

        with pytest.raises(ValueError):
            answers.to_commit()

    def test_to_commit(self):
        """Test building the commit from answers."""
        answers = CommitAnswers(
            commit_type=CommitType(CommitTag.FEATURE),
            scope=Scope("cli"),
            description="add flag",
            is_breaking_change=True,
        )

        assert answers.to_commit().render() == "feat(cli)!: add flag"


class TestAskUntilValid:
    """Tests for ask_until_valid function."""

    def test_asks_again_on_invalid_answer(self, mocker, capsys):
        """Test that a rejected answer is reported and asked again."""
        mock_prompt = mocker.patch("ccscan.prompt.typer.prompt", side_effect=["@", "feat"])

        result = ask_until_valid("type", parse_commit_type)

        assert result == CommitType(CommitTag.FEATURE)
        assert mock_prompt.call_count == 2
        assert "Invalid commit type" in capsys.readouterr().err

    def test_optional_empty_answer(self, mocker):
        """Test that an empty optional answer is skipped."""
        mocker.patch("ccscan.prompt.typer.prompt", return_value="  ")

        assert ask_until_valid("scope", parse_commit_type, optional=True) is None


class TestPromptCommitType:
    """Tests for prompt_commit_type function."""

    def test_select_by_number(self, mocker, config):
        """Test selecting a listed type by its position."""
        mocker.patch("ccscan.prompt.typer.prompt", return_value="2")
        answers = CommitAnswers()

        prompt_commit_type(answers, config)

        assert answers.commit_type == CommitType(CommitTag.CUSTOM, "fix")

    def test_select_by_name(self, mocker, config):
        """Test typing a keyword that is not listed."""
        mocker.patch("ccscan.prompt.typer.prompt", return_value="chore")
        answers = CommitAnswers()

        prompt_commit_type(answers, config)

        assert answers.commit_type == CommitType(CommitTag.CHORE)

    def test_lists_options(self, mocker, config, capsys):
        """Test that configured types are listed with their labels."""
        mocker.patch("ccscan.prompt.typer.prompt", return_value="1")

        prompt_commit_type(CommitAnswers(), config)

        out = capsys.readouterr().out
        assert "1. 🎁 - feat (A new feature)" in out
        assert "2. 🐛 - fix (A bug fix)" in out


class TestPromptBreakingChange:
    """Tests for prompt_breaking_change function."""

    def test_not_breaking(self, mocker, config):
        """Test declining the breaking change question."""
        mocker.patch("ccscan.prompt.typer.confirm", return_value=False)
        mock_prompt = mocker.patch("ccscan.prompt.typer.prompt")
        answers = CommitAnswers()

        prompt_breaking_change(answers, config)

        assert not answers.is_breaking_change
        mock_prompt.assert_not_called()

    def test_breaking_with_detail(self, mocker, config):
        """Test that a described breaking change becomes a footer."""
        mocker.patch("ccscan.prompt.typer.confirm", return_value=True)
        mocker.patch("ccscan.prompt.typer.prompt", return_value="config moved ")
        answers = CommitAnswers()

        prompt_breaking_change(answers, config)

        assert answers.is_breaking_change
        assert answers.breaking_footer == Footer("BREAKING CHANGE", "config moved")

    def test_breaking_without_detail(self, mocker, config):
        """Test that the breaking flag stands alone without detail."""
        mocker.patch("ccscan.prompt.typer.confirm", return_value=True)
        mocker.patch("ccscan.prompt.typer.prompt", return_value="")
        answers = CommitAnswers()

        prompt_breaking_change(answers, config)

        assert answers.is_breaking_change
        assert answers.breaking_footer is None


class TestPromptIssues:
    """Tests for prompt_issues function."""

    def test_selects_issues(self, mocker, config):
        """Test selecting issues by position."""
        mocker.patch(
            "ccscan.prompt.list_issues",
            return_value=[Issue(number=4, title="a"), Issue(number=9, title="b")],
        )
        mocker.patch("ccscan.prompt.typer.prompt", return_value="2, 1")
        answers = CommitAnswers()

        prompt_issues(answers, config)

        assert answers.issues_footer == Footer("closes", "#9, #4", Separator.COLON)

    def test_out_of_range_asks_again(self, mocker, config):
        """Test that invalid positions are asked again."""
        mocker.patch("ccscan.prompt.list_issues", return_value=[Issue(number=4, title="a")])
        mock_prompt = mocker.patch("ccscan.prompt.typer.prompt", side_effect=["5", "x", ""])
        answers = CommitAnswers()

        prompt_issues(answers, config)

        assert mock_prompt.call_count == 3
        assert answers.issues_footer is None

    def test_lookup_failure_skips(self, mocker, config, capsys):
        """Test that an unavailable issue list skips the question."""
        mocker.patch("ccscan.prompt.list_issues", side_effect=IssueLookupError("gh missing"))
        mock_prompt = mocker.patch("ccscan.prompt.typer.prompt")
        answers = CommitAnswers()

        prompt_issues(answers, config)

        mock_prompt.assert_not_called()
        assert answers.issues_footer is None
        assert "gh missing" in capsys.readouterr().err


class TestPromptFooters:
    """Tests for prompt_footers function."""

    def test_collects_until_empty_line(self, mocker, config):
        """Test that footer lines are collected and parsed together."""
        mocker.patch(
            "ccscan.prompt.typer.prompt",
            side_effect=["Refs #1", "Acked-by: A", ""],
        )
        answers = CommitAnswers()

        prompt_footers(answers, config)

        assert answers.footers == [
            Footer("Refs", "1", Separator.POUND),
            Footer("Acked-by", "A"),
        ]

    def test_invalid_footers_asked_again(self, mocker, config, capsys):
        """Test that an invalid block is rejected and asked again."""
        mocker.patch(
            "ccscan.prompt.typer.prompt",
            side_effect=["approved-by:Iroquois", "", "Refs #1", ""],
        )
        answers = CommitAnswers()

        prompt_footers(answers, config)

        assert answers.footers == [Footer("Refs", "1", Separator.POUND)]
        assert "Invalid commit footer" in capsys.readouterr().err


class TestRunPrompts:
    """Tests for run_prompts function."""

    def test_asks_in_configured_order(self, mocker):
        """Test a complete interactive session."""
        config = Config.defaults()
        config.merge(FileConfig(prompts=[
            PromptOption(name="scope", order=1),
            PromptOption(name="subject", order=2),
            PromptOption(name="body", order=3),
            PromptOption(name="is_breaking", order=4),
            PromptOption(name="footers", order=5),
        ]))
        assert config.ordered_prompts() == [
            PromptKind.TYPE,
            PromptKind.SCOPE,
            PromptKind.SUBJECT,
            PromptKind.BODY,
            PromptKind.IS_BREAKING,
            PromptKind.FOOTERS,
        ]
        mocker.patch(
            "ccscan.prompt.typer.prompt",
            side_effect=["1", "parser", "add arrays", "", "drops tuples", "Refs #4", ""],
        )
        mocker.patch("ccscan.prompt.typer.confirm", return_value=True)

        commit = run_prompts(config)

        assert commit.render() == (
            "feat(parser)!: add arrays\n"
            "\n"
            "BREAKING CHANGE: drops tuples\n"
            "Refs #4"
        )
        assert commit.body is None
        assert commit.is_breaking_change
