"""Tests for ccscan.issues module."""

import subprocess
from unittest.mock import MagicMock

import pytest

from ccscan.commit import Footer, Separator
from ccscan.issues import Issue, IssueLookupError, closes_footer, list_issues


class TestListIssues:
    """Tests for list_issues function."""

    def test_parses_gh_output(self, mocker):
        """Test parsing the JSON printed by gh."""
        mock_run = mocker.patch("ccscan.issues.subprocess.run")
        mock_run.return_value = MagicMock(
            stdout='[{"number": 12, "title": "Crash on empty scope"}, {"number": 7, "title": "Docs"}]'
        )

        issues = list_issues()

        assert issues == [
            Issue(number=12, title="Crash on empty scope"),
            Issue(number=7, title="Docs"),
        ]
        assert mock_run.call_args[0][0] == ["gh", "issue", "list", "--json", "title,number"]

    def test_empty_output(self, mocker):
        """Test that no output means no issues."""
        mocker.patch("ccscan.issues.subprocess.run", return_value=MagicMock(stdout=""))

        assert list_issues() == []

    def test_gh_failure(self, mocker):
        """Test that a failing gh command raises IssueLookupError."""
        mocker.patch(
            "ccscan.issues.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["gh"], stderr="not logged in"),
        )

        with pytest.raises(IssueLookupError, match="not logged in"):
            list_issues()

    def test_gh_missing(self, mocker):
        """Test that a missing gh binary raises IssueLookupError."""
        mocker.patch("ccscan.issues.subprocess.run", side_effect=FileNotFoundError)

        with pytest.raises(IssueLookupError, match="not installed"):
            list_issues()

    def test_unexpected_output(self, mocker):
        """Test that malformed JSON raises IssueLookupError."""
        mocker.patch("ccscan.issues.subprocess.run", return_value=MagicMock(stdout="not json"))

        with pytest.raises(IssueLookupError):
            list_issues()

    def test_missing_fields(self, mocker):
        """Test that entries without a number are rejected."""
        mocker.patch(
            "ccscan.issues.subprocess.run",
            return_value=MagicMock(stdout='[{"title": "no number"}]'),
        )

        with pytest.raises(IssueLookupError):
            list_issues()


class TestClosesFooter:
    """Tests for closes_footer function."""

    def test_lists_issue_numbers(self):
        """Test the footer for several issues."""
        issues = [Issue(number=1, title="a"), Issue(number=22, title="b")]

        assert closes_footer(issues) == Footer("closes", "#1, #22", Separator.COLON)

    def test_no_issues(self):
        """Test that no footer is built without issues."""
        assert closes_footer([]) is None

    def test_issue_str(self):
        """Test the issue display form."""
        assert str(Issue(number=3, title="Fix it")) == "#3 Fix it"
