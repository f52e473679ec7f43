"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git/hooks to simulate a git repo
    hooks_dir = temp_dir / ".git" / "hooks"
    hooks_dir.mkdir(parents=True)
    return temp_dir


@pytest.fixture
def xdg_config_home(temp_dir, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = temp_dir / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def full_commit_message():
    """A commit message using every section of the grammar."""
    return """feat(parser)!: add footer parsing

Footers follow the body after one blank line.

The body may span several paragraphs.
Lines inside a paragraph are kept as written.

Reviewed-by: Z
Refs #133
BREAKING CHANGE: footers are now mandatory"""
