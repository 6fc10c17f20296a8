"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from stgseries.stg import configure_runner


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture(autouse=True)
def reset_runner():
    """Pin the stg executable so tests never read the user's config."""
    configure_runner("stg", verbose=False)
    yield
    configure_runner(None, verbose=False)


@pytest.fixture
def sample_series_output():
    """Sample `stg series --all --description --empty` output."""
    return (
        " + add-parser    # Add the series parser\n"
        "0+ empty-fixup   # WIP\n"
        " > fix-render    # Fix column alignment\n"
        " - docs          # Document the CLI\n"
        " ! old-experiment # Try another approach"
    )


@pytest.fixture
def sample_patch_names():
    """Patch names matching sample_series_output."""
    return ["add-parser", "empty-fixup", "fix-render", "docs", "old-experiment"]
