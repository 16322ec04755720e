# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the tweetsentiment test suite.
# =============================================================================

import tempfile
from pathlib import Path

import pytest

from tweetsentiment.console import SentimentConsole


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def console():
    """A console that writes warnings and errors but no info chatter."""
    return SentimentConsole(quiet=True)


@pytest.fixture
def training_lines():
    """A tiny corpus where 'great' is positive and 'terrible' is negative."""
    return [
        "Sentiment,id,Date,Query,User,Tweet",
        "4,1,Mon Apr 06,NO_QUERY,alice,what a great day",
        "4,2,Mon Apr 06,NO_QUERY,bob,Great, just GREAT!",
        "0,3,Mon Apr 06,NO_QUERY,carol,what a terrible day",
        "0,4,Mon Apr 06,NO_QUERY,dave,terrible... truly terrible",
    ]


@pytest.fixture
def write_lines(temp_dir):
    """Write a list of lines to a file in the temp directory."""

    def _write(name, lines):
        path = temp_dir / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
