"""Shared fixtures for the sensitive word filter tests."""

import sys
from pathlib import Path

import pytest

# Make the project root importable without an installed package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wordfilter.engine.classifier import CharClassifier  # noqa: E402
from wordfilter.engine.filter import SensitiveWordFilter  # noqa: E402


@pytest.fixture(scope="session")
def classifier() -> CharClassifier:
    """Classifier with the default CJK range."""
    return CharClassifier.from_scripts()


@pytest.fixture
def make_filter():
    """Factory building a filter from a keyword list."""

    def _make(keywords, replacement="***"):
        return SensitiveWordFilter.from_keywords(keywords, replacement=replacement)

    return _make


@pytest.fixture
def word_list(tmp_path: Path) -> Path:
    """Temporary word list with blank lines and padding."""
    path = tmp_path / "words.txt"
    path.write_text("bad\n\n  赌博  \nfoo\n\n", encoding="utf-8")
    return path
