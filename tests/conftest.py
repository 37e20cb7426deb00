"""
PyTest Configuration and Fixtures
=================================

Shared fixtures and configuration for FeedSig tests.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment variables before any imports
os.environ["FEEDSIG_LOGGING__CONSOLE_LOGGING"] = "false"
os.environ["FEEDSIG_DEBUG"] = "false"


# ============================================================================
# Text Processing Fixtures
# ============================================================================


@pytest.fixture
def small_stopwords():
    """Stopword set holding only 'the' and 'on'."""
    from feedsig.processing.stopwords import StopwordSet

    return StopwordSet(["the", "on"])


@pytest.fixture
def table_stemmer():
    """Stemmer that maps a handful of known words and leaves the rest alone."""
    stems = {"cats": "cat", "ran": "run", "running": "run"}

    def stem(word: str) -> str:
        return stems.get(word, word)

    return stem


@pytest.fixture
def counter(small_stopwords, table_stemmer):
    """Word counter with injected stopwords and table stemmer."""
    from feedsig.processing.word_counter import WordCounter

    return WordCounter(stopwords=small_stopwords, stem=table_stemmer)


@pytest.fixture
def cleaner():
    """Default markup/punctuation stripper using the built-in parser."""
    from feedsig.ingestion.content_cleaner import ContentCleaner

    return ContentCleaner()


@pytest.fixture
def published_at():
    """Fixed publication timestamp."""
    return datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_article(published_at):
    """Factory for articles with sensible defaults."""
    from feedsig.models.article import Article

    def _make(**overrides):
        data = {
            "headline": "Cats running",
            "text": "The cat sat on the mat. The cat ran.",
            "url": "https://news.example.com/cats",
            "date": published_at,
            "images": [],
            "feed_title": "Example News",
            "feed_logo": None,
            "feed_icon": None,
        }
        data.update(overrides)
        return Article(**data)

    return _make


@pytest.fixture
def fresh_default_stopwords():
    """Drop the cached process-wide stopword set before and after a test."""
    from feedsig.processing.stopwords import reset_stopwords

    reset_stopwords()
    yield
    reset_stopwords()
