"""
Word Counter
============

Counts stemmed words in normalized text, skipping low-value words.
"""

from collections import Counter
from typing import Callable, Dict, Optional

from .stemmer import stem as porter_stem
from .stopwords import StopwordSet, get_stopwords
from ..utils.logging import get_logger_for_component

StemFunction = Callable[[str], str]


class WordCounter:
    """Turns normalized text into a stem -> occurrence count mapping.

    Stopwords are matched against the surface form of each token, before
    stemming. A stem that happens to equal a stopword is still counted.
    """

    def __init__(
        self,
        stopwords: Optional[StopwordSet] = None,
        stem: Optional[StemFunction] = None,
    ):
        """Initialize word counter.

        Args:
            stopwords: Words to skip; defaults to the bundled low-value word list
            stem: Stemming function; defaults to the Porter stemmer
        """
        self.stopwords = stopwords if stopwords is not None else get_stopwords()
        self.stem = stem or porter_stem
        self.logger = get_logger_for_component("word_counter")

    def count_words(self, text: Optional[str]) -> Dict[str, int]:
        """Count how many times each stem occurs in ``text``.

        Args:
            text: Normalized text (markup and punctuation already removed)

        Returns:
            Mapping of stem to count; empty for empty or absent text
        """
        word_counts: Counter = Counter()
        if not text:
            return dict(word_counts)

        skipped = 0
        for word in text.split():
            if self.stopwords.contains(word):
                skipped += 1
                continue
            word_counts[self.stem(word)] += 1

        self.logger.debug(
            f"Counted {len(word_counts)} distinct stems, skipped {skipped} low-value words"
        )
        return dict(word_counts)


def merge_counts(target: Dict[str, int], source: Dict[str, int]) -> Dict[str, int]:
    """Add every count in ``source`` into ``target`` and return ``target``."""
    for word, count in source.items():
        target[word] = target.get(word, 0) + count
    return target


def count_words(text: Optional[str], stopwords: Optional[StopwordSet] = None) -> Dict[str, int]:
    """Quick function to count words with the Porter stemmer."""
    return WordCounter(stopwords=stopwords).count_words(text)
