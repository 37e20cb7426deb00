"""
FeedSig Processing Module
=========================

Text-to-feature pipeline: low-value word filtering, stemming, word
counting and article signatures.
"""

from .stopwords import StopwordSet, get_stopwords, reset_stopwords
from .stemmer import stem
from .word_counter import WordCounter, count_words, merge_counts
from .signature import get_word_frequencies, is_new, describe_article, compute_signatures

__all__ = [
    'StopwordSet',
    'get_stopwords',
    'reset_stopwords',
    'stem',
    'WordCounter',
    'count_words',
    'merge_counts',
    'get_word_frequencies',
    'is_new',
    'describe_article',
    'compute_signatures',
]
