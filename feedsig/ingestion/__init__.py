"""
FeedSig Ingestion Module
========================

Turns raw feed text into plain, whitespace-delimited words.
"""

from .content_cleaner import ContentCleaner, TextNormalizer, strip_markup_and_punctuation

__all__ = [
    'ContentCleaner',
    'TextNormalizer',
    'strip_markup_and_punctuation',
]
