"""
FeedSig Models
==============

Immutable article and image records.
"""

from .article import Article, Image, NEW_ARTICLE_WINDOW

__all__ = [
    'Article',
    'Image',
    'NEW_ARTICLE_WINDOW',
]
