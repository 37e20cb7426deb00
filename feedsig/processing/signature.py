"""
Article Signatures
==================

Derives the word-frequency signature of an article from its headline and
text. Signatures are the feature vectors handed to similarity clustering.
"""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from .word_counter import WordCounter, merge_counts
from ..ingestion.content_cleaner import ContentCleaner, TextNormalizer
from ..models.article import Article, NEW_ARTICLE_WINDOW
from ..utils.logging import get_logger_for_component, PerformanceLogger


def get_word_frequencies(
    article: Article,
    counter: Optional[WordCounter] = None,
    normalizer: Optional[TextNormalizer] = None,
) -> Dict[str, int]:
    """Count stemmed words across the article's text and headline.

    The count for each stem is its occurrences in the text plus its
    occurrences in the headline. A fresh dict is returned on every call.

    Args:
        article: Article to derive the signature for
        counter: Word counter to use; defaults to the bundled stopwords and Porter stemmer
        normalizer: Markup/punctuation stripper; defaults to ``ContentCleaner``
    """
    counter = counter or WordCounter()
    normalizer = normalizer or ContentCleaner()

    logger = get_logger_for_component(
        "signature", article_url=str(article.url), feed_title=article.feed_title
    )

    word_counts = counter.count_words(normalizer.strip_markup_and_punctuation(article.text))
    headline_counts = counter.count_words(normalizer.strip_markup_and_punctuation(article.headline))
    merge_counts(word_counts, headline_counts)

    logger.debug(
        f"Signature has {len(word_counts)} stems",
        extra={"headline_stems": len(headline_counts)},
    )
    return word_counts


def is_new(article: Article, now: datetime, window: timedelta = NEW_ARTICLE_WINDOW) -> bool:
    """Check whether the article was published less than half an hour before ``now``."""
    return article.is_new(now, window)


def describe_article(
    article: Article,
    counter: Optional[WordCounter] = None,
    normalizer: Optional[TextNormalizer] = None,
) -> str:
    """Render headline, text and the signature's words for debugging."""
    words = sorted(get_word_frequencies(article, counter, normalizer))
    return f"[{article.headline}]\n{article.text}\n{words}\n"


def compute_signatures(
    articles: Iterable[Article],
    counter: Optional[WordCounter] = None,
    normalizer: Optional[TextNormalizer] = None,
) -> List[Dict[str, int]]:
    """Compute signatures for many articles, in order.

    One counter and normalizer are shared across the batch; each article
    still gets its own fresh mapping.
    """
    counter = counter or WordCounter()
    normalizer = normalizer or ContentCleaner()
    logger = get_logger_for_component("signature")

    signatures = []
    with PerformanceLogger(logger, "Signature batch"):
        for article in articles:
            signatures.append(get_word_frequencies(article, counter, normalizer))

    logger.info(f"Computed {len(signatures)} article signatures")
    return signatures
