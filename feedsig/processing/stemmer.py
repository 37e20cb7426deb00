"""
Word stemming.

Reduces inflected words to a shared root ("running" -> "run", "cats" -> "cat")
using the Porter algorithm.
"""

from nltk.stem.porter import PorterStemmer

from ..utils.logging import get_logger_for_component

logger = get_logger_for_component("stemmer")

# PorterStemmer keeps no per-call state, so one instance serves every thread.
_porter = PorterStemmer(mode=PorterStemmer.MARTIN_EXTENSIONS)


def stem(word: str) -> str:
    """Return the stem of ``word``.

    Never raises: a word no rule applies to, or that the stemmer cannot
    handle, comes back unchanged.
    """
    if not word:
        return word

    try:
        return _porter.stem(word, to_lowercase=False)
    except Exception as e:
        logger.debug(f"Stemmer left {word!r} unchanged: {e}")
        return word
