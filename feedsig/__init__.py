"""
FeedSig - Article Word-Frequency Signatures
===========================================

Turns syndicated news articles into stemmed word-frequency signatures for
downstream similarity clustering.

Main Components:
- Models: immutable Article and Image records
- Ingestion: markup and punctuation stripping
- Processing: low-value word filtering, Porter stemming, word counting
- Configuration: environment variables with Pydantic validation
"""

__version__ = "1.0.0"
__description__ = "Word-frequency signatures for syndicated news articles"

from .config.settings import get_settings
from .models.article import Article, Image
from .processing.signature import get_word_frequencies, is_new
from .utils.logging import configure_application_logging, get_logger_for_component
from .utils.exceptions import FeedSigError

__all__ = [
    "get_settings",
    "Article",
    "Image",
    "get_word_frequencies",
    "is_new",
    "configure_application_logging",
    "get_logger_for_component",
    "FeedSigError",
]
