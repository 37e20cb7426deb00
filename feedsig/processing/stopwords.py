"""
Low-Value Word List
===================

Loads the set of words (like "the" and "it") that carry too little topical
signal to be counted. The set is immutable once built and is shared
read-only by every word counter in the process.
"""

import threading
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional, Union

from ..utils.logging import get_logger_for_component
from ..utils.exceptions import StopwordLoadError, ErrorCode

DEFAULT_RESOURCE_PACKAGE = "feedsig.resources"
DEFAULT_RESOURCE_NAME = "low-value-words.txt"

logger = get_logger_for_component("stopwords")


class StopwordSet:
    """Immutable set of words excluded from word counts."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "StopwordSet":
        """Build a set from one word per line, skipping blank lines."""
        return cls(trimmed for trimmed in (line.strip() for line in lines) if trimmed)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StopwordSet":
        """Load a word list from a UTF-8 file on disk.

        Raises:
            StopwordLoadError: If the file is missing, unreadable or holds no words
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StopwordLoadError(
                f"Cannot read stopword list {path}: {e}",
                resource=str(path),
            ) from e
        return cls._from_content(content, str(path))

    @classmethod
    def from_resource(
        cls,
        package: str = DEFAULT_RESOURCE_PACKAGE,
        name: str = DEFAULT_RESOURCE_NAME,
    ) -> "StopwordSet":
        """Load a word list bundled inside a Python package.

        Raises:
            StopwordLoadError: If the resource is missing, unreadable or holds no words
        """
        resource_id = f"{package}/{name}"
        try:
            content = resources.files(package).joinpath(name).read_text(encoding="utf-8")
        except (ModuleNotFoundError, OSError, UnicodeDecodeError) as e:
            raise StopwordLoadError(
                f"Cannot read stopword resource {resource_id}: {e}",
                resource=resource_id,
            ) from e
        return cls._from_content(content, resource_id)

    @classmethod
    def _from_content(cls, content: str, source: str) -> "StopwordSet":
        stopwords = cls.from_lines(content.splitlines())
        if not stopwords:
            raise StopwordLoadError(
                f"Stopword list {source} contains no words",
                resource=source,
                error_code=ErrorCode.RESOURCE_UNREADABLE,
            )
        logger.info(f"Loaded {len(stopwords)} low-value words from {source}")
        return stopwords

    def contains(self, word: str) -> bool:
        """Check whether ``word`` is a low-value word (exact, case-sensitive)."""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopwordSet):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"StopwordSet({len(self._words)} words)"


_default_stopwords: Optional[StopwordSet] = None
_default_lock = threading.Lock()


def get_stopwords() -> StopwordSet:
    """Get the process-wide default stopword set, loading it on first use.

    Loading happens exactly once even when first called from several threads.

    Raises:
        StopwordLoadError: If the bundled word list cannot be loaded
    """
    global _default_stopwords

    if _default_stopwords is None:
        with _default_lock:
            if _default_stopwords is None:
                _default_stopwords = StopwordSet.from_resource()

    return _default_stopwords


def reset_stopwords() -> None:
    """Forget the cached default set so the next call reloads it."""
    global _default_stopwords

    with _default_lock:
        _default_stopwords = None
