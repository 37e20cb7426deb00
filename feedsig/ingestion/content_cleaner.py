"""
Content Cleaner
===============

Markup and punctuation stripping for syndicated article text.

This module provides:
- The ``TextNormalizer`` protocol consumed by the word counter
- ``ContentCleaner``, the BeautifulSoup-backed default implementation
"""

import re
import html
import warnings
from typing import Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Comment, MarkupResemblesLocatorWarning
from bs4.element import CData, ProcessingInstruction, Doctype

from feedsig.utils.logging import get_logger_for_component


@runtime_checkable
class TextNormalizer(Protocol):
    """Anything that turns raw feed text into whitespace-delimited words."""

    def strip_markup_and_punctuation(self, text: Optional[str]) -> str:
        ...


class ContentCleaner:
    """
    HTML content cleaner producing plain word sequences.

    Features:
    - Removes non-content HTML elements together with their content
    - Drops comments, CDATA, doctype and processing instructions
    - Decodes HTML entities
    - Replaces punctuation with whitespace, keeping word characters only
    - Lower-cases the result so stopword matching sees one surface form
    """

    # HTML elements to completely remove (including content)
    NON_CONTENT_ELEMENTS = {
        "script",
        "style",
        "iframe",
        "embed",
        "object",
        "applet",
        "noscript",
        "template",
        "canvas",
        "head",
    }

    WHITESPACE_PATTERN = re.compile(r"\s+", re.MULTILINE)
    # Apostrophes inside a word are dropped so "don't" stays one token
    INNER_APOSTROPHE_PATTERN = re.compile(r"(?<=\w)['’](?=\w)")
    PUNCTUATION_PATTERN = re.compile(r"[^\w\s]|_")
    TAG_PATTERN = re.compile(r"<[^>]+>")
    SCRIPT_STYLE_PATTERN = re.compile(
        r"<(script|style)[^>]*>.*?</\1>", re.IGNORECASE | re.DOTALL
    )

    def __init__(self):
        """Initialize content cleaner."""
        self.parser = "html.parser"
        self.logger = get_logger_for_component("content_cleaner")

    def strip_markup_and_punctuation(self, text: Optional[str]) -> str:
        """
        Strip markup and punctuation from raw text.

        Args:
            text: Raw text, possibly containing HTML

        Returns:
            Lower-case words separated by single spaces; empty string for
            absent input
        """
        if not text or not text.strip():
            return ""

        plain = self.extract_text_only(text)
        return self.strip_punctuation(plain).lower()

    def extract_text_only(self, html_content: str) -> str:
        """
        Extract only text content from HTML, removing all markup.

        Args:
            html_content: HTML content to process

        Returns:
            Plain text content with all HTML removed
        """
        if not html_content or not html_content.strip():
            return ""

        try:
            with warnings.catch_warnings():
                # Headlines such as "example.com" look like URLs to bs4
                warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
                soup = BeautifulSoup(html_content, self.parser)

            for element in soup(self.NON_CONTENT_ELEMENTS):
                element.decompose()

            self._remove_non_content_nodes(soup)

            text = soup.get_text(separator=" ", strip=True)
            text = html.unescape(text)
            text = self.WHITESPACE_PATTERN.sub(" ", text)
            return text.strip()

        except Exception as e:
            self.logger.warning(f"Failed to extract text, using fallback: {e}")
            return self._extract_text_fallback(html_content)

    def strip_punctuation(self, text: str) -> str:
        """Replace every non-word character with whitespace and collapse runs."""
        if not text:
            return ""

        text = self.INNER_APOSTROPHE_PATTERN.sub("", text)
        text = self.PUNCTUATION_PATTERN.sub(" ", text)
        text = self.WHITESPACE_PATTERN.sub(" ", text)
        return text.strip()

    def _remove_non_content_nodes(self, soup: BeautifulSoup) -> None:
        """Remove comments, CDATA, and processing instructions."""
        for element in soup.find_all(
            string=lambda node: isinstance(
                node, (Comment, CData, ProcessingInstruction, Doctype)
            )
        ):
            element.extract()

    def _extract_text_fallback(self, html_content: str) -> str:
        """Fallback text extraction using regex when BeautifulSoup fails."""
        content = self.SCRIPT_STYLE_PATTERN.sub(" ", html_content)
        content = self.TAG_PATTERN.sub(" ", content)
        content = html.unescape(content)
        content = self.WHITESPACE_PATTERN.sub(" ", content)
        return content.strip()


def strip_markup_and_punctuation(text: Optional[str]) -> str:
    """Quick function to normalize raw feed text with the default cleaner."""
    return ContentCleaner().strip_markup_and_punctuation(text)
