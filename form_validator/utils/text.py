"""Text transformation utilities.

Markdown rendering and HTML text extraction used to reduce submitted field
text to plain prose.
"""

import re

import markdown
from bs4 import BeautifulSoup

from form_validator.config import get_settings

BLANK_LINES = re.compile(r"\n{2,}")


def markdown_to_html(source: str, extensions: list[str] | None = None) -> str:
    """Render Markdown to HTML.

    Args:
        source: Markdown text
        extensions: Python-Markdown extension names

    Returns:
        HTML string, or empty string for empty input.
    """
    if not source:
        return ""
    return markdown.markdown(source, extensions=extensions or [])


def html_to_text(html: str, parser: str = "html.parser") -> str:
    """Return the text content of an HTML document, tags discarded.

    Line breaks inside blocks are kept and blocks end up one line apart, so
    extracting from the rendered text again gives the same result.
    """
    if not html:
        return ""
    return BLANK_LINES.sub("\n", BeautifulSoup(html, parser).get_text())


class MarkdownExtractor:
    """MarkupExtractor backed by Python-Markdown and BeautifulSoup."""

    def __init__(
        self, extensions: list[str] | None = None, parser: str | None = None
    ) -> None:
        settings = get_settings().markup
        self.extensions = (
            extensions if extensions is not None else settings.markdown_extensions
        )
        self.parser = parser or settings.html_parser

    def render(self, source: str) -> str:
        return markdown_to_html(source, self.extensions)

    def extract_text(self, markup: str) -> str:
        return html_to_text(markup, self.parser)
