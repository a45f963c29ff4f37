"""Common interfaces for validation stages and their collaborators.

Validators are plain functions, not classes. Every stage conforms to one of
two call shapes:

- ValidatorCallback: str -> ValidationResult[str]
- ParserCallback: str -> ValidationResult[<typed value>]
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from form_validator.validation.results import ValidationResult

ValidatorCallback = Callable[[str], ValidationResult[str]]
ParserCallback = Callable[[str], ValidationResult[Any]]


@runtime_checkable
class MarkupExtractor(Protocol):
    """Renders lightweight markup and extracts its plain text.

    The content sanitizer depends on this pair only, so it can be tested
    against a stub.

    Example:
        extractor: MarkupExtractor = MarkdownExtractor()
        text = extractor.extract_text(extractor.render("**hello** world"))
    """

    def render(self, source: str) -> str:
        """Render Markdown source to HTML."""
        ...

    def extract_text(self, markup: str) -> str:
        """Parse HTML and return its text content only."""
        ...
