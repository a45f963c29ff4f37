"""Plain-prose content sanitizer.

Reduces a free-text answer to plain text and rejects answers that carry
links, email addresses or emoji.
"""

from form_validator.const import EMAIL_PATTERN, EMOJI_PATTERN, URL_PATTERN
from form_validator.utils.logging import get_logger
from form_validator.utils.text import MarkdownExtractor
from form_validator.validation.protocols import MarkupExtractor
from form_validator.validation.results import ValidationResult

logger = get_logger(__name__)

# Checked in order, first match wins
FORBIDDEN_CONTENT = (
    (URL_PATTERN, "cannot contain URLs"),
    (EMAIL_PATTERN, "cannot contain email addresses"),
    (EMOJI_PATTERN, "cannot contain emoji characters"),
)


def is_regular_string(
    value: str, extractor: MarkupExtractor | None = None
) -> ValidationResult[str]:
    """Strip Markdown formatting from a value and check it is plain prose.

    The value is rendered to HTML first so that markup syntax does not
    survive into the text. Newlines are preserved.

    Args:
        value: Raw field text, markup included
        extractor: Markdown renderer and HTML text extractor pair.
            Defaults to MarkdownExtractor.

    Returns:
        ValidationResult whose value is the stripped plain text. A renderer
        or parser error is returned as the failure message.
    """
    if extractor is None:
        extractor = MarkdownExtractor()

    try:
        text = extractor.extract_text(extractor.render(value))
    except Exception as e:
        logger.warning("Could not extract text from markup", error=str(e))
        return ValidationResult(False, value, str(e))

    text = text.strip()

    for pattern, message in FORBIDDEN_CONTENT:
        if pattern.search(text):
            logger.debug("Rejected content", reason=message)
            return ValidationResult(False, text, message)

    return ValidationResult(True, text)
