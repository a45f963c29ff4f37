"""Primitive parsers for single form-field shapes.

Each parser takes the raw field string and returns a ValidationResult
carrying the parsed value. Parsers never raise; failure is reported through
the result so the caller can record it and keep going.
"""

from urllib.parse import urlsplit

from form_validator.const import (
    ACCOUNT_URL_PATTERN,
    BLANK_SENTINELS,
    CHECKBOX_CHECKED,
    CHECKBOX_UNCHECKED,
    FALSE_LITERALS,
    TRUE_LITERALS,
)
from form_validator.utils.logging import get_logger
from form_validator.validation.results import ValidationResult

logger = get_logger(__name__)

ASCII_DIGITS = "0123456789"


def parse_input(value: str) -> ValidationResult[str]:
    """Canonicalize unanswered-field placeholders to an empty string."""
    if value in BLANK_SENTINELS:
        return ValidationResult(True, "")

    return ValidationResult(True, value)


def parse_account_url(value: str) -> ValidationResult[str]:
    """Parse a 1Password account URL into its bare host name.

    The scheme is optional and assumed to be https when missing.
    """
    if not ACCOUNT_URL_PATTERN.match(value):
        logger.debug("Rejected account URL", value=value)
        return ValidationResult(False, value, "is an invalid account URL")

    if not value.startswith(("http://", "https://")):
        value = "https://" + value

    try:
        parts = urlsplit(value)
    except ValueError as e:
        return ValidationResult(False, value, str(e))

    return ValidationResult(True, parts.netloc)


def parse_checkbox(value: str) -> ValidationResult[str]:
    """Parse a markdown task-list item into "true" or "false".

    Returns strings rather than booleans so the result can be chained into
    ``parse_bool`` or ``is_checked``.
    """
    value = value.lower().lstrip("- ")

    if value.startswith(CHECKBOX_CHECKED):
        return ValidationResult(True, "true")
    if value.startswith(CHECKBOX_UNCHECKED):
        return ValidationResult(True, "false")

    return ValidationResult(False, value, "could not parse checkbox")


def parse_number(value: str) -> ValidationResult[int]:
    """Parse the ASCII digits of a value as a non-negative integer.

    Every other character is dropped first, so "-5" reads as 5 and
    "1-2-3" as 123.
    """
    digits = "".join(char for char in value if char in ASCII_DIGITS)

    if not digits:
        return ValidationResult(False, 0, "could not be parsed into a number")

    try:
        number = int(digits)
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return ValidationResult(False, 0, "could not be parsed into a number")

    return ValidationResult(True, number)


def parse_bool(value: str) -> ValidationResult[bool]:
    if value in TRUE_LITERALS:
        return ValidationResult(True, True)
    if value in FALSE_LITERALS:
        return ValidationResult(True, False)

    return ValidationResult(False, False, "could not be parsed into a boolean")
