"""Validation service for collecting field errors.

This module provides the error accumulator a validation run records every
failed check into, so a submitter sees all problems in one pass.
"""

from form_validator.utils.logging import get_logger
from form_validator.validation.results import ValidationError

logger = get_logger(__name__)


class ValidationService:
    """Collects validation errors for one run, in validation order.

    Append-only and not thread-safe. If fields are ever validated in
    parallel, guard ``add_error`` with a lock or merge per-field lists.
    """

    def __init__(self):
        self.errors: list[ValidationError] = []

    def add_error(self, section: str, value: str, message: str) -> None:
        """Record a failed check.

        Args:
            section: Form section (field) the value came from
            value: Value that failed the check
            message: Failure fragment, e.g. "is an invalid email"
        """
        logger.debug("Validation error", section=section, message=message)
        self.errors.append(
            ValidationError(section=section, value=value, message=message)
        )

    def has_error(self, section: str) -> bool:
        """Check if any error was recorded for a section."""
        return any(error.section == section for error in self.errors)

    def has_errors(self) -> bool:
        """Check if any error was recorded at all."""
        return bool(self.errors)

    def format_error_report(self) -> str:
        """Format errors one per line, in the order they were recorded.

        Returns:
            Formatted error report, or empty string when there are no errors
        """
        return "\n".join(error.format_error() for error in self.errors)
