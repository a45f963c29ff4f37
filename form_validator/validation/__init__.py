"""Validation framework for form submissions.

Parsers and validators are plain functions returning ValidationResult.
Failures are values, never exceptions; callers record them in a
ValidationService and keep checking the remaining fields.
"""

from form_validator.validation.parsers import (
    parse_account_url,
    parse_bool,
    parse_checkbox,
    parse_input,
    parse_number,
)
from form_validator.validation.pipeline import RULES, validate_field
from form_validator.validation.results import ValidationError, ValidationResult
from form_validator.validation.sanitizer import is_regular_string
from form_validator.validation.service import ValidationService
from form_validator.validation.validators import (
    is_checked,
    is_email,
    is_present,
    is_project_role,
    is_url,
    when,
)

__all__ = [
    "RULES",
    "ValidationError",
    "ValidationResult",
    "ValidationService",
    "is_checked",
    "is_email",
    "is_present",
    "is_project_role",
    "is_regular_string",
    "is_url",
    "parse_account_url",
    "parse_bool",
    "parse_checkbox",
    "parse_input",
    "parse_number",
    "validate_field",
    "when",
]
