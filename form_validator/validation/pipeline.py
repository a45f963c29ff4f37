"""Field pipeline helper.

Runs one field value through a chain of stages and records the first
failure in a ValidationService. Stages themselves never record errors.
"""

from typing import Any

from form_validator.validation.parsers import (
    parse_account_url,
    parse_bool,
    parse_checkbox,
    parse_input,
    parse_number,
)
from form_validator.validation.protocols import ParserCallback
from form_validator.validation.results import ValidationResult
from form_validator.validation.sanitizer import is_regular_string
from form_validator.validation.service import ValidationService
from form_validator.validation.validators import (
    is_checked,
    is_email,
    is_present,
    is_project_role,
    is_url,
)

# Typed parsers (number, bool) must be the last stage of a chain.
RULES: dict[str, ParserCallback] = {
    "input": parse_input,
    "present": is_present,
    "email": is_email,
    "url": is_url,
    "role": is_project_role,
    "checkbox": parse_checkbox,
    "checked": is_checked,
    "account_url": parse_account_url,
    "regular_string": is_regular_string,
    "number": parse_number,
    "bool": parse_bool,
}


def validate_field(
    service: ValidationService,
    section: str,
    value: str,
    *stages: ParserCallback,
) -> ValidationResult[Any]:
    """Feed a value through stages, each receiving the previous value.

    Stops at the first failing stage and records it against ``section``.

    Example:
        validate_field(service, "Email", raw, parse_input, is_present, is_email)

    Returns:
        The failing stage's result, or the last stage's result on success.
    """
    result: ValidationResult[Any] = ValidationResult(True, value)

    for stage in stages:
        seen = result.value
        result = stage(seen)
        if result.failed:
            service.add_error(section, str(seen), result.message)
            break

    return result
