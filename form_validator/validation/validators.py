"""Predicate validators and the conditional combinator.

Each validator takes a field value and returns a ValidationResult that
passes the value through unchanged. They are meant to be chained after
``parse_input`` and composed with ``when`` for fields that only apply
depending on another answer.
"""

import re
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

from form_validator.const import APPLICANT_ROLES
from form_validator.utils.logging import get_logger
from form_validator.validation.protocols import ValidatorCallback
from form_validator.validation.results import ValidationResult

logger = get_logger(__name__)

URI_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
# RFC 3986 reg-name or IP-literal, with an optional port
URI_HOST_PATTERN = re.compile(
    r"(\[[0-9A-Za-z:.\-_~%]+\]"
    r"|[A-Za-z0-9\-._~!$&'()*+,;=%\u0080-\U0010FFFF]*)"
    r"(:[0-9]*)?\Z"
)
INVALID_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
ALLOWED_URL_SCHEMES = ("http", "https")


def when(condition: bool, callback: ValidatorCallback) -> ValidatorCallback:
    """Apply ``callback`` only if ``condition`` holds.

    Args:
        condition: Whether the wrapped validator applies
        callback: Validator to apply

    Returns:
        ``callback`` itself, or a pass-through that always succeeds and
        echoes the value.
    """
    if condition:
        return callback

    def skip(value: str) -> ValidationResult[str]:
        return ValidationResult(True, value)

    return skip


def is_present(value: str) -> ValidationResult[str]:
    if value == "":
        return ValidationResult(False, value, "is empty")

    return ValidationResult(True, value)


def is_email(value: str) -> ValidationResult[str]:
    """Validate a single mailbox, bare or with a display name.

    Follows the address grammar only: quoted local parts, domain literals
    and dotless or reserved domains are accepted, nothing is looked up.
    Empty values pass; pair with ``is_present`` to require one.
    """
    if value == "":
        return ValidationResult(True, value)

    try:
        validate_email(
            value,
            check_deliverability=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
            allow_display_name=True,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError as e:
        logger.debug("Rejected email", value=value, reason=str(e))
        return ValidationResult(False, value, "is an invalid email")

    return ValidationResult(True, value)


def _is_request_uri(value: str) -> bool:
    """Check that value is an absolute URI or an absolute path."""
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in value):
        return False
    if not (URI_SCHEME_PATTERN.match(value) or value.startswith("/")):
        return False

    try:
        parts = urlsplit(value)
        parts.port
    except ValueError:
        return False

    host = parts.netloc.rpartition("@")[2]
    if not URI_HOST_PATTERN.match(host):
        return False

    # Query strings are kept raw, everything else must be escaped properly
    return not any(
        INVALID_ESCAPE_PATTERN.search(part)
        for part in (parts.netloc, parts.path, parts.fragment)
    )


def is_url(value: str) -> ValidationResult[str]:
    """Validate an absolute http(s) URL.

    Empty values pass. Malformed URIs and non-web schemes fail with
    different messages.
    """
    if value == "":
        return ValidationResult(True, value)

    if not _is_request_uri(value):
        return ValidationResult(False, value, "is an invalid URL")

    if urlsplit(value).scheme not in ALLOWED_URL_SCHEMES:
        return ValidationResult(False, value, 'must use "http" or "https" scheme')

    return ValidationResult(True, value)


def is_project_role(value: str) -> ValidationResult[str]:
    """Check exact, case-sensitive membership in APPLICANT_ROLES."""
    if value in APPLICANT_ROLES:
        return ValidationResult(True, value)

    return ValidationResult(False, value, "is an invalid project role")


def is_checked(value: str) -> ValidationResult[str]:
    # Expects the output of parse_checkbox
    if value != "true":
        return ValidationResult(False, value, "must be checked")

    return ValidationResult(True, value)
