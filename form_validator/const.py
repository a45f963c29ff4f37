"""Constants used throughout the application."""

import re

# Placeholders a form renderer emits for unanswered fields
BLANK_SENTINELS = ("", "_No response_", "None")

# Markdown checkbox tokens, matched after lower-casing and trimming "- "
CHECKBOX_CHECKED = "[x]"
CHECKBOX_UNCHECKED = ("[]", "[ ]")

# Permitted values for the applicant's project/organization role
APPLICANT_ROLES = (
    "Founder or Owner",
    "Team Member or Employee",
    "Project Lead",
    "Core Maintainer",
    "Developer",
    "Organizer or Admin",
    "Program Manager",
)

ACCOUNT_DOMAINS = ("com", "ca", "eu")

ACCOUNT_URL_PATTERN = re.compile(
    r"^(https?://)?[\w.-]+\.1password\.(" + "|".join(ACCOUNT_DOMAINS) + r")/?\Z",
    re.ASCII,
)
URL_PATTERN = re.compile(r"https?://\S+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F700-\U0001F77F"  # alchemical
    "\U0001F780-\U0001F7FF"  # geometric shapes extended
    "\U0001F800-\U0001F8FF"  # supplemental arrows-c
    "\U0001F900-\U0001F9FF"  # supplemental symbols & pictographs
    "\U0001FA00-\U0001FA6F"  # chess
    "\U0001FA70-\U0001FAFF"  # symbols & pictographs extended-a
    "\U0001FB00-\U0001FBFF"  # legacy computing
    "]+"
)

# Strict boolean literals
TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
