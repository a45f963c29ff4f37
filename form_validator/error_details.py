"""Error message formatting for user-friendly exception handling."""

from pydantic import ValidationError as SettingsError


def _format_settings_error(error: SettingsError) -> str:
    """Format configuration errors raised while loading settings."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
    return (
        "Invalid configuration. Check your environment and .env file.\n"
        f"Details: {details}"
    )


ERROR_TYPES = {
    SettingsError: _format_settings_error,
    UnicodeDecodeError: lambda e: f"Input is not valid UTF-8: {e!s}",
    FileNotFoundError: lambda e: str(e),
    ValueError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
