"""Configuration module for form-validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from form_validator.config import get_settings

    settings = get_settings()

    # Access logging settings
    level = settings.logging.log_level

    # Access markup settings
    extensions = settings.markup.markdown_extensions
"""

from form_validator.config.settings import (
    LoggingSettings,
    MarkupSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "MarkupSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
