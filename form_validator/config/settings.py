"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all form-validator settings.
"""

from typing import Literal

from bs4.builder import builder_registry
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for form_validator namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class MarkupSettings(BaseSettings):
    """Markdown rendering and HTML text extraction configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    markdown_extensions: list[str] = Field(
        default_factory=list,
        validation_alias="MARKDOWN_EXTENSIONS",
        description="Python-Markdown extensions used when rendering field text",
    )
    html_parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        default="html.parser",
        validation_alias="HTML_PARSER",
        description="BeautifulSoup parser used to extract plain text",
    )

    @field_validator("html_parser")
    @classmethod
    def parser_installed(cls, v: str) -> str:
        # lxml and html5lib ship as optional extras
        if builder_registry.lookup(v) is None:
            raise ValueError(
                f"HTML parser '{v}' is not installed, "
                f"install form-validator[{v}] or use html.parser"
            )
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from form_validator.config import get_settings

        settings = get_settings()
        level = settings.logging.log_level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    markup: MarkupSettings = Field(default_factory=MarkupSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
