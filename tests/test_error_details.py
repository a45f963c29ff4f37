"""Tests for user-facing error messages."""

import pytest
from pydantic import ValidationError

from form_validator.config import LoggingSettings
from form_validator.error_details import get_error_human_message


class TestGetErrorHumanMessage:
    """Tests for get_error_human_message."""

    def test_settings_error(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError) as exc_info:
            LoggingSettings()

        message = get_error_human_message(exc_info.value)
        assert message.startswith("Invalid configuration.")
        assert "LOG_LEVEL" in message

    def test_permission_error(self):
        message = get_error_human_message(PermissionError("form.md"))

        assert message.startswith("Permission denied: form.md")

    def test_file_not_found_is_plain(self):
        assert get_error_human_message(FileNotFoundError("missing.md")) == "missing.md"

    def test_unknown_error(self):
        assert get_error_human_message(LookupError("nope")) == "nope"
