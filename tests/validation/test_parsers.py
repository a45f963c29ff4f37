"""Tests for primitive field parsers."""

import pytest

from form_validator.validation.parsers import (
    parse_account_url,
    parse_bool,
    parse_checkbox,
    parse_input,
    parse_number,
)


class TestParseInput:
    """Tests for blank-placeholder normalization."""

    @pytest.mark.parametrize("value", ["", "_No response_", "None"])
    def test_blank_sentinels(self, value):
        assert tuple(parse_input(value)) == (True, "", "")

    def test_regular_value_passes_through(self):
        result = parse_input("  some answer\n")

        assert result.success
        assert result.value == "  some answer\n"
        assert result.message == ""

    @pytest.mark.parametrize("value", ["none", "No response", " None"])
    def test_near_sentinels_are_kept(self, value):
        """Sentinels match exactly, not case-insensitively."""
        assert parse_input(value).value == value


class TestParseAccountUrl:
    """Tests for 1Password account URL parsing."""

    def test_bare_host(self):
        result = parse_account_url("example.1password.com")

        assert tuple(result) == (True, "example.1password.com", "")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://example.1password.com", "example.1password.com"),
            ("http://team-x.1password.ca/", "team-x.1password.ca"),
            ("my.team.1password.eu", "my.team.1password.eu"),
            ("https://My_Team.1password.com/", "My_Team.1password.com"),
        ],
    )
    def test_valid_urls_return_host(self, value, expected):
        result = parse_account_url(value)

        assert result.success
        assert result.value == expected

    @pytest.mark.parametrize(
        "value",
        [
            "http://foo.bar.com",
            "example.1password.org",
            "1password.com",
            "https://example.1password.com/signin",
            "ftp://example.1password.com",
            "example.1password.com:8443",
            "example.1password.com\n",
            "https://example.1password.com/\n",
            "",
        ],
    )
    def test_invalid_urls(self, value):
        result = parse_account_url(value)

        assert result.failed
        assert result.value == value
        assert result.message == "is an invalid account URL"


class TestParseCheckbox:
    """Tests for markdown checkbox parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("- [x] done", "true"),
            ("- [X] Done", "true"),
            ("[x]", "true"),
            ("- [ ] pending", "false"),
            ("  - [] pending", "false"),
            ("--[ ]", "false"),
        ],
    )
    def test_checkbox_tokens(self, value, expected):
        assert tuple(parse_checkbox(value)) == (True, expected, "")

    def test_returns_strings_not_booleans(self):
        assert parse_checkbox("- [x] yes").value == "true"
        assert isinstance(parse_checkbox("- [ ] no").value, str)

    @pytest.mark.parametrize("value", ["- [y]", "x", "", "* [x] bullet"])
    def test_unrecognized(self, value):
        result = parse_checkbox(value)

        assert result.failed
        assert result.message == "could not parse checkbox"

    def test_failure_value_is_trimmed_and_lowercased(self):
        assert parse_checkbox("- [Y] Nope").value == "[y] nope"


class TestParseNumber:
    """Tests for integer parsing."""

    def test_digits_with_text(self):
        assert tuple(parse_number("42 items")) == (True, 42, "")

    def test_no_digits(self):
        assert tuple(parse_number("abc")) == (
            False,
            0,
            "could not be parsed into a number",
        )

    def test_empty(self):
        assert parse_number("").failed

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("-5", 5),
            ("3.14", 314),
            ("1-2-3", 123),
            ("1,000 contributors", 1000),
            ("007", 7),
        ],
    )
    def test_sign_and_separators_are_dropped(self, value, expected):
        """Only ASCII digits are kept; sign and decimal point are lost."""
        result = parse_number(value)

        assert result.success
        assert result.value == expected

    def test_non_ascii_digits_are_ignored(self):
        assert parse_number("٣٤").failed

    def test_digit_run_too_long_to_convert(self):
        """Digit runs past the int conversion limit fail instead of raising."""
        assert tuple(parse_number("1" * 5000)) == (
            False,
            0,
            "could not be parsed into a number",
        )


class TestParseBool:
    """Tests for strict boolean parsing."""

    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_literals(self, value):
        assert tuple(parse_bool(value)) == (True, True, "")

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_literals(self, value):
        assert tuple(parse_bool(value)) == (True, False, "")

    @pytest.mark.parametrize("value", ["yes", "tRuE", "", " true", "2"])
    def test_rejects_other_spellings(self, value):
        result = parse_bool(value)

        assert result.failed
        assert result.value is False
        assert result.message == "could not be parsed into a boolean"

    def test_chains_after_checkbox(self):
        checkbox = parse_checkbox("- [x] I agree")

        assert parse_bool(checkbox.value).value is True
