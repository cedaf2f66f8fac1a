"""Tests for the chronal error hierarchy and user-facing messages."""

from __future__ import annotations

import pytest

from chronal.errors import (
    ChronalError,
    ConfigurationError,
    InvalidConfigError,
    MalformedFieldError,
    MiddlewareError,
    ParseError,
    UnsupportedLanguageError,
    format_error_for_cli,
    format_error_for_user,
    handle_error,
    is_recoverable,
)
from chronal.errors.user_messages import ERROR_MESSAGES, get_recovery_suggestion, get_user_message


@pytest.mark.unit
def test_hierarchy():
    assert issubclass(MalformedFieldError, ParseError)
    assert issubclass(MiddlewareError, ParseError)
    assert issubclass(InvalidConfigError, ConfigurationError)
    assert issubclass(UnsupportedLanguageError, ConfigurationError)
    assert issubclass(ParseError, ChronalError)


@pytest.mark.unit
def test_default_message_and_details():
    error = MiddlewareError()

    assert error.message == "Text pre-processing failed"
    assert str(error) == error.message
    assert error.details == {}
    assert error.recoverable is True


@pytest.mark.unit
def test_to_dict():
    error = MalformedFieldError("Day 31 does not exist", details={"day": 31})

    assert error.to_dict() == {
        "code": "MALFORMED_FIELD",
        "message": "Day 31 does not exist",
        "user_message": ERROR_MESSAGES["MALFORMED_FIELD"],
        "recoverable": False,
        "details": {"day": 31},
    }


@pytest.mark.unit
def test_user_message_override():
    error = ParseError(user_message="Try again later")

    assert error.user_message == "Try again later"


@pytest.mark.unit
def test_unsupported_language():
    error = UnsupportedLanguageError("fr")

    assert error.language == "fr"
    assert error.details == {"language": "fr"}
    assert "fr" in error.message
    assert "--lang en" in error.recovery_suggestion


@pytest.mark.unit
def test_messages_for_codes_and_unknown_errors():
    assert get_user_message("INVALID_CONFIG") == ERROR_MESSAGES["INVALID_CONFIG"]
    assert get_user_message(KeyError("x")) == ERROR_MESSAGES["UNKNOWN_ERROR"]
    assert "--debug" in get_recovery_suggestion(RuntimeError("boom"))


@pytest.mark.unit
def test_format_error_for_user():
    message = format_error_for_user(MalformedFieldError())

    assert message.startswith(ERROR_MESSAGES["MALFORMED_FIELD"])
    assert "Suggestion:" in message
    assert handle_error(MalformedFieldError()) == message


@pytest.mark.unit
def test_format_error_for_cli_lists_details():
    output = format_error_for_cli(MalformedFieldError(details={"text": "april 31"}))

    assert output.startswith("Error [MALFORMED_FIELD]:")
    assert "Details:" in output
    assert "  text: april 31" in output


@pytest.mark.unit
def test_is_recoverable():
    assert is_recoverable(InvalidConfigError()) is True
    assert is_recoverable(MalformedFieldError()) is False
    assert is_recoverable(ValueError()) is False
