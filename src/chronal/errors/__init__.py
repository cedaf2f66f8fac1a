"""Centralized error definitions for chronal.

Parsing distinguishes "nothing found" from "failure": a parse that finds no
temporal expression returns ``None``, while the errors below abort a parse
and reach the caller unchanged.

Usage:
    from chronal import parse
    from chronal.errors import ChronalError, handle_error

    try:
        result = parse("april 31")
    except ChronalError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from chronal.errors.user_messages import (
    format_error_for_cli,
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class ChronalError(Exception):
    """Base exception for all chronal errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether the error is potentially recoverable
        details: Additional error details for debugging
    """

    code: str = "CHRONAL_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(ChronalError):
    """Base error for failures while parsing a text."""

    code = "PARSE_ERROR"
    default_message = "Parsing failed"


class MalformedFieldError(ParseError):
    """A rule produced an out-of-range or inconsistent date/time field."""

    code = "MALFORMED_FIELD"
    default_message = "Expression resolves to an invalid date or time"
    recoverable = False


class MiddlewareError(ParseError):
    """A text transformation applied before matching failed."""

    code = "MIDDLEWARE_ERROR"
    default_message = "Text pre-processing failed"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ChronalError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


class UnsupportedLanguageError(ConfigurationError):
    """No rule catalog is registered for the requested language."""

    code = "UNSUPPORTED_LANGUAGE"
    default_message = "Unsupported language"

    def __init__(self, language: str, *, message: str | None = None) -> None:
        self.language = language
        super().__init__(
            message or f"No rules registered for language '{language}'",
            details={"language": language},
        )


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable."""
    if isinstance(error, ChronalError):
        return error.recoverable
    return False


__all__ = [
    "ChronalError",
    "ParseError",
    "MalformedFieldError",
    "MiddlewareError",
    "ConfigurationError",
    "InvalidConfigError",
    "UnsupportedLanguageError",
    "handle_error",
    "is_recoverable",
    "format_error_for_cli",
    "format_error_for_user",
]
