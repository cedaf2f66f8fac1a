"""User-friendly error messages for chronal.

Maps error codes to human-readable messages and recovery suggestions so the
command line never shows a raw traceback for an expected failure.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "The text couldn't be parsed.",
    "MALFORMED_FIELD": "The expression names a date or time that doesn't exist.",
    "MIDDLEWARE_ERROR": "A text pre-processing step failed before matching.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    "UNSUPPORTED_LANGUAGE": "No rules are available for that language.",
    # Generic
    "CHRONAL_ERROR": "An unexpected error occurred. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    "PARSE_ERROR": "Check the input text and the reference time.",
    "MALFORMED_FIELD": "Check the day against the month, e.g. there is no April 31.",
    "MIDDLEWARE_ERROR": "Check the middleware registered with Parser.use().",
    "CONFIGURATION_ERROR": "Check config: chronal config show",
    "INVALID_CONFIG": "Validate the file: chronal config validate",
    "UNSUPPORTED_LANGUAGE": "Use one of the registered languages, e.g. --lang en",
    "CHRONAL_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Re-run with --debug to see what happened.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error."""
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        CLI-formatted error message
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)
    code = getattr(error, "code", "ERROR")

    lines = [
        f"Error [{code}]: {message}",
        "",
        f"Suggestion: {suggestion}",
    ]

    if getattr(error, "details", None):
        lines.append("")
        lines.append("Details:")
        for key, value in error.details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)
