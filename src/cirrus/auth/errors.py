"""Recognized re-authentication failure kinds."""

from __future__ import annotations


class AuthError(RuntimeError):
    """Base class for failures raised by re-authentication providers."""


class InteractionRequiredError(AuthError):
    """Raised when silent login cannot finish without user interaction."""


class FatalCancellationError(AuthError):
    """Raised when the user or environment aborted the login flow."""


def error_message(exc: BaseException) -> str:
    """Return human-readable text for an exception.

    Args:
        exc: Exception to describe.

    Returns:
        Exception text, or the exception class name when the text is empty.
    """
    text = str(exc).strip()
    return text or type(exc).__name__
