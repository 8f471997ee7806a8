"""Translate adapter errors into user-facing LoginFailed instances."""

from __future__ import annotations

from typing import Optional

from loginflow.adapters.api_errors import ApiError, ApiTimeoutError
from loginflow.domain.errors import LoginFailed
from loginflow.domain.ports import UseCaseError


def map_login_error(
    exc: BaseException,
    *,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map login adapter exceptions to stable ``UseCaseError`` values.

    The adapter's own message is kept verbatim so the form can show exactly
    what the backend reported.

    Args:
        exc: Exception raised by or delivered from the login port.
        default_message: Message used when ``exc`` carries no text.

    Returns:
        ``exc`` itself for use-case errors, otherwise a ``LoginFailed``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return LoginFailed(exc.message, code="REQUEST_TIMEOUT")
    if isinstance(exc, ApiError):
        return LoginFailed(exc.message, status=exc.status)

    message = str(exc) or default_message or "Unexpected error."
    return LoginFailed(message, code="LOGIN_ERROR")


__all__ = ["map_login_error"]
