from __future__ import annotations

"""Domain value objects exchanged between the login port, use cases, and view models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoginRequest:
    """Credentials captured at the moment a login is submitted."""

    email: str
    """Email text as stored by the form at submit time."""
    password: str
    """Password text as stored by the form at submit time."""

    def __repr__(self) -> str:
        return f"LoginRequest(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class LoginOutcome:
    """Terminal result of one login attempt."""

    token: Optional[str] = None
    """Token returned by the login capability, when it yields one."""
    error: Optional[Exception] = None
    """Failure of the attempt; ``SubmitLogin`` narrows it to ``LoginFailed``."""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, token: Optional[str] = None) -> "LoginOutcome":
        return cls(token=token)

    @classmethod
    def failure(cls, error: Exception) -> "LoginOutcome":
        return cls(error=error)
