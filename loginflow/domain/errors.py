"""Domain-level error types shared by use cases and view models.

``LoginFailed`` travels inside ``LoginOutcome`` instead of being raised past
the view model boundary. ``InvalidArgument`` is raised at construction time
for contract violations.
"""

from __future__ import annotations

from typing import Optional

from loginflow.domain.ports import UseCaseError


class InvalidArgument(ValueError):
    """Construction-time contract violation (programming mistake)."""


class LoginFailed(UseCaseError):
    """Remote login attempt rejected; ``message`` is shown to the user verbatim."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "LOGIN_FAILED",
        status: Optional[int] = None,
    ) -> None:
        super().__init__(code, message)
        self.status = status

    def __repr__(self) -> str:
        return f"LoginFailed({self.message!r}, code={self.code!r}, status={self.status!r})"
