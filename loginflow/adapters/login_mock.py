from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from loginflow.adapters.api_errors import ApiClientError, ApiError
from loginflow.domain.entities import LoginOutcome, LoginRequest
from loginflow.domain.ports import LoginCallback, LoginPort


@dataclass
class LoginMock(LoginPort):
    """In-memory login stub that answers immediately.

    Succeeds with ``token`` unless ``error`` is set, in which case the error
    is raised from ``login`` like a transport adapter would.
    """

    token: Optional[str] = "MockToken"
    error: Optional[ApiError] = None
    requests: List[LoginRequest] = field(default_factory=list)

    @classmethod
    def failing_with(cls, message: str = "ErrorText", code: int = 403) -> "LoginMock":
        return cls(token=None, error=ApiClientError(message, status=code))

    @property
    def emails(self) -> List[str]:
        return [request.email for request in self.requests]

    @property
    def passwords(self) -> List[str]:
        return [request.password for request in self.requests]

    def login(self, request: LoginRequest, done: LoginCallback) -> None:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        done(LoginOutcome.success(self.token))


@dataclass
class UnimplementedLogin(LoginPort):
    """Login port that fails the test run if anything calls it."""

    name: str = "LoginPort.login"

    def login(self, request: LoginRequest, done: LoginCallback) -> None:
        raise AssertionError(f"{self.name} is not implemented - an unexpected login ran.")


class DeferredLogin(LoginPort):
    """Holds login callbacks until the test resolves or rejects them."""

    def __init__(self) -> None:
        self.pending: List[Tuple[LoginRequest, LoginCallback]] = []
        self.requests: List[LoginRequest] = []

    def login(self, request: LoginRequest, done: LoginCallback) -> None:
        self.requests.append(request)
        self.pending.append((request, done))

    def resolve(self, token: Optional[str] = None) -> LoginRequest:
        """Complete the oldest pending login successfully."""
        request, done = self._pop()
        done(LoginOutcome.success(token))
        return request

    def reject(self, error: Exception) -> LoginRequest:
        """Complete the oldest pending login with ``error``.

        The error is handed to the callback unmapped; ``SubmitLogin`` is
        responsible for turning it into a ``LoginFailed``.
        """
        request, done = self._pop()
        done(LoginOutcome.failure(error))
        return request

    def _pop(self) -> Tuple[LoginRequest, LoginCallback]:
        if not self.pending:
            raise RuntimeError("No pending login to complete.")
        return self.pending.pop(0)


__all__ = ["DeferredLogin", "LoginMock", "UnimplementedLogin"]
