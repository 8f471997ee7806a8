from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for login transport failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.payload = payload


class ApiClientError(ApiError):
    """Request rejected by the login backend (HTTP 4xx style)."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        code: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message, status=status, code=code, payload=payload)


class ApiServerError(ApiError):
    """Login backend failed while handling the request (HTTP 5xx style)."""

    def __init__(self, message: str, *, status: int, payload: Any = None) -> None:
        super().__init__(message, status=status, payload=payload)


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


__all__ = ["ApiClientError", "ApiError", "ApiServerError", "ApiTimeoutError"]
