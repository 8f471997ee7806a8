from __future__ import annotations

from typing import Callable, Protocol

from loginflow.domain.entities import LoginOutcome, LoginRequest

LoginCallback = Callable[[LoginOutcome], None]
WakeCallback = Callable[[], None]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class LoginPort(Protocol):
    """Remote login capability.

    Implementations call ``done`` exactly once per request, either
    synchronously or later from whatever context they complete on.
    Errors may be raised directly or delivered as a failed outcome.
    """

    def login(self, request: LoginRequest, done: LoginCallback) -> None: ...


class MainQueuePort(Protocol):
    """Dispatch target that view models report state changes on."""

    def schedule(self, callback: Callable[[], None]) -> None: ...


class SleepHandle(Protocol):
    """Pending clock sleep that can be cancelled before it wakes."""

    @property
    def cancelled(self) -> bool: ...
    def cancel(self) -> None: ...


class ClockPort(Protocol):
    """Time source offering a cancellable sleep."""

    def sleep(self, seconds: float, on_wake: WakeCallback) -> SleepHandle: ...


Unsubscribe = Callable[[], None]
