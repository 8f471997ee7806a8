"""Domain package exports for value objects, ports and errors."""

from .entities import LoginOutcome, LoginRequest
from .errors import InvalidArgument, LoginFailed
from .ports import ClockPort, LoginPort, MainQueuePort, SleepHandle, UseCaseError

__all__ = [
    "ClockPort",
    "InvalidArgument",
    "LoginFailed",
    "LoginOutcome",
    "LoginPort",
    "LoginRequest",
    "MainQueuePort",
    "SleepHandle",
    "UseCaseError",
]
