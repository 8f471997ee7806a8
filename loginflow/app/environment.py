"""Explicit dependency environments for the login and onboarding screens.

Each environment is a plain bundle of ports passed into view model
constructors; swapping a field swaps the behavior under test.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from loginflow.adapters.virtual_clock import TestClock
from loginflow.adapters.login_mock import LoginMock, UnimplementedLogin
from loginflow.adapters.main_queue import ImmediateQueue, TestQueue
from loginflow.domain.ports import ClockPort, LoginPort, MainQueuePort
from loginflow.usecases.submit_login import SubmitLogin
from loginflow.viewmodels.carousel_vm import CarouselVM, IndexListener
from loginflow.viewmodels.login_vm import LoginFormConfig, LoginListener, LoginVM

DEFAULT_CAROUSEL_INTERVAL_S = 5.0


class _UnimplementedQueue:
    """Main queue that fails if a login outcome is ever dispatched."""

    def schedule(self, callback) -> None:
        raise AssertionError("LoginEnvironment.main_queue is not implemented.")


@dataclass
class LoginEnvironment:
    """Ports the login screen depends on."""

    main_queue: MainQueuePort = field(default_factory=ImmediateQueue)
    login_port: LoginPort = field(default_factory=LoginMock)

    @classmethod
    def mock(cls) -> "LoginEnvironment":
        return cls(main_queue=ImmediateQueue(), login_port=LoginMock())

    @classmethod
    def unhappy_mock(cls, message: str = "ErrorText", code: int = 403) -> "LoginEnvironment":
        return cls(main_queue=ImmediateQueue(), login_port=LoginMock.failing_with(message, code))

    @classmethod
    def failing(cls) -> "LoginEnvironment":
        """Environment whose every dependency fails when touched."""
        return cls(main_queue=_UnimplementedQueue(), login_port=UnimplementedLogin())

    @classmethod
    def testing(cls, login_port: LoginPort) -> "LoginEnvironment":
        return cls(main_queue=TestQueue(), login_port=login_port)


def build_login_vm(
    env: LoginEnvironment,
    config: Optional[LoginFormConfig] = None,
    on_change: Optional[LoginListener] = None,
) -> LoginVM:
    return LoginVM(
        submit_login=SubmitLogin(env.login_port),
        main_queue=env.main_queue,
        config=config,
        on_change=on_change,
    )


@dataclass
class OnboardingEnvironment:
    """Clock and timing for the onboarding carousel."""

    clock: ClockPort = field(default_factory=TestClock)
    interval_s: float = DEFAULT_CAROUSEL_INTERVAL_S

    def build_carousel_vm(
        self, items: Sequence[str], on_change: Optional[IndexListener] = None
    ) -> CarouselVM:
        return CarouselVM(items, self.clock, interval_s=self.interval_s, on_change=on_change)


__all__ = [
    "DEFAULT_CAROUSEL_INTERVAL_S",
    "LoginEnvironment",
    "OnboardingEnvironment",
    "build_login_vm",
]
