from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from loginflow.domain.entities import LoginOutcome, LoginRequest
from loginflow.domain.ports import LoginCallback, LoginPort
from loginflow.usecases.error_mapping import map_login_error


@dataclass
class SubmitLogin:
    """Issue one login call and normalize its outcome.

    Errors raised synchronously by the port and errors delivered through the
    callback both reach ``done`` as a ``LoginOutcome`` whose error is a
    ``UseCaseError``. Nothing is retried.
    """

    login_port: LoginPort
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    def __call__(self, request: LoginRequest, done: LoginCallback) -> None:
        reported = False

        def _deliver(outcome: LoginOutcome) -> None:
            nonlocal reported
            if reported:
                self._log.warning("Login port reported more than once for %r", request)
                return
            reported = True
            done(self._normalize(outcome))

        try:
            self.login_port.login(request, _deliver)
        except AssertionError:
            raise
        except Exception as exc:
            # Once reported, the error came from downstream of ``done``.
            if reported:
                raise
            self._log.debug("Login port raised %s", type(exc).__name__)
            _deliver(LoginOutcome.failure(exc))

    @staticmethod
    def _normalize(outcome: LoginOutcome) -> LoginOutcome:
        if outcome.error is None:
            return outcome
        return LoginOutcome.failure(map_login_error(outcome.error))


SubmitLoginFn = Callable[[LoginRequest, LoginCallback], None]

__all__ = ["SubmitLogin", "SubmitLoginFn"]
