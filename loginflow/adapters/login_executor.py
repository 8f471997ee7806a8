"""Login port backed by a blocking credential check run on an executor.

The blocking function is supplied by the composition root (for example a
function calling an identity service). This adapter only moves the call off
the UI context; results still have to be re-dispatched by the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from typing import Callable, Optional

from loginflow.adapters.api_errors import ApiError
from loginflow.domain.entities import LoginOutcome, LoginRequest
from loginflow.domain.ports import LoginCallback, LoginPort

BlockingLogin = Callable[[str, str], Optional[str]]


class ExecutorLogin(LoginPort):
    """Run ``fn(email, password)`` on ``executor`` and report via callback."""

    def __init__(self, fn: BlockingLogin, executor: Executor) -> None:
        self._fn = fn
        self._executor = executor
        self._log = logging.getLogger(__name__)

    def login(self, request: LoginRequest, done: LoginCallback) -> None:
        future = self._executor.submit(self._fn, request.email, request.password)
        future.add_done_callback(lambda fut: self._complete(fut, done))

    def _complete(self, future: Future, done: LoginCallback) -> None:
        if future.cancelled():
            self._log.debug("Blocking login was cancelled before it ran")
            done(LoginOutcome.failure(ApiError("Login cancelled before completion.")))
            return
        exc = future.exception()
        if exc is not None:
            self._log.debug("Blocking login raised %s", type(exc).__name__)
            done(LoginOutcome.failure(exc))
            return
        done(LoginOutcome.success(future.result()))


__all__ = ["BlockingLogin", "ExecutorLogin"]
