"""Login form state, validation, and single-flight submission.

Call context:
    A login view binds its text fields to ``set_email`` / ``set_password``,
    its button to ``submit`` and re-renders from ``subscribe`` callbacks.
    ``loginflow.app.environment.build_login_vm`` wires the collaborators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from loginflow.domain.entities import LoginOutcome, LoginRequest
from loginflow.domain.ports import MainQueuePort, Unsubscribe
from loginflow.usecases.submit_login import SubmitLoginFn

DEFAULT_SUCCESS_MESSAGE = "Hooray!"


@dataclass(frozen=True)
class LoginFormConfig:
    """Field limits and thresholds for the login form."""

    email_max_length: int = 25
    password_max_length: Optional[int] = None
    min_email_length: int = 6
    min_password_length: int = 8
    success_message: str = DEFAULT_SUCCESS_MESSAGE

    @classmethod
    def capped_password(cls, limit: int = 9) -> "LoginFormConfig":
        """Variant that also truncates the password while typing."""
        return cls(password_max_length=limit)


@dataclass(frozen=True)
class LoginState:
    """Snapshot of everything the login view renders."""

    email: str = ""
    password: str = ""
    is_submitting: bool = False
    last_error: Optional[str] = None
    last_success_message: Optional[str] = None
    auth_token: Optional[str] = None


LoginListener = Callable[[LoginState], None]


class LoginVM:
    """Keeps login form UI state and submission flow, no I/O here."""

    def __init__(
        self,
        *,
        submit_login: SubmitLoginFn,
        main_queue: MainQueuePort,
        config: Optional[LoginFormConfig] = None,
        on_change: Optional[LoginListener] = None,
    ) -> None:
        """Bind the login use case and the queue outcomes are reported on.

        Args:
            submit_login: Callable issuing one login and reporting a
                ``LoginOutcome`` (normally ``SubmitLogin``).
            main_queue: Dispatch target outcomes are applied on.
            config: Field limits; defaults to the uncapped-password variant.
            on_change: Optional listener registered at construction.
        """
        self._log = logging.getLogger(__name__)
        self._submit_login = submit_login
        self._main_queue = main_queue
        self.config = config or LoginFormConfig()
        self._state = LoginState()
        self._listeners: List[LoginListener] = []
        self._generation = 0
        self._closed = False
        if on_change is not None:
            self.subscribe(on_change)

    # ------------------------------------------------------------------
    # Properties bridging to the state snapshot
    # ------------------------------------------------------------------
    @property
    def state(self) -> LoginState:
        return self._state

    @property
    def email(self) -> str:
        return self._state.email

    @property
    def password(self) -> str:
        return self._state.password

    @property
    def is_submitting(self) -> bool:
        return self._state.is_submitting

    @property
    def last_error(self) -> Optional[str]:
        return self._state.last_error

    @property
    def last_success_message(self) -> Optional[str]:
        return self._state.last_success_message

    @property
    def auth_token(self) -> Optional[str]:
        return self._state.auth_token

    @property
    def is_button_enabled(self) -> bool:
        state = self._state
        return (
            "." in state.email
            and len(state.email) >= self.config.min_email_length
            and len(state.password) >= self.config.min_password_length
            and not state.is_submitting
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def set_email(self, text: str) -> None:
        self._update(email=text[: self.config.email_max_length])

    def set_password(self, text: str) -> None:
        limit = self.config.password_max_length
        self._update(password=text if limit is None else text[:limit])

    def submit(self) -> None:
        """Start a login unless one is already in flight."""
        if self._closed:
            self._log.debug("submit ignored: view model closed")
            return
        if self._state.is_submitting:
            self._log.debug("submit ignored: login already in flight")
            return

        self._generation += 1
        generation = self._generation
        request = LoginRequest(email=self._state.email, password=self._state.password)
        self._log.debug("Submitting login #%d for %s", generation, request.email)

        def _on_outcome(outcome: LoginOutcome) -> None:
            self._main_queue.schedule(lambda: self._apply_outcome(generation, outcome))

        try:
            self._update(is_submitting=True)
            self._submit_login(request, _on_outcome)
        except Exception:
            # Dispatch failed before the outcome was applied; reopen the form.
            if generation == self._generation and self._state.is_submitting:
                self._update(is_submitting=False)
            raise

    def subscribe(self, listener: LoginListener) -> Unsubscribe:
        """Register ``listener`` for state snapshots after every change."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Tear down: drop listeners and discard any in-flight outcome."""
        self._closed = True
        self._generation += 1
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply_outcome(self, generation: int, outcome: LoginOutcome) -> None:
        if generation != self._generation:
            self._log.debug("Discarding stale login outcome #%d", generation)
            return
        if outcome.error is None:
            token = outcome.token if outcome.token is not None else self._state.auth_token
            self._update(
                is_submitting=False,
                last_error=None,
                last_success_message=self.config.success_message,
                auth_token=token,
            )
            self._log.debug("Login #%d succeeded", generation)
            return

        message = getattr(outcome.error, "message", None) or str(outcome.error)
        self._update(
            is_submitting=False,
            last_error=message,
            last_success_message=None,
        )
        self._log.info("Login failed: %s", message)

    def _update(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)


__all__ = ["DEFAULT_SUCCESS_MESSAGE", "LoginFormConfig", "LoginState", "LoginVM"]
