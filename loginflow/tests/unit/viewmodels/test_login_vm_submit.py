from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from loginflow.adapters.login_mock import DeferredLogin, LoginMock
from loginflow.adapters.main_queue import ImmediateQueue, TestQueue
from loginflow.usecases.submit_login import SubmitLogin
from loginflow.viewmodels.login_vm import DEFAULT_SUCCESS_MESSAGE, LoginState, LoginVM

EXPECTED_EMAIL = "j@j.dk"
EXPECTED_PASSWORD = "12345678"


def _filled_vm(login_port, main_queue) -> LoginVM:
    vm = LoginVM(submit_login=SubmitLogin(login_port), main_queue=main_queue)
    vm.set_email(EXPECTED_EMAIL)
    vm.set_password(EXPECTED_PASSWORD)
    return vm


def test_happy_path_calls_login_once_despite_double_tap() -> None:
    login = LoginMock(token="TheToken")
    queue = TestQueue()
    vm = _filled_vm(login, queue)
    assert vm.is_button_enabled is True

    vm.submit()

    assert vm.is_submitting is True
    assert vm.is_button_enabled is False

    # User taps twice by accident
    vm.submit()
    queue.advance()

    assert login.emails == [EXPECTED_EMAIL]
    assert login.passwords == [EXPECTED_PASSWORD]
    assert vm.last_success_message == DEFAULT_SUCCESS_MESSAGE
    assert vm.auth_token == "TheToken"
    assert vm.last_error is None
    assert vm.is_submitting is False


def test_unhappy_path_surfaces_message_verbatim() -> None:
    login = LoginMock.failing_with("ErrorText", 403)
    queue = TestQueue()
    vm = _filled_vm(login, queue)

    vm.submit()
    assert vm.is_submitting is True
    assert vm.is_button_enabled is False

    queue.advance()

    assert login.emails == [EXPECTED_EMAIL]
    assert vm.last_error == "ErrorText"
    assert vm.auth_token is None
    assert vm.last_success_message is None
    assert vm.is_submitting is False
    assert vm.is_button_enabled is True


def test_request_captures_credentials_at_submit_time() -> None:
    login = DeferredLogin()
    vm = _filled_vm(login, ImmediateQueue())

    vm.submit()
    vm.set_email("other@mail.dk")
    vm.set_password("changed-password")
    request = login.resolve("tok")

    assert request.email == EXPECTED_EMAIL
    assert request.password == EXPECTED_PASSWORD
    assert vm.email == "other@mail.dk"
    assert vm.auth_token == "tok"


def test_outcome_is_applied_only_through_main_queue() -> None:
    login = DeferredLogin()
    queue = TestQueue()
    vm = _filled_vm(login, queue)

    vm.submit()
    login.resolve("tok")

    assert vm.is_submitting is True
    assert queue.pending_count == 1

    queue.advance()

    assert vm.is_submitting is False
    assert vm.auth_token == "tok"


def test_resubmit_allowed_after_failure_and_success_clears_error() -> None:
    login = DeferredLogin()
    vm = _filled_vm(login, ImmediateQueue())

    vm.submit()
    login.reject(RuntimeError("Network down"))
    assert vm.last_error == "Network down"

    vm.submit()
    login.resolve("second")

    assert len(login.requests) == 2
    assert vm.last_error is None
    assert vm.auth_token == "second"


def test_failure_keeps_existing_token() -> None:
    login = DeferredLogin()
    vm = _filled_vm(login, ImmediateQueue())
    vm.submit()
    login.resolve("first")

    vm.submit()
    login.reject(RuntimeError("nope"))

    assert vm.auth_token == "first"
    assert vm.last_error == "nope"
    assert vm.last_success_message is None


def test_success_without_token_keeps_previous_token() -> None:
    login = DeferredLogin()
    vm = _filled_vm(login, ImmediateQueue())
    vm.submit()
    login.resolve("first")

    vm.submit()
    login.resolve(None)

    assert vm.auth_token == "first"
    assert vm.last_success_message == DEFAULT_SUCCESS_MESSAGE


def test_subscribers_receive_each_state_change() -> None:
    listener = MagicMock()
    vm = LoginVM(
        submit_login=SubmitLogin(LoginMock(token="T")), main_queue=ImmediateQueue(), on_change=listener
    )

    vm.set_email(EXPECTED_EMAIL)
    vm.set_password(EXPECTED_PASSWORD)
    vm.submit()

    states = [call.args[0] for call in listener.call_args_list]
    assert all(isinstance(state, LoginState) for state in states)
    assert [state.is_submitting for state in states] == [False, False, True, False]
    assert states[-1].auth_token == "T"


def test_unsubscribed_listener_stops_receiving_updates() -> None:
    listener = MagicMock()
    vm = LoginVM(submit_login=SubmitLogin(LoginMock()), main_queue=ImmediateQueue())
    unsubscribe = vm.subscribe(listener)

    vm.set_email("a@b.dk")
    unsubscribe()
    vm.set_email("c@d.dk")

    listener.assert_called_once()


def test_setting_same_value_does_not_notify() -> None:
    listener = MagicMock()
    vm = LoginVM(
        submit_login=SubmitLogin(LoginMock()), main_queue=ImmediateQueue(), on_change=listener
    )

    vm.set_email("a@b.dk")
    vm.set_email("a@b.dk")

    listener.assert_called_once()


def test_close_discards_in_flight_outcome() -> None:
    login = DeferredLogin()
    listener = MagicMock()
    vm = _filled_vm(login, ImmediateQueue())
    vm.submit()
    vm.subscribe(listener)

    vm.close()
    login.resolve("late")

    assert vm.auth_token is None
    assert vm.last_success_message is None
    listener.assert_not_called()


def test_submit_after_close_is_ignored() -> None:
    login = DeferredLogin()
    vm = _filled_vm(login, ImmediateQueue())

    vm.close()
    vm.submit()

    assert login.requests == []
    assert vm.is_submitting is False


def test_listener_error_on_success_propagates_without_duplicate_report(caplog) -> None:
    def _listener(state: LoginState) -> None:
        if state.auth_token == "T":
            raise KeyError("render failed")

    vm = _filled_vm(LoginMock(token="T"), ImmediateQueue())
    vm.subscribe(_listener)

    with caplog.at_level("WARNING"), pytest.raises(KeyError):
        vm.submit()

    assert vm.is_submitting is False
    assert vm.auth_token == "T"
    assert vm.last_error is None
    assert "more than once" not in caplog.text


def test_failed_dispatch_reopens_the_form() -> None:
    class _BrokenQueue:
        def schedule(self, callback) -> None:
            raise RuntimeError("main loop gone")

    login = LoginMock()
    vm = _filled_vm(login, _BrokenQueue())

    with pytest.raises(RuntimeError):
        vm.submit()

    assert vm.is_submitting is False
    assert vm.is_button_enabled is True

    with pytest.raises(RuntimeError):
        vm.submit()
    assert len(login.requests) == 2
