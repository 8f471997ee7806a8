from __future__ import annotations

from loginflow.adapters.api_errors import ApiClientError, ApiServerError, ApiTimeoutError
from loginflow.domain.errors import LoginFailed
from loginflow.domain.ports import UseCaseError
from loginflow.usecases.error_mapping import map_login_error


def test_client_error_message_is_kept_verbatim() -> None:
    err = map_login_error(ApiClientError("ErrorText", status=403))

    assert isinstance(err, LoginFailed)
    assert err.message == "ErrorText"
    assert err.status == 403
    assert err.code == "LOGIN_FAILED"


def test_server_error_message_is_kept_verbatim() -> None:
    err = map_login_error(ApiServerError("Backend exploded", status=502))

    assert err.message == "Backend exploded"
    assert err.status == 502


def test_timeout_gets_its_own_code() -> None:
    err = map_login_error(ApiTimeoutError("Request timed out."))

    assert err.code == "REQUEST_TIMEOUT"
    assert err.message == "Request timed out."


def test_use_case_errors_pass_through() -> None:
    original = UseCaseError("CUSTOM", "Keep me")

    assert map_login_error(original) is original


def test_unknown_exception_uses_its_text_or_default() -> None:
    assert map_login_error(RuntimeError("socket closed")).message == "socket closed"
    assert map_login_error(RuntimeError()).message == "Unexpected error."
    assert map_login_error(RuntimeError(), default_message="Try again").message == "Try again"
