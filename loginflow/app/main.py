"""Headless demo that drives the login form and the onboarding carousel.

Runs entirely on mock ports: the login answers from ``LoginMock`` and the
carousel is fast-forwarded on a ``TestClock``. Every state change is logged.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from ..adapters.virtual_clock import TestClock
from ..utils import logging as logging_utils
from ..viewmodels.login_vm import LoginFormConfig, LoginState
from .environment import LoginEnvironment, OnboardingEnvironment, build_login_vm

_log = logging.getLogger(__name__)

DEFAULT_CARDS = ("One", "Two", "Three", "Four", "Five")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for the demo run."""
    parser = argparse.ArgumentParser(description="Run the login/onboarding view models headless.")
    parser.add_argument("--email", default="j@j.dk")
    parser.add_argument("--password", default="12345678")
    parser.add_argument("--fail", metavar="MESSAGE", help="Make the mock login fail with MESSAGE.")
    parser.add_argument("--cap-password", action="store_true", help="Cap passwords at 9 characters.")
    parser.add_argument("--cards", nargs="+", default=list(DEFAULT_CARDS))
    parser.add_argument("--interval", type=float, default=1.0, help="Carousel interval in seconds.")
    parser.add_argument("--advance", type=float, default=3.0, help="Simulated seconds to run the carousel.")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def _log_login_state(state: LoginState) -> None:
    _log.info(
        "login: email=%r submitting=%s error=%r success=%r token=%r",
        state.email,
        state.is_submitting,
        state.last_error,
        state.last_success_message,
        state.auth_token,
    )


def run_login(args: argparse.Namespace) -> LoginState:
    env = LoginEnvironment.unhappy_mock(args.fail) if args.fail else LoginEnvironment.mock()
    config = LoginFormConfig.capped_password() if args.cap_password else None
    vm = build_login_vm(env, config=config, on_change=_log_login_state)
    vm.set_email(args.email)
    vm.set_password(args.password)
    if not vm.is_button_enabled:
        _log.warning("Login button disabled for the given credentials; not submitting.")
        return vm.state
    vm.submit()
    return vm.state


def run_carousel(args: argparse.Namespace) -> List[str]:
    clock = TestClock()
    env = OnboardingEnvironment(clock=clock, interval_s=args.interval)
    shown: List[str] = []
    vm = env.build_carousel_vm(args.cards)
    vm.subscribe(lambda index: shown.append(vm.items[index]))
    vm.start()
    clock.advance(args.advance)
    vm.stop()
    _log.info("carousel: showed %s, resting on %r", shown or "-", vm.current_card)
    return shown


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint for the headless demo."""
    args = _parse_args(argv)
    level = logging_utils.configure_root(logging.INFO, debug=args.verbose)
    _log.debug("Log level %s", logging_utils.level_name(level))
    state = run_login(args)
    run_carousel(args)
    return 0 if state.last_error is None else 1


if __name__ == "__main__":
    raise SystemExit(main())
